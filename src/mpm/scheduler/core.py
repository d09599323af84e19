"""Core dataclasses for the MPM scheduling engine."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_str_list() -> list[str]:
    return []


@dataclass
class Task:
    """A task in the project network (caller-owned, mutable)."""

    id: str
    name: str
    duration: int  # Non-negative, in time units
    predecessors: list[str] = field(default_factory=_default_str_list)  # Order kept for display


@dataclass(frozen=True)
class ScheduledTask:
    """A task together with its derived schedule fields.

    Instances are immutable so that trace snapshots can never be altered
    after they are taken.
    """

    id: str
    name: str
    duration: int
    predecessors: tuple[str, ...]
    early_start: int = 0
    early_finish: int = 0
    late_start: int = 0
    late_finish: int = 0
    total_float: int = 0
    is_critical: bool = False


@dataclass(frozen=True)
class GraphInconsistency:
    """A relaxation pass stalled and a fallback was applied.

    This only happens on input that bypassed validation (cycles or
    dangling references reaching the engine).
    """

    pass_name: str  # "forward" or "backward"
    task_ids: tuple[str, ...]  # Tasks resolved by the fallback
    rounds: int  # Rounds completed before the stall

    def describe(self) -> str:
        ids = ", ".join(self.task_ids)
        return (
            f"{self.pass_name.capitalize()} pass stalled after {self.rounds} round(s); "
            f"fallback values assigned to: {ids}"
        )


@dataclass(frozen=True)
class ScheduleResult:
    """Complete result of a schedule computation."""

    tasks: list[ScheduledTask]
    project_duration: int
    critical_path: list[str]
    inconsistencies: list[GraphInconsistency] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        """True unless a fallback had to be applied."""
        return not self.inconsistencies

    def get_task(self, task_id: str) -> ScheduledTask:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise KeyError(task_id)


@dataclass(frozen=True)
class TraceStep:
    """One recorded micro-operation of the algorithm."""

    step: int  # 1-based
    title: str
    description: str
    tasks: tuple[ScheduledTask, ...]  # Snapshot of every task at this point
    highlight: tuple[str, ...]  # The task acted upon plus the tasks it referenced


@dataclass(frozen=True)
class Trace:
    """Ordered, replayable sequence of trace steps."""

    steps: tuple[TraceStep, ...]
    inconsistencies: tuple[GraphInconsistency, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> TraceStep:
        return self.steps[index]
