"""Step-mode recording and playback."""

from __future__ import annotations

from collections.abc import Iterable

from .core import ScheduledTask, ScheduleResult, Trace, TraceStep
from .state import WorkingTable


class NullRecorder:
    """Recorder used in full mode: discards every step."""

    def record(self, title: str, description: str, highlight: Iterable[str]) -> None:
        pass


class TraceRecorder:
    """Appends an immutable snapshot of the working table for each state change.

    Steps are numbered from 1 and are never edited once appended.
    """

    def __init__(self, table: WorkingTable):
        self.table = table
        self._steps: list[TraceStep] = []

    def record(self, title: str, description: str, highlight: Iterable[str]) -> None:
        self._steps.append(
            TraceStep(
                step=len(self._steps) + 1,
                title=title,
                description=description,
                tasks=self.table.snapshot(),
                highlight=tuple(dict.fromkeys(highlight)),
            )
        )

    @property
    def steps(self) -> tuple[TraceStep, ...]:
        return tuple(self._steps)


def finalize(trace: Trace) -> ScheduleResult:
    """Extract the final ScheduleResult from the last step of a trace."""
    if not trace.steps:
        raise ValueError("Cannot finalize an empty trace")
    tasks = trace.steps[-1].tasks
    return ScheduleResult(
        tasks=list(tasks),
        project_duration=max((task.early_finish for task in tasks), default=0),
        critical_path=[task.id for task in tasks if task.is_critical],
        inconsistencies=list(trace.inconsistencies),
    )


class StepPlayer:
    """Playback position over a trace.

    The player is at step ``index`` (0-based). ``advance`` and ``retreat``
    move one step and clamp at the ends; ``exit`` leaves step mode and
    snaps to the final result, after which the player stays on the last
    step. Project duration and critical path are only confirmed once the
    last step has been reached or playback has exited.
    """

    def __init__(self, trace: Trace):
        if not trace.steps:
            raise ValueError("Cannot play back an empty trace")
        self.trace = trace
        self.index = 0
        self.active = True

    @property
    def current(self) -> TraceStep:
        return self.trace.steps[self.index]

    @property
    def at_end(self) -> bool:
        return self.index == len(self.trace.steps) - 1

    @property
    def confirmed(self) -> bool:
        return self.at_end or not self.active

    def advance(self) -> TraceStep:
        """Move one step forward; a no-op once playback has exited."""
        if not self.active:
            return self.current
        self.index = min(self.index + 1, len(self.trace.steps) - 1)
        return self.current

    def retreat(self) -> TraceStep:
        """Move one step back; a no-op once playback has exited."""
        if not self.active:
            return self.current
        self.index = max(self.index - 1, 0)
        return self.current

    def exit(self) -> ScheduleResult:
        """Leave step mode and return the final confirmed result."""
        self.active = False
        self.index = len(self.trace.steps) - 1
        return finalize(self.trace)

    @property
    def tasks(self) -> tuple[ScheduledTask, ...]:
        return self.current.tasks

    @property
    def project_duration(self) -> int:
        """Project duration once confirmed, else 0."""
        if not self.confirmed:
            return 0
        return finalize(self.trace).project_duration

    @property
    def critical_path(self) -> list[str]:
        """Critical path once confirmed, else empty."""
        if not self.confirmed:
            return []
        return finalize(self.trace).critical_path
