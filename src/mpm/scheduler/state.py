"""Per-invocation working table of derived task fields."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass

from .core import ScheduledTask, Task


@dataclass
class TaskState:
    """Mutable derived fields of one task during a single engine run."""

    task: Task
    early_start: int = 0
    early_finish: int = 0
    late_start: int = 0
    late_finish: int = 0
    total_float: int = 0
    is_critical: bool = False

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def duration(self) -> int:
        return self.task.duration

    @property
    def predecessors(self) -> list[str]:
        return self.task.predecessors

    def freeze(self) -> ScheduledTask:
        """Copy the current values into an immutable ScheduledTask."""
        return ScheduledTask(
            id=self.task.id,
            name=self.task.name,
            duration=self.task.duration,
            predecessors=tuple(self.task.predecessors),
            early_start=self.early_start,
            early_finish=self.early_finish,
            late_start=self.late_start,
            late_finish=self.late_finish,
            total_float=self.total_float,
            is_critical=self.is_critical,
        )


class WorkingTable:
    """Working set for one engine invocation.

    The input tasks are deep-copied so that edits made by the caller after
    the call (or during a later call) never reach this table.
    """

    def __init__(self, tasks: Sequence[Task]):
        self.states = [TaskState(task=copy.deepcopy(task)) for task in tasks]
        self.by_id = {state.id: state for state in self.states}
        self.successors = self._build_successors()

    def _build_successors(self) -> dict[str, list[str]]:
        """Map each task ID to the tasks that list it as a predecessor, in input order."""
        successors: dict[str, list[str]] = {state.id: [] for state in self.states}
        for state in self.states:
            for pred_id in dict.fromkeys(state.predecessors):
                if pred_id in successors and state.id not in successors[pred_id]:
                    successors[pred_id].append(state.id)
        return successors

    def __len__(self) -> int:
        return len(self.states)

    def snapshot(self) -> tuple[ScheduledTask, ...]:
        return tuple(state.freeze() for state in self.states)
