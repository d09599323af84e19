"""Backward pass: late finish and late start."""

from __future__ import annotations

from mpm.logger import get_logger

from ..config import EngineConfig
from ..core import GraphInconsistency
from ..protocols import StepRecorder
from ..state import TaskState, WorkingTable
from .base import RelaxationPass

logger = get_logger()


class BackwardPass(RelaxationPass):
    """Computes late finish/start working back from the project end.

    Terminal tasks (no successors) finish at the project duration. Every
    other task becomes ready once all its successors are resolved and
    finishes at the earliest late start among them.
    """

    name = "backward"

    def __init__(
        self,
        table: WorkingTable,
        recorder: StepRecorder,
        config: EngineConfig,
        project_duration: int,
    ):
        super().__init__(table, recorder, config)
        self.project_duration = project_duration

    def run(self) -> GraphInconsistency | None:
        """Run the pass, returning the inconsistency if a fallback was needed."""
        return self._relax()

    def _seed(self) -> list[TaskState]:
        pending: list[TaskState] = []
        for state in self.table.states:
            if self.table.successors[state.id]:
                pending.append(state)
                continue
            self._set_late(state, self.project_duration)
            self.resolved.add(state.id)
            self.recorder.record(
                f"Backward Pass - Task {state.id}",
                f"Task {state.id} is a final task. Late Finish = Project Duration = "
                f"{state.late_finish}, Late Start = {state.late_finish} - {state.duration} "
                f"= {state.late_start}",
                [state.id],
            )
        return pending

    def _dependencies(self, state: TaskState) -> list[str]:
        return self.table.successors[state.id]

    def _resolve(self, state: TaskState) -> None:
        successors = self.table.successors[state.id]
        min_ls = min(self.table.by_id[succ_id].late_start for succ_id in successors)
        self._set_late(state, min_ls)
        self.recorder.record(
            f"Backward Pass - Task {state.id}",
            f"Late Finish = min(Late Start of successors: {', '.join(successors)}) = {min_ls}, "
            f"Late Start = {state.late_finish} - {state.duration} = {state.late_start}",
            [state.id, *successors],
        )

    def _fallback(self, state: TaskState) -> None:
        self._set_late(state, self.project_duration)
        self.recorder.record(
            f"Backward Pass - Task {state.id} (fallback)",
            f"Task {state.id} could not be resolved; Late Finish = Project Duration = "
            f"{state.late_finish}, Late Start = {state.late_finish} - {state.duration} "
            f"= {state.late_start}",
            [state.id],
        )

    def _set_late(self, state: TaskState, late_finish: int) -> None:
        state.late_finish = late_finish
        state.late_start = late_finish - state.duration
        logger.assignments(f"  {state.id}: LF = {state.late_finish}, LS = {state.late_start}")
