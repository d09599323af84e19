"""Forward pass: early start and early finish."""

from __future__ import annotations

from mpm.logger import get_logger

from ..core import GraphInconsistency
from ..state import TaskState
from .base import RelaxationPass

logger = get_logger()


class ForwardPass(RelaxationPass):
    """Computes early start/finish in dependency order, then the project duration.

    A task is ready once every predecessor has been resolved. A task with no
    predecessors starts at 0; any other task starts at the latest early
    finish among its predecessors.
    """

    name = "forward"

    def run(self) -> tuple[int, GraphInconsistency | None]:
        """Run the pass.

        Returns:
            Tuple of (project_duration, inconsistency or None)
        """
        inconsistency = self._relax()
        project_duration = max((s.early_finish for s in self.table.states), default=0)

        logger.assignments(f"Project duration = {project_duration}")
        self.recorder.record(
            "Project Duration",
            f"Project Duration = max(Early Finish of all tasks) = {project_duration}",
            [s.id for s in self.table.states if s.early_finish == project_duration],
        )
        return project_duration, inconsistency

    def _dependencies(self, state: TaskState) -> list[str]:
        return state.predecessors

    def _resolve(self, state: TaskState) -> None:
        predecessors = list(dict.fromkeys(state.predecessors))
        if not predecessors:
            state.early_start = 0
            self.recorder.record(
                f"Forward Pass - Task {state.id}",
                f"Task {state.id} has no predecessors, so Early Start = 0",
                [state.id],
            )
        else:
            max_ef = max(self.table.by_id[pred_id].early_finish for pred_id in predecessors)
            state.early_start = max_ef
            self.recorder.record(
                f"Forward Pass - Task {state.id}",
                f"Early Start = max(Early Finish of predecessors: {', '.join(predecessors)}) "
                f"= {max_ef}",
                [state.id, *predecessors],
            )
        self._finish(state)

    def _fallback(self, state: TaskState) -> None:
        # Only predecessors that were actually resolved contribute
        known = [
            self.table.by_id[pred_id].early_finish
            for pred_id in dict.fromkeys(state.predecessors)
            if pred_id in self.resolved
        ]
        state.early_start = max(known, default=0)
        self.recorder.record(
            f"Forward Pass - Task {state.id} (fallback)",
            f"Task {state.id} could not be resolved; Early Start = max(Early Finish of "
            f"resolved predecessors) = {state.early_start}",
            [state.id],
        )
        self._finish(state)

    def _finish(self, state: TaskState) -> None:
        state.early_finish = state.early_start + state.duration
        logger.assignments(f"  {state.id}: ES = {state.early_start}, EF = {state.early_finish}")
        self.recorder.record(
            f"Forward Pass - Task {state.id} Finish",
            f"Early Finish = Early Start + Duration = {state.early_start} + {state.duration} "
            f"= {state.early_finish}",
            [state.id],
        )
