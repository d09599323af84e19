"""Round-based relaxation shared by the forward and backward passes."""

from __future__ import annotations

from mpm.exceptions import InconsistentGraphError
from mpm.logger import checks_enabled, get_logger

from ..config import EngineConfig, InconsistencyPolicy
from ..core import GraphInconsistency
from ..protocols import StepRecorder
from ..state import TaskState, WorkingTable

logger = get_logger()


class RelaxationPass:
    """Process any task whose dependencies are finalized; repeat until done.

    Each round visits the pending tasks in input order and resolves every
    task that is ready. The pass stops when nothing is pending, when a round
    resolves nothing, or when the round guard (iteration_factor x task
    count) is reached. A stall leaves tasks unresolved; depending on the
    policy they are either given fallback values and reported as a
    GraphInconsistency, or an InconsistentGraphError is raised.
    """

    name = "relaxation"

    def __init__(self, table: WorkingTable, recorder: StepRecorder, config: EngineConfig):
        self.table = table
        self.recorder = recorder
        self.config = config
        self.resolved: set[str] = set()
        self.max_rounds = max(1, config.iteration_factor * len(table))

    def _seed(self) -> list[TaskState]:
        """Resolve tasks that need no relaxation; return the rest in input order."""
        return list(self.table.states)

    def _is_ready(self, state: TaskState) -> bool:
        return all(dep in self.resolved for dep in self._dependencies(state))

    def _resolve(self, state: TaskState) -> None:
        raise NotImplementedError

    def _dependencies(self, state: TaskState) -> list[str]:
        """IDs this task waits on in the current pass."""
        raise NotImplementedError

    def _fallback(self, state: TaskState) -> None:
        raise NotImplementedError

    def _relax(self) -> GraphInconsistency | None:
        pending = self._seed()
        rounds = 0
        verbose = checks_enabled()

        while pending and rounds < self.max_rounds:
            still_pending: list[TaskState] = []
            for state in pending:
                if self._is_ready(state):
                    self._resolve(state)
                    self.resolved.add(state.id)
                else:
                    if verbose:
                        deps = self._dependencies(state)
                        waiting = [dep for dep in deps if dep not in self.resolved]
                        logger.checks(
                            f"  {self.name} pass: {state.id} waiting on dependencies "
                            f"({', '.join(waiting)})"
                        )
                    still_pending.append(state)

            rounds += 1
            progress = len(still_pending) < len(pending)
            pending = still_pending
            if not progress:
                break

        if not pending:
            return None
        return self._stall(pending, rounds)

    def _stall(self, pending: list[TaskState], rounds: int) -> GraphInconsistency:
        task_ids = [state.id for state in pending]
        if self.config.on_inconsistent == InconsistencyPolicy.RAISE:
            raise InconsistentGraphError(
                f"{self.name.capitalize()} pass made no progress after {rounds} round(s); "
                f"unresolved tasks: {', '.join(task_ids)}",
                task_ids,
            )

        logger.warning(
            f"{self.name.capitalize()} pass stalled after {rounds} round(s); "
            f"applying fallback to {', '.join(task_ids)}"
        )
        for state in pending:
            self._fallback(state)
            self.resolved.add(state.id)

        return GraphInconsistency(pass_name=self.name, task_ids=tuple(task_ids), rounds=rounds)
