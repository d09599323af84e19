"""Well-formedness checks run before any scheduling."""

from collections.abc import Sequence

from mpm.exceptions import (
    CircularDependencyError,
    DuplicateTaskError,
    EmptyInputError,
    InvalidDurationError,
    MissingReferenceError,
)
from mpm.logger import get_logger

from .core import Task

logger = get_logger()


class TaskGraphValidator:
    """Checks that a task list forms a DAG over known task IDs.

    The checks run in a fixed order and the first failure is raised:
    empty input, duplicate IDs, durations, cycles, dangling references.
    """

    def __init__(self, tasks: Sequence[Task]):
        self.tasks = list(tasks)
        self._by_id = {task.id: task for task in self.tasks}

    def validate(self) -> None:
        """Raise a ValidationError subclass if the task list is not schedulable."""
        if not self.tasks:
            raise EmptyInputError()
        self._check_duplicates()
        self._check_durations()
        self._check_cycles()
        self._check_references()
        logger.debug(f"Validated {len(self.tasks)} task(s)")

    def _check_duplicates(self) -> None:
        seen: set[str] = set()
        for task in self.tasks:
            if task.id in seen:
                raise DuplicateTaskError(f"Task ID {task.id} is used more than once", task.id)
            seen.add(task.id)

    def _check_durations(self) -> None:
        for task in self.tasks:
            # bool is an int subclass but never a duration
            if isinstance(task.duration, bool) or not isinstance(task.duration, int):
                raise InvalidDurationError(
                    f"Duration of task {task.id} must be an integer, got {task.duration!r}",
                    task.id,
                    task.duration,
                )
            if task.duration < 0:
                raise InvalidDurationError(
                    f"Duration of task {task.id} must be non-negative, got {task.duration}",
                    task.id,
                    task.duration,
                )

    def _check_cycles(self) -> None:
        """Depth-first search over predecessor edges with an on-stack set.

        Iterative so that long chains do not hit the recursion limit.
        Unknown predecessor IDs are skipped here and reported by
        _check_references.
        """
        visited: set[str] = set()
        on_stack: set[str] = set()

        for root in self.tasks:
            if root.id in visited:
                continue

            path: list[str] = [root.id]
            stack = [iter(root.predecessors)]
            visited.add(root.id)
            on_stack.add(root.id)

            while stack:
                pred_id = next(stack[-1], None)
                if pred_id is None:
                    stack.pop()
                    on_stack.discard(path.pop())
                    continue

                if pred_id in on_stack:
                    cycle = path[path.index(pred_id) :] + [pred_id]
                    raise CircularDependencyError(
                        f"Circular dependency detected involving task {pred_id}: "
                        f"{' -> '.join(cycle)}",
                        pred_id,
                        cycle,
                    )
                if pred_id in visited or pred_id not in self._by_id:
                    continue

                visited.add(pred_id)
                on_stack.add(pred_id)
                path.append(pred_id)
                stack.append(iter(self._by_id[pred_id].predecessors))

    def _check_references(self) -> None:
        for task in self.tasks:
            for pred_id in task.predecessors:
                if pred_id not in self._by_id:
                    raise MissingReferenceError(
                        f"Task {task.id} references non-existent predecessor {pred_id}",
                        task.id,
                        pred_id,
                    )


def validate_tasks(tasks: Sequence[Task]) -> None:
    """Validate a task list, raising on the first problem found."""
    TaskGraphValidator(tasks).validate()
