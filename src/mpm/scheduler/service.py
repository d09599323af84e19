"""Validated entry points to the scheduling engine."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .config import ScheduleMode, SchedulingConfig
from .core import ScheduleResult, Task, Trace
from .engine import ScheduleEngine
from .validator import validate_tasks

if TYPE_CHECKING:
    from mpm.project import Project


def compute_schedule(
    tasks: Sequence[Task], config: SchedulingConfig | None = None
) -> ScheduleResult:
    """Validate the tasks and compute the full schedule.

    Raises:
        ValidationError: If the task list is empty or not a well-formed DAG
    """
    validate_tasks(tasks)
    return ScheduleEngine(tasks, config).run()


def compute_trace(tasks: Sequence[Task], config: SchedulingConfig | None = None) -> Trace:
    """Validate the tasks and compute the step-by-step trace.

    Raises:
        ValidationError: If the task list is empty or not a well-formed DAG
    """
    validate_tasks(tasks)
    return ScheduleEngine(tasks, config, record=True).run_trace()


def run(
    tasks: Sequence[Task],
    mode: ScheduleMode = ScheduleMode.FULL,
    config: SchedulingConfig | None = None,
) -> ScheduleResult | Trace:
    """Compute a ScheduleResult or a Trace depending on ``mode``."""
    if mode == ScheduleMode.TRACE:
        return compute_trace(tasks, config)
    return compute_schedule(tasks, config)


class SchedulingService:
    """Schedules the current state of a Project.

    Holds no results between calls; every call re-reads the project's
    task list, so edits made between calls are always picked up.
    """

    def __init__(self, project: "Project", config: SchedulingConfig | None = None):
        """Initialize the service.

        Args:
            project: Project whose tasks will be scheduled
            config: Optional scheduling configuration
        """
        self.project = project
        self.config = config or SchedulingConfig()

    def validate(self) -> None:
        validate_tasks(self.project.tasks)

    def schedule(self) -> ScheduleResult:
        return compute_schedule(self.project.tasks, self.config)

    def trace(self) -> Trace:
        return compute_trace(self.project.tasks, self.config)
