"""The MPM scheduling engine: forward pass, backward pass, float."""

from __future__ import annotations

from collections.abc import Sequence

from mpm.logger import get_logger

from .config import SchedulingConfig
from .core import GraphInconsistency, ScheduleResult, Task, Trace
from .passes import BackwardPass, ForwardPass, derive_float
from .protocols import StepRecorder
from .state import WorkingTable
from .trace import NullRecorder, TraceRecorder

logger = get_logger()


class ScheduleEngine:
    """Runs one MPM computation over a private copy of the task list.

    The engine does not validate its input; use the functions in
    ``mpm.scheduler.service`` for the validated entry points. Feeding it a
    graph with cycles or dangling references makes a pass stall, which is
    handled according to ``config.engine.on_inconsistent``.

    An engine instance is single-use: construct a new one for every run.
    """

    def __init__(
        self,
        tasks: Sequence[Task],
        config: SchedulingConfig | None = None,
        *,
        record: bool = False,
    ):
        """Initialize the engine.

        Args:
            tasks: Tasks to schedule (deep-copied; the caller may keep editing them)
            config: Optional scheduling configuration
            record: Capture a TraceStep for every state change
        """
        self.config = config or SchedulingConfig()
        self.table = WorkingTable(tasks)
        self._trace_recorder = TraceRecorder(self.table) if record else None
        self.recorder: StepRecorder = self._trace_recorder or NullRecorder()
        self.inconsistencies: list[GraphInconsistency] = []
        self._ran = False

    def run(self) -> ScheduleResult:
        """Compute the full schedule."""
        if self._ran:
            raise RuntimeError("ScheduleEngine instances are single-use")
        self._ran = True

        logger.debug(f"Scheduling {len(self.table)} task(s)")
        if self._trace_recorder is not None and self.config.trace.include_initial_step:
            self.recorder.record(
                "Initialize Tasks",
                "Set all early start, early finish, late start, and late finish values to 0",
                [],
            )

        logger.assignments("Forward pass")
        project_duration, inconsistency = ForwardPass(
            self.table, self.recorder, self.config.engine
        ).run()
        if inconsistency:
            self.inconsistencies.append(inconsistency)

        logger.assignments("Backward pass")
        inconsistency = BackwardPass(
            self.table, self.recorder, self.config.engine, project_duration
        ).run()
        if inconsistency:
            self.inconsistencies.append(inconsistency)

        critical_path = derive_float(self.table, self.recorder)

        return ScheduleResult(
            tasks=list(self.table.snapshot()),
            project_duration=project_duration,
            critical_path=critical_path,
            inconsistencies=list(self.inconsistencies),
        )

    def run_trace(self) -> Trace:
        """Compute the schedule and return the recorded steps."""
        if self._trace_recorder is None:
            raise RuntimeError("Engine was created without record=True")
        self.run()
        return Trace(
            steps=self._trace_recorder.steps,
            inconsistencies=tuple(self.inconsistencies),
        )
