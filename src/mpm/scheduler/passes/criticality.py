"""Total float and critical-path derivation."""

from mpm.logger import get_logger

from ..protocols import StepRecorder
from ..state import WorkingTable

logger = get_logger()


def derive_float(table: WorkingTable, recorder: StepRecorder) -> list[str]:
    """Set total float and criticality on every task.

    Must run after both passes. Returns the critical task IDs in input order.
    """
    for state in table.states:
        state.total_float = state.late_start - state.early_start
        state.is_critical = state.total_float == 0

    critical = [state.id for state in table.states if state.is_critical]
    logger.assignments(f"Critical path: {', '.join(critical) or '(none)'}")
    recorder.record(
        "Calculate Total Float",
        "Total Float = Late Start - Early Start. Tasks with 0 float are on the critical path.",
        critical,
    )
    return critical
