"""Plain-text and markdown rendering of schedule results."""

from __future__ import annotations

from collections.abc import Sequence

from .scheduler.core import ScheduledTask, ScheduleResult, TraceStep
from .unified_config import ReportFormat

HEADERS = ["Task", "Duration", "Predecessors", "ES", "EF", "LS", "LF", "Float", "Critical"]


def _row(task: ScheduledTask) -> list[str]:
    return [
        task.name,
        str(task.duration),
        ", ".join(task.predecessors) or "-",
        str(task.early_start),
        str(task.early_finish),
        str(task.late_start),
        str(task.late_finish),
        str(task.total_float),
        "Yes" if task.is_critical else "No",
    ]


def format_results_table(
    tasks: Sequence[ScheduledTask], style: ReportFormat = ReportFormat.TEXT
) -> str:
    """Render one row per task with every derived field."""
    rows = [_row(task) for task in tasks]

    if style == ReportFormat.MARKDOWN:
        lines = ["| " + " | ".join(HEADERS) + " |"]
        lines.append("|" + "|".join("---" for _ in HEADERS) + "|")
        lines.extend("| " + " | ".join(row) + " |" for row in rows)
        return "\n".join(lines)

    widths = [max(len(cell) for cell in column) for column in zip(HEADERS, *rows)]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(HEADERS, widths)).rstrip()]
    lines.append("  ".join("-" * width for width in widths))
    for row in rows:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
    return "\n".join(lines)


def format_summary(result: ScheduleResult) -> str:
    lines = [
        f"Project duration: {result.project_duration}",
        f"Critical path: {' → '.join(result.critical_path) or '(none)'}",
    ]
    for inconsistency in result.inconsistencies:
        lines.append(f"WARNING: {inconsistency.describe()}")
    return "\n".join(lines)


def format_schedule(result: ScheduleResult, style: ReportFormat = ReportFormat.TEXT) -> str:
    """Results table followed by the summary."""
    return f"{format_results_table(result.tasks, style)}\n\n{format_summary(result)}"


def format_trace_step(
    step: TraceStep, total: int, style: ReportFormat = ReportFormat.TEXT
) -> str:
    """Render one trace step: header, description, highlighted tasks and table."""
    lines = [f"Step {step.step}/{total}: {step.title}", step.description]
    if step.highlight:
        lines.append(f"Highlighted: {', '.join(step.highlight)}")
    lines.append("")
    lines.append(format_results_table(step.tasks, style))
    return "\n".join(lines)
