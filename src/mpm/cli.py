"""Command-line interface for MPM."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import context
from .exceptions import MpmError
from .graph import GraphGenerator
from .loader import load_project
from .logger import setup_logger
from .project import Project
from .report import format_schedule, format_trace_step
from .scheduler import SchedulingService
from .unified_config import ReportFormat, UnifiedConfig, discover_config

app = typer.Typer(
    name="mpm",
    help="Metra Potential Method - critical path analysis of project networks",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=warnings only (default), 1=assignments, 2=checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: mpm_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for mpm commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load(file: Path) -> tuple[Project, UnifiedConfig]:
    """Load the task file and its configuration, exiting on errors."""
    try:
        config = discover_config(file)
        project = load_project(file)
    except (MpmError, FileNotFoundError) as e:
        raise _fail(str(e)) from None
    return project, config


def _write(text: str, output: Path | None, what: str) -> None:
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"{what} written to {output}")
    else:
        typer.echo(text)


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
) -> None:
    """Check that the task list is a well-formed DAG."""
    project, config = _load(file)
    try:
        SchedulingService(project, config.scheduling).validate()
    except MpmError as e:
        raise _fail(str(e)) from None
    typer.echo(f"OK: {len(project.tasks)} task(s)")


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
    *,
    format: Annotated[  # noqa: A002 - 'format' is appropriate name for CLI option
        ReportFormat | None,
        typer.Option("--format", "-f", help="Table style (default from config: text)"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Compute early/late dates, float and the critical path."""
    project, config = _load(file)
    try:
        result = SchedulingService(project, config.scheduling).schedule()
    except MpmError as e:
        raise _fail(str(e)) from None

    style = format or config.report.format
    _write(format_schedule(result, style), output, "Schedule")


@app.command()
def trace(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
    *,
    step: Annotated[
        int | None, typer.Option("--step", "-s", help="Show only this step (1-based)", min=1)
    ] = None,
    format: Annotated[  # noqa: A002 - 'format' is appropriate name for CLI option
        ReportFormat | None,
        typer.Option("--format", "-f", help="Table style (default from config: text)"),
    ] = None,
) -> None:
    """Print the step-by-step computation."""
    project, config = _load(file)
    try:
        steps = SchedulingService(project, config.scheduling).trace().steps
    except MpmError as e:
        raise _fail(str(e)) from None

    style = format or config.report.format
    if step is not None:
        if step > len(steps):
            raise _fail(f"Step {step} out of range (trace has {len(steps)} steps)")
        typer.echo(format_trace_step(steps[step - 1], len(steps), style))
        return

    typer.echo("\n\n".join(format_trace_step(s, len(steps), style) for s in steps))


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="Path to the task YAML file")] = Path("tasks.yaml"),
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate the MPM network in DOT format."""
    project, config = _load(file)
    try:
        result = SchedulingService(project, config.scheduling).schedule()
    except MpmError as e:
        raise _fail(str(e)) from None

    dot_output = GraphGenerator(result.tasks, result.project_duration).generate()
    _write(dot_output, output, "Graph")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
