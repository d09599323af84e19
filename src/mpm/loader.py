"""YAML task file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .project import Project
from .scheduler.core import Task
from .schemas import ProjectSchema, TaskSchema


def _to_task(task_id: str, schema: TaskSchema) -> Task:
    return Task(
        id=task_id,
        name=schema.name or task_id,
        duration=schema.duration,
        predecessors=list(schema.predecessors),
    )


def parse_project(data: dict[str, Any]) -> Project:
    """Build a Project from already-parsed YAML data.

    The result is not validated as a graph; dangling references and cycles
    are reported when the project is scheduled.
    """
    try:
        schema = ProjectSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid task file: {e}") from e

    tasks: list[Task] = []
    if isinstance(schema.tasks, dict):
        for task_id, task_schema in schema.tasks.items():
            if task_schema.id is not None and task_schema.id != str(task_id):
                raise ParseError(
                    f"Task key '{task_id}' does not match its id field '{task_schema.id}'"
                )
            tasks.append(_to_task(str(task_id), task_schema))
    else:
        for index, task_schema in enumerate(schema.tasks):
            if not task_schema.id:
                raise ParseError(f"Task #{index + 1} is missing an 'id'")
            tasks.append(_to_task(task_schema.id, task_schema))

    return Project(name=schema.metadata.name, tasks=tasks)


def load_project(path: Path | str) -> Project:
    """Load a project from a YAML task file."""
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("YAML must contain a dictionary at the root level")

    return parse_project(data)  # type: ignore[arg-type]
