"""Editable project model: the caller-owned task list."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

from .exceptions import InvalidDurationError, ValidationError
from .scheduler.core import Task


def _default_tasks() -> list[Task]:
    return []


def _letter_id(index: int) -> str:
    """Spreadsheet-style ID: 0 -> A, 25 -> Z, 26 -> AA, 27 -> AB."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = string.ascii_uppercase[remainder] + letters
    return letters


@dataclass
class Project:
    """An ordered, mutable list of tasks plus a display name.

    Edits never touch computed results; schedule the project again after
    editing it.
    """

    name: str = "Untitled project"
    tasks: list[Task] = field(default_factory=_default_tasks)

    @property
    def task_ids(self) -> list[str]:
        return [task.id for task in self.tasks]

    def get_task(self, task_id: str) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise KeyError(task_id)

    def next_task_id(self) -> str:
        """First letter ID, counting from the current task count, that is not in use."""
        used = set(self.task_ids)
        index = len(self.tasks)
        while _letter_id(index) in used:
            index += 1
        return _letter_id(index)

    def add_task(self, name: str | None = None, duration: int = 1) -> Task:
        """Append a new task with the next free letter ID."""
        if duration < 0:
            raise ValidationError(f"Duration must be non-negative, got {duration}")
        task_id = self.next_task_id()
        task = Task(id=task_id, name=name or task_id, duration=duration, predecessors=[])
        self.tasks.append(task)
        return task

    def remove_task(self, task_id: str) -> None:
        """Remove a task and drop it from every other task's predecessors."""
        self.get_task(task_id)
        if len(self.tasks) <= 1:
            raise ValidationError("Cannot remove the last remaining task", task_id)
        self.tasks = [task for task in self.tasks if task.id != task_id]
        for task in self.tasks:
            task.predecessors = [pred for pred in task.predecessors if pred != task_id]

    def update_task(
        self, task_id: str, *, name: str | None = None, duration: int | None = None
    ) -> Task:
        task = self.get_task(task_id)
        if duration is not None:
            if duration < 0:
                raise InvalidDurationError(
                    f"Duration of task {task_id} must be non-negative, got {duration}",
                    task_id,
                    duration,
                )
            task.duration = duration
        if name is not None:
            task.name = name
        return task

    def add_predecessor(self, task_id: str, predecessor_id: str) -> None:
        """Add a predecessor reference; empty IDs and duplicates are ignored."""
        task = self.get_task(task_id)
        if not predecessor_id or predecessor_id in task.predecessors:
            return
        if predecessor_id == task_id:
            raise ValidationError(f"Task {task_id} cannot be its own predecessor", task_id)
        task.predecessors.append(predecessor_id)

    def remove_predecessor(self, task_id: str, predecessor_id: str) -> None:
        task = self.get_task(task_id)
        task.predecessors = [pred for pred in task.predecessors if pred != predecessor_id]
