"""Pytest configuration and fixtures for mpm tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mpm import context
from mpm.logger import reset_logger
from mpm.scheduler import ScheduledTask, ScheduleResult, Task


def task(task_id: str, duration: int, *predecessors: str, name: str | None = None) -> Task:
    """Create a Task with minimal typing.

    Example:
        task("D", 1, "B", "C")
    """
    return Task(id=task_id, name=name or task_id, duration=duration, predecessors=list(predecessors))


def by_id(result: ScheduleResult) -> dict[str, ScheduledTask]:
    """Index a result's tasks by ID."""
    return {t.id: t for t in result.tasks}


@pytest.fixture
def chain_tasks() -> list[Task]:
    """A(3) -> B(2) -> C(4)."""
    return [task("A", 3), task("B", 2, "A"), task("C", 4, "B")]


@pytest.fixture
def diamond_tasks() -> list[Task]:
    """A(3) -> {B(2), C(5)} -> D(1)."""
    return [task("A", 3), task("B", 2, "A"), task("C", 5, "A"), task("D", 1, "B", "C")]


@pytest.fixture
def house_tasks() -> list[Task]:
    """Same network as examples/house.yaml."""
    return [
        task("A", 4),
        task("B", 6, "A"),
        task("C", 3, "B"),
        task("D", 8, "B"),
        task("E", 4, "D"),
        task("F", 5, "D"),
        task("G", 7, "C", "E", "F"),
        task("H", 2, "A"),
    ]


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and CLI context around each test for isolation."""
    reset_logger()
    context.set_config_path(None)
    yield
    reset_logger()
    context.set_config_path(None)


def assert_schedule_invariants(result: ScheduleResult) -> None:
    """Assert the arithmetic invariants every consistent schedule satisfies."""
    successors: dict[str, list[str]] = {t.id: [] for t in result.tasks}
    for t in result.tasks:
        for pred in t.predecessors:
            successors[pred].append(t.id)

    assert result.project_duration == max(t.early_finish for t in result.tasks)
    for t in result.tasks:
        assert t.early_finish == t.early_start + t.duration, t.id
        assert t.late_start == t.late_finish - t.duration, t.id
        assert t.total_float == t.late_start - t.early_start, t.id
        assert t.total_float >= 0, t.id
        assert t.is_critical == (t.total_float == 0), t.id
        if not t.predecessors:
            assert t.early_start == 0, t.id
        if not successors[t.id]:
            assert t.late_finish == result.project_duration, t.id
    assert result.critical_path == [t.id for t in result.tasks if t.is_critical]
