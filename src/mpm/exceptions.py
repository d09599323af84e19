"""Custom exceptions for MPM."""

from __future__ import annotations

from enum import Enum


class ErrorReason(str, Enum):
    """Reason codes carried by scheduling errors."""

    EMPTY_INPUT = "empty_input"
    DUPLICATE_ID = "duplicate_id"
    INVALID_DURATION = "invalid_duration"
    CYCLE = "cycle"
    DANGLING_REFERENCE = "dangling_reference"
    INCONSISTENT_GRAPH = "inconsistent_graph"


class MpmError(Exception):
    """Base exception for all MPM errors."""

    pass


class ParseError(MpmError):
    """Raised when a task file cannot be parsed."""

    pass


class ConfigError(MpmError):
    """Raised when a configuration file is invalid."""

    pass


class SchedulingError(MpmError):
    """Raised when the task graph cannot be scheduled.

    Attributes:
        reason: Machine-readable reason code
        task_id: Offending task, if the error concerns a single task
    """

    reason: ErrorReason = ErrorReason.INCONSISTENT_GRAPH

    def __init__(self, message: str, task_id: str | None = None):
        super().__init__(message)
        self.task_id = task_id


class ValidationError(SchedulingError):
    """Raised when the task list fails validation."""

    pass


class EmptyInputError(ValidationError):
    """Raised when no tasks were supplied."""

    reason = ErrorReason.EMPTY_INPUT

    def __init__(self, message: str = "No tasks supplied; add at least one task"):
        super().__init__(message)


class DuplicateTaskError(ValidationError):
    """Raised when two tasks share an ID."""

    reason = ErrorReason.DUPLICATE_ID


class InvalidDurationError(ValidationError):
    """Raised when a task duration is not a non-negative integer."""

    reason = ErrorReason.INVALID_DURATION

    def __init__(self, message: str, task_id: str, duration: object):
        super().__init__(message, task_id)
        self.duration = duration


class CircularDependencyError(ValidationError):
    """Raised when a circular dependency is detected."""

    reason = ErrorReason.CYCLE

    def __init__(self, message: str, task_id: str, cycle: list[str]):
        super().__init__(message, task_id)
        self.cycle = cycle


class MissingReferenceError(ValidationError):
    """Raised when a task references a predecessor that does not exist."""

    reason = ErrorReason.DANGLING_REFERENCE

    def __init__(self, message: str, task_id: str, missing_id: str):
        super().__init__(message, task_id)
        self.missing_id = missing_id


class InconsistentGraphError(SchedulingError):
    """Raised when a relaxation pass stalls and the policy forbids a fallback."""

    reason = ErrorReason.INCONSISTENT_GRAPH

    def __init__(self, message: str, task_ids: list[str]):
        super().__init__(message, task_ids[0] if task_ids else None)
        self.task_ids = task_ids
