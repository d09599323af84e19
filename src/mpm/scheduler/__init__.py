"""Scheduler package - MPM critical path computation.

This package provides:
- Input validation (empty input, duplicate IDs, cycles, dangling references)
- The forward pass (early start/finish) and backward pass (late start/finish)
- Float and critical path derivation
- Step-mode tracing and playback

Main entry points:
- compute_schedule / compute_trace / run: validated, stateless computations
- SchedulingService: schedules the current state of a Project
- ScheduleEngine: unvalidated engine, one instance per run
- finalize / StepPlayer: consume a Trace

Configuration:
- SchedulingConfig: engine and trace settings
"""

# Configuration
from .config import (
    EngineConfig,
    InconsistencyPolicy,
    ScheduleMode,
    SchedulingConfig,
    TraceConfig,
)

# Core dataclasses
from .core import (
    GraphInconsistency,
    ScheduledTask,
    ScheduleResult,
    Task,
    Trace,
    TraceStep,
)

# Engine
from .engine import ScheduleEngine

# High-level entry points
from .service import SchedulingService, compute_schedule, compute_trace, run

# Step playback
from .trace import StepPlayer, finalize

# Input validation
from .validator import TaskGraphValidator, validate_tasks

__all__ = [
    # Core dataclasses
    "Task",
    "ScheduledTask",
    "ScheduleResult",
    "GraphInconsistency",
    "Trace",
    "TraceStep",
    # Configuration
    "SchedulingConfig",
    "EngineConfig",
    "TraceConfig",
    "ScheduleMode",
    "InconsistencyPolicy",
    # Engine
    "ScheduleEngine",
    # High-level entry points
    "SchedulingService",
    "compute_schedule",
    "compute_trace",
    "run",
    # Step playback
    "StepPlayer",
    "finalize",
    # Input validation
    "TaskGraphValidator",
    "validate_tasks",
]
