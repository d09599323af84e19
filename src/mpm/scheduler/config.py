"""Configuration classes for the scheduling engine."""

from enum import Enum

from pydantic import BaseModel, Field


class ScheduleMode(str, Enum):
    """What the engine returns."""

    FULL = "full"  # ScheduleResult
    TRACE = "trace"  # Trace of every intermediate step


class InconsistencyPolicy(str, Enum):
    """What to do when a relaxation pass stops making progress."""

    FALLBACK = "fallback"  # Assign deterministic fallback values and flag them
    RAISE = "raise"  # Raise InconsistentGraphError


class EngineConfig(BaseModel):
    """Configuration for the forward/backward pass engine."""

    # Round guard for each pass is iteration_factor * task count
    iteration_factor: int = Field(default=2, ge=1)
    on_inconsistent: InconsistencyPolicy = InconsistencyPolicy.FALLBACK


class TraceConfig(BaseModel):
    """Configuration for step-mode recording."""

    include_initial_step: bool = True  # Leading "Initialize Tasks" snapshot with all zeros


class SchedulingConfig(BaseModel):
    """Top-level configuration consumed by the scheduling service."""

    engine: EngineConfig = EngineConfig()
    trace: TraceConfig = TraceConfig()
