"""Unified configuration loader (mpm_config.yaml).

One file carries the engine, trace and report settings:

    engine:
      iteration_factor: 2
      on_inconsistent: fallback
    trace:
      include_initial_step: true
    report:
      format: markdown
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from . import context
from .exceptions import ConfigError
from .scheduler import EngineConfig, SchedulingConfig, TraceConfig

CONFIG_FILENAME = "mpm_config.yaml"


class ReportFormat(str, Enum):
    """Table styles for schedule output."""

    TEXT = "text"
    MARKDOWN = "markdown"


class ReportConfig(BaseModel):
    """Configuration for result tables."""

    format: ReportFormat = ReportFormat.TEXT


class UnifiedConfig(BaseModel):
    """All configuration sections."""

    engine: EngineConfig = EngineConfig()
    trace: TraceConfig = TraceConfig()
    report: ReportConfig = ReportConfig()

    @property
    def scheduling(self) -> SchedulingConfig:
        return SchedulingConfig(engine=self.engine, trace=self.trace)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config: {e}") from e

    if not data:
        raise ConfigError("Empty configuration file")
    if not isinstance(data, dict):
        raise ConfigError("Config must contain a dictionary at the root level")

    unknown = set(data) - set(UnifiedConfig.model_fields)  # type: ignore[arg-type]
    if unknown:
        raise ConfigError(f"Unknown config section(s): {', '.join(sorted(unknown))}")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def discover_config(task_file: Path | None = None) -> UnifiedConfig:
    """Find and load the configuration, falling back to defaults.

    Search order:
    1. Global context (set via CLI --config)
    2. Task file directory / mpm_config.yaml
    3. Current directory / mpm_config.yaml
    """
    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_unified_config(ctx_config)

    if task_file is not None:
        dir_config = Path(task_file).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_unified_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return UnifiedConfig()
