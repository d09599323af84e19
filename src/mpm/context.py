"""Process-wide CLI state (the engine itself keeps none)."""

from __future__ import annotations

from pathlib import Path


class _CliState:
    """Options set by the CLI callback and read by its commands."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


_state = _CliState()


def get_config_path() -> Path | None:
    """Config file given with ``--config``, if any."""
    return _state.config_path


def set_config_path(path: Path | None) -> None:
    """Remember the ``--config`` option for later config discovery."""
    _state.config_path = path
