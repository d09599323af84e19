"""Verbosity-levelled logging for the MPM engine and CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels sit between the standard ones
ASSIGNMENTS_LEVEL = 25  # Between INFO (20) and WARNING (30) - verbosity 1
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20) - verbosity 2

logging.addLevelName(ASSIGNMENTS_LEVEL, "ASSIGNMENTS")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0  # Warnings and errors only
VERBOSITY_ASSIGNMENTS = 1  # Every derived field assignment
VERBOSITY_CHECKS = 2  # Readiness checks inside each relaxation round
VERBOSITY_DEBUG = 3  # Everything

_LEVELS = {
    VERBOSITY_SILENT: logging.WARNING,
    VERBOSITY_ASSIGNMENTS: ASSIGNMENTS_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class MpmLogger(logging.Logger):
    """Logger with one method per engine verbosity level.

    - assignments(): ES/EF/LS/LF and project duration assignments
    - checks(): which tasks were considered ready or skipped in a round
    - debug(): validator traversal and other internals
    """

    def assignments(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a derived-field assignment (verbosity 1)."""
        if self.isEnabledFor(ASSIGNMENTS_LEVEL):
            self._log(ASSIGNMENTS_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a readiness check (verbosity 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> MpmLogger:
    """Return the shared ``mpm`` logger."""
    logging.setLoggerClass(MpmLogger)
    logger = logging.getLogger("mpm")
    assert isinstance(logger, MpmLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the mpm logger for a verbosity level.

    Safe to call repeatedly; existing handlers are replaced.

    Args:
        verbosity: 0=warnings only, 1=assignments, 2=checks, 3=debug
        stream: Output stream (defaults to sys.stderr)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(verbosity, logging.WARNING))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to the default level (used by tests)."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True


def checks_enabled() -> bool:
    """Whether checks-level messages will be emitted."""
    return get_logger().isEnabledFor(CHECKS_LEVEL)
