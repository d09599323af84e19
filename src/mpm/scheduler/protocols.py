"""Protocol definitions for the scheduling engine."""

from collections.abc import Iterable
from typing import Protocol


class StepRecorder(Protocol):
    """Receives one call per atomic state change made by the engine."""

    def record(self, title: str, description: str, highlight: Iterable[str]) -> None:
        """Capture the working table as it is right now.

        Args:
            title: Short heading of the micro-operation
            description: What changed and the arithmetic that produced it
            highlight: IDs of the task acted upon and the tasks it referenced
        """
        ...
