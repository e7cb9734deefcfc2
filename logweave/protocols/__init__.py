"""
Protocols (interfaces) for logweave components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod
from logweave.models import LogEvent

__all__ = [
    'DuplicateComparatorProtocol',
]


class DuplicateComparatorProtocol(ABC):
    """Protocol for deciding whether an event repeats the tail of a timeline."""

    @abstractmethod
    def is_duplicate(self, event: LogEvent, base: LogEvent, previous: LogEvent) -> bool:
        """
        Compare a new event against the last two stored events.

        Args:
            event: Event about to be appended
            base: Second-to-last stored event (holds the repetition count)
            previous: Last stored event (holds the latest occurrence)

        Returns:
            True when all three are the same event
        """
        pass
