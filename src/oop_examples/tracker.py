# src/oop_examples/tracker.py

"""
Provides the QueueTracker class, a passive recorder of removal outcomes.

Every queue owns one tracker and reports each `remove()` call to it.
The tracker never reads or changes the queue itself. It keeps running
counters only, so its memory use does not grow with the number of
operations, and it records nothing that would reveal how many items
the queue holds.
"""

import logging
from typing import Any, Dict, Optional

from .constants import QueueEvent

# Set up the module-level logger
log = logging.getLogger(__name__)


class QueueTracker:
    """
    Counts what happened on each `remove()` call of a queue.

    Attributes:
        total_removed (int): Number of items handed out by `remove()`.
        total_empty_removals (int): Number of `remove()` calls that
                                    found nothing to hand out.
        last_event (Optional[QueueEvent]): Outcome of the most recent
                                           call, or None before any.
    """

    def __init__(self):
        self.total_removed: int = 0
        self.total_empty_removals: int = 0
        self.last_event: Optional[QueueEvent] = None

        log.debug("QueueTracker initialized.")

    @property
    def removal_attempts(self) -> int:
        """Number of `remove()` calls logged so far."""
        return self.total_removed + self.total_empty_removals

    def log_remove(self):
        """Logs an item being handed out by `remove()`."""
        self.total_removed += 1
        self.last_event = QueueEvent.REMOVED
        log.debug(f"Attempt {self.removal_attempts}: Item removed.")

    def log_empty_remove(self):
        """Logs a `remove()` call that had nothing to return."""
        self.total_empty_removals += 1
        self.last_event = QueueEvent.EMPTY_REMOVE
        log.debug(f"Attempt {self.removal_attempts}: Nothing to remove.")

    def get_summary(self) -> Dict[str, Any]:
        """
        Returns a summary of the recorded removal outcomes.

        Returns:
            Dict[str, Any]: A nested dictionary with a "removals"
            section holding the counters and the empty-removal rate.
        """
        attempts = self.removal_attempts
        empty_rate = (self.total_empty_removals / attempts) \
            if attempts > 0 else 0.0

        return {
            "removals": {
                "attempts": attempts,
                "total_removed": self.total_removed,
                "total_empty_removals": self.total_empty_removals,
                "empty_removal_rate": empty_rate
            }
        }
