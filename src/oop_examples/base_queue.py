# src/oop_examples/base_queue.py

"""
Defines the Abstract Base Class (ABC) for the queue examples.

`BaseQueue` owns the parts every queue shares: a private ordered
store, a tracker, and the internal length helper. It leaves `add()`
and `remove()` abstract so that each concrete queue decides what
"removing" means (destructive FIFO for `Queue`, a moving cursor for
`HistoryQueue`).
"""

import abc
import logging
from collections import deque
from typing import Any, Deque, Dict, Optional

from .tracker import QueueTracker

log = logging.getLogger(__name__)


class BaseQueue(abc.ABC):
    """
    Abstract Base Class for queue implementations.

    This class defines the standard public API:
    - `add(item)`: To append an item to the back.
    - `remove()`: To hand out the next item, or None.
    - `get_summary()`: To retrieve the tracker's removal counters.

    The element count is not public. Subclasses use `_length()`; the
    tracker and the summary record removal outcomes only.
    """

    def __init__(self, *items: Any):
        """
        Initializes the storage and tracker, then adds any initial items.

        Args:
            *items (Any): Items to add, in order, as if by `add()`.
        """
        self._items: Deque[Any] = deque()
        self.tracker: QueueTracker = QueueTracker()

        for item in items:
            self.add(item)

    @abc.abstractmethod
    def add(self, item: Any) -> None:
        """
        Appends an item to the back of the queue.

        Args:
            item (Any): The item to store. No type constraint applies.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def remove(self) -> Optional[Any]:
        """
        Hands out the next item in insertion order.

        Returns:
            Optional[Any]: The next item, or None if there is nothing
                           left to hand out. Never raises.
        """
        raise NotImplementedError

    def get_summary(self) -> Dict[str, Any]:
        """Pass-through method to get the tracker's report."""
        return self.tracker.get_summary()

    def _length(self) -> int:
        """Internal element count."""
        return len(self._items)
