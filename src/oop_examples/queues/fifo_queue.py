# src/oop_examples/queues/fifo_queue.py

"""
Implements the concrete FIFO (First-In, First-Out) queue.

This module provides the `Queue` class. It inherits from `BaseQueue`
and uses the inherited `collections.deque` for O(1) appends to the
back and pops from the front.
"""

import logging
from typing import Any, Optional

# Local package imports
from ..base_queue import BaseQueue

# Set up the module-level logger
log = logging.getLogger(__name__)


class Queue(BaseQueue):
    """
    A concrete implementation of BaseQueue with destructive FIFO removal.

    Items come out in the order they went in. A removed item is gone
    from the queue for good.
    """

    def __init__(self, *items: Any):
        """
        Initializes the queue.

        Args:
            *items (Any): Initial items, added front to back.
        """
        super().__init__(*items)

        log.info(f"{type(self).__name__} initialized with "
                 f"{self._length()} item(s).")

    def add(self, item: Any) -> None:
        """Appends an item to the back of the queue."""
        self._items.append(item)
        log.debug(f"Added {item!r}. Length={self._length()}")

    def remove(self) -> Optional[Any]:
        """
        Removes and returns the item at the front of the queue.

        Returns None if the queue is empty.
        """
        if self._length() == 0:
            log.debug("remove() called on an empty queue.")
            self.tracker.log_empty_remove()
            return None

        # FIFO logic: pop from the left
        item = self._items.popleft()
        self.tracker.log_remove()
        log.debug(f"Removed {item!r}. Length={self._length()}")
        return item
