# src/oop_examples/queues/history_queue.py

"""
Implements a queue that keeps every item it has ever been given.

This module provides the `HistoryQueue` class. It inherits `add()`
from `Queue` unchanged and overrides `remove()`: instead of popping
the front item, it reads the item under a cursor and moves the cursor
forward. Nothing is ever dropped from storage, so `show()` can list
the whole history at any time.
"""

import logging
from typing import Any, Optional, TextIO

# Local package imports
from .fifo_queue import Queue

# Set up the module-level logger
log = logging.getLogger(__name__)


class HistoryQueue(Queue):
    """
    A Queue whose `remove()` reveals the next item without discarding it.

    The cursor starts at 0 and only moves forward, one step per
    successful `remove()`. It never passes the number of stored
    items; once it reaches that number, `remove()` returns None until
    something new is added.
    """

    def __init__(self, *items: Any):
        """
        Initializes the history queue.

        Args:
            *items (Any): Initial items, added front to back.
        """
        super().__init__(*items)
        self._cursor: int = 0

    @property
    def cursor(self) -> int:
        """Index of the next item `remove()` will return."""
        return self._cursor

    def remove(self) -> Optional[Any]:
        """
        Returns the item under the cursor and advances the cursor.

        Returns None once every stored item has been returned.
        """
        if self._cursor == self._length():
            log.debug(f"remove() called on an exhausted history queue "
                      f"(cursor={self._cursor}).")
            self.tracker.log_empty_remove()
            return None

        item = self._items[self._cursor]
        self._cursor += 1
        self.tracker.log_remove()
        log.debug(f"Revealed {item!r}. Cursor={self._cursor}/"
                  f"{self._length()}")
        return item

    def show(self, file: Optional[TextIO] = None) -> None:
        """
        Prints every stored item with its 1-based position, followed
        by the position that `remove()` will return next.

        Args:
            file (Optional[TextIO]): Stream to write to. Defaults to
                                     stdout.
        """
        print(self, file=file)

    def __str__(self) -> str:
        lines = [f"{position}: {item}"
                 for position, item in enumerate(self._items, start=1)]

        if self._cursor < self._length():
            lines.append(f"Next to remove: {self._cursor + 1}")
        else:
            lines.append("Nothing left to remove.")

        return "\n".join(lines)
