# src/oop_examples/constants.py

"""
Defines the enumerations and default values shared across the package.

Nothing in here holds state. Queues and sources import these values so
that the same names are used everywhere (e.g. when a tracker records
what happened to a queue).
"""

from enum import Enum, auto


class QueueEvent(Enum):
    """
    Represents the outcomes of a queue's `remove()` call, as reported
    to its tracker.
    """

    # An item was handed out by `remove()`.
    REMOVED = auto()

    # `remove()` was called with nothing left to hand out.
    EMPTY_REMOVE = auto()


# Default number of elements returned by `do_something()`.
DEFAULT_TAKE: int = 1
