# src/oop_examples/__init__.py

"""
Initializes the 'oop_examples' package.

This file sets up the package-level logger and "lifts" the classes
and enums to the top-level namespace, so users can write:

from oop_examples import Queue, HistoryQueue, Bar, Baz, Holder
"""

import logging

# Setup Package-Level Logger
# A NullHandler keeps log output silent unless the user of the
# library configures logging themselves.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# Lift constants
from .constants import QueueEvent, DEFAULT_TAKE

# Lift the base classes and the tracker
from .base_queue import BaseQueue
from .base_source import SequenceSource
from .tracker import QueueTracker

# Lift the concrete implementations from the sub-packages
from .queues import Queue, HistoryQueue
from .sources import Bar, Baz
from .holder import Holder


# Define Public API with __all__
__all__ = [
    # Constants
    "QueueEvent",
    "DEFAULT_TAKE",

    # Core Classes
    "BaseQueue",
    "SequenceSource",
    "QueueTracker",

    # Queues
    "Queue",
    "HistoryQueue",

    # Sources and their holder
    "Bar",
    "Baz",
    "Holder"
]
