# src/oop_examples/queues/__init__.py

"""
Initializes the 'queues' sub-package.

This file "lifts" the concrete queue classes from their individual
modules to this package level, e.g.:

from oop_examples.queues import HistoryQueue
"""

from .fifo_queue import Queue
from .history_queue import HistoryQueue

__all__ = [
    "Queue",
    "HistoryQueue"
]
