# src/oop_examples/sources/__init__.py

"""
Initializes the 'sources' sub-package.

Lifts the concrete SequenceSource implementations, e.g.:

from oop_examples.sources import Bar, Baz
"""

from .letters import Bar
from .integers import Baz

__all__ = [
    "Bar",
    "Baz"
]
