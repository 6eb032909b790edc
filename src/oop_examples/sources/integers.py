# src/oop_examples/sources/integers.py

"""
Implements `Baz`, a sequence source backed by the integers 1 to 26.
"""

import logging
from typing import List, Tuple

from ..base_source import SequenceSource
from ..constants import DEFAULT_TAKE

log = logging.getLogger(__name__)


class Baz(SequenceSource):
    """A SequenceSource whose private sequence is 1 through 26."""

    def __init__(self):
        self.__numbers: Tuple[int, ...] = tuple(range(1, 27))
        log.info(f"Baz initialized with {len(self.__numbers)} numbers.")

    def do_something(self, n: int = DEFAULT_TAKE) -> List[int]:
        """Returns the first `n` integers of the sequence."""
        numbers = self._take(self.__numbers, n)
        log.debug(f"Baz.do_something({n}) -> {numbers}")
        return numbers
