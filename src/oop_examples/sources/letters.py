# src/oop_examples/sources/letters.py

"""
Implements `Bar`, a sequence source backed by the lowercase alphabet.
"""

import logging
import string
from typing import List

from ..base_source import SequenceSource
from ..constants import DEFAULT_TAKE

log = logging.getLogger(__name__)


class Bar(SequenceSource):
    """A SequenceSource whose private sequence is 'a' through 'z'."""

    def __init__(self):
        self.__letters: str = string.ascii_lowercase
        log.info(f"Bar initialized with {len(self.__letters)} letters.")

    def do_something(self, n: int = DEFAULT_TAKE) -> List[str]:
        """Returns the first `n` letters of the alphabet."""
        letters = self._take(self.__letters, n)
        log.debug(f"Bar.do_something({n}) -> {letters}")
        return letters
