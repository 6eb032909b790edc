# src/oop_examples/holder.py

"""
Provides the Holder class, which stores any SequenceSource.

The holder only knows the `SequenceSource` contract. It forwards
`do_something()` to whatever source it currently holds, and the
source can be swapped at runtime.
"""

import logging
from typing import Any, List

from .base_source import SequenceSource
from .constants import DEFAULT_TAKE

log = logging.getLogger(__name__)


class Holder:
    """
    Stores a reference to a SequenceSource and forwards calls to it.

    Attributes:
        source (SequenceSource): The source currently held. Assigning a
                                 new value swaps the source; anything
                                 that is not a SequenceSource is refused.
    """

    def __init__(self, source: SequenceSource):
        """
        Initializes the holder.

        Args:
            source (SequenceSource): The source to hold.

        Raises:
            TypeError: If `source` is not a SequenceSource.
        """
        self.source = source
        log.info("Holder initialized.")

    @property
    def source(self) -> SequenceSource:
        return self._source

    @source.setter
    def source(self, source: SequenceSource):
        if not isinstance(source, SequenceSource):
            log.error(f"Holder refused {source!r}: not a SequenceSource.")
            raise TypeError(
                f"Holder needs a SequenceSource, "
                f"got {type(source).__name__}."
            )
        self._source = source
        log.debug(f"Holder now holds a {type(source).__name__}.")

    def do_something(self, n: int = DEFAULT_TAKE) -> List[Any]:
        """Forwards to the held source's `do_something(n)`."""
        return self._source.do_something(n)
