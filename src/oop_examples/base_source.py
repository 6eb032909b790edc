# src/oop_examples/base_source.py

"""
Defines the Abstract Base Class (ABC) for sequence sources.

A sequence source is anything that can hand back "the first n
elements" of some private sequence it owns. `SequenceSource` declares
that single capability, `do_something(n)`. Concrete sources (`Bar`,
`Baz`) each keep their own sequence hidden and implement the
capability; a `Holder` can then store either one without caring
which it got.
"""

import abc
import logging
from typing import Any, List, Sequence

from .constants import DEFAULT_TAKE

log = logging.getLogger(__name__)


class SequenceSource(abc.ABC):
    """
    Abstract Base Class for objects that expose the first n elements
    of a private sequence.

    A concrete implementation (e.g., Bar) must inherit from this class
    and implement `do_something`.
    """

    @abc.abstractmethod
    def do_something(self, n: int = DEFAULT_TAKE) -> List[Any]:
        """
        Returns the first `n` elements of this source's sequence.

        This base implementation only defines the contract. Calling it
        directly always raises.

        Args:
            n (int, optional): How many elements to return.
                               Defaults to DEFAULT_TAKE.

        Returns:
            List[Any]: The first `n` elements, in order.

        Raises:
            NotImplementedError: Always, on the base class.
        """
        raise NotImplementedError(
            f"{SequenceSource.__name__}.do_something is an interface "
            f"method and must be overridden."
        )

    def _take(self, sequence: Sequence[Any], n: int) -> List[Any]:
        """
        Internal helper shared by all sources: validates `n` against
        `sequence` and returns its first `n` elements as a new list.

        Raises:
            TypeError: If `n` is not an int (bools are rejected too).
            ValueError: If `n` is negative or larger than the sequence.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            log.error(f"{type(self).__name__}.do_something got "
                      f"non-integer n={n!r}.")
            raise TypeError(f"n must be an int, not {type(n).__name__}.")

        if n < 0:
            log.error(f"{type(self).__name__}.do_something got "
                      f"negative n={n}.")
            raise ValueError(f"n cannot be negative (got {n}).")

        if n > len(sequence):
            log.error(f"{type(self).__name__}.do_something asked for "
                      f"{n} elements, only {len(sequence)} available.")
            raise ValueError(
                f"n={n} exceeds the {len(sequence)} elements available."
            )

        return list(sequence[:n])
