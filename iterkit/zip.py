"""An iterator that moves several iterators in lockstep and reads them as a tuple."""

from __future__ import annotations

import copy as _copy
from functools import total_ordering

from .categories import (
    BidirectionalTraversal,
    RandomAccessTraversal,
    facade_iterator_category,
    iterator_traversal,
    minimum_traversal,
)

__all__ = ["ZipIterator", "make_zip_iterator"]


def _copy_iterator(iterator):
    return iterator.copy() if hasattr(iterator, "copy") else _copy.copy(iterator)


@total_ordering
class ZipIterator:
    """Holds copies of the given iterators and moves them together.

    Its traversal is the weakest traversal among its components. Reading
    yields a tuple of the components' values; distances are measured on the
    first component.
    """

    __slots__ = ("_iterators",)

    def __init__(self, iterators):
        held = tuple(_copy_iterator(it) for it in iterators)
        if not held:
            raise ValueError("a zip iterator needs at least one iterator")
        self._iterators = held

    @property
    def iterators(self):
        """The tuple of component iterators."""
        return self._iterators

    @property
    def traversal(self):
        """The weakest standard traversal among the components."""
        return minimum_traversal(*(iterator_traversal(it) for it in self._iterators))

    @property
    def iterator_category(self):
        """Category tag: readable by value, not an lvalue, with the zipped traversal."""
        return facade_iterator_category(self.traversal, False, True)

    def _require(self, tag, operation):
        traversal = self.traversal
        if not issubclass(traversal, tag):
            raise TypeError(f"{operation} needs {tag.__name__}, zip iterator has {traversal.__name__}")

    def value(self):
        """A tuple of the values under each component."""
        return tuple(it.value() for it in self._iterators)

    def increment(self):
        """Step every component forward; returns the iterator."""
        for it in self._iterators:
            it.increment()
        return self

    def decrement(self):
        """Step every component back; returns the iterator."""
        self._require(BidirectionalTraversal, "decrement")
        for it in self._iterators:
            it.decrement()
        return self

    def advance(self, n):
        """Jump every component by ``n``; returns the iterator."""
        self._require(RandomAccessTraversal, "advance")
        for it in self._iterators:
            it.advance(n)
        return self

    def distance_to(self, other):
        """Steps from this iterator to ``other``, measured on the first component."""
        self._require(RandomAccessTraversal, "distance_to")
        if not isinstance(other, ZipIterator):
            raise TypeError("distance is only defined between zip iterators")
        return other._iterators[0] - self._iterators[0]

    def copy(self):
        """An independent zip iterator at the same position."""
        return ZipIterator(self._iterators)

    def __eq__(self, other):
        if not isinstance(other, ZipIterator):
            return NotImplemented
        return len(self._iterators) == len(other._iterators) and all(
            a == b for a, b in zip(self._iterators, other._iterators)
        )

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, ZipIterator):
            return NotImplemented
        return self.distance_to(other) > 0

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.copy().advance(n)

    def __sub__(self, other):
        if isinstance(other, int):
            return self.copy().advance(-other)
        if isinstance(other, ZipIterator):
            return other.distance_to(self)
        return NotImplemented

    def __repr__(self):
        return f"ZipIterator({self._iterators!r})"


def make_zip_iterator(iterators):
    """Build a :class:`ZipIterator` over ``iterators``."""
    return ZipIterator(iterators)