"""A positional cursor over a Python sequence, plus iterator-trait helpers."""

from __future__ import annotations

import copy as _copy
from functools import total_ordering

from .categories import (
    BidirectionalTraversal,
    IncrementableTraversal,
    RandomAccessTraversal,
    facade_iterator_category,
    is_iterator_traversal,
    iterator_traversal,
)

__all__ = ["SequenceCursor", "is_interoperable", "distance"]


@total_ordering
class SequenceCursor:
    """A cursor into ``sequence`` at ``position``, limited to ``traversal``.

    Positions run from 0 to ``len(sequence)``; the last one is past the end
    and cannot be read. Operations the traversal does not allow raise
    :class:`TypeError`; moving outside the sequence raises :class:`IndexError`.
    """

    __slots__ = ("sequence", "position", "traversal", "readonly")

    def __init__(self, sequence, position=0, traversal=RandomAccessTraversal, readonly=False):
        if not is_iterator_traversal(traversal):
            raise TypeError(f"{traversal!r} is not a traversal tag")
        self.sequence = sequence
        self.traversal = traversal
        self.readonly = readonly
        self.position = self._checked(position)

    @property
    def iterator_category(self):
        """Category tag: an lvalue, readable cursor with this traversal."""
        return facade_iterator_category(self.traversal, True, True)

    def _checked(self, position):
        if not 0 <= position <= len(self.sequence):
            raise IndexError(f"position {position} outside 0..{len(self.sequence)}")
        return position

    def _require(self, tag, operation):
        if not issubclass(self.traversal, tag):
            raise TypeError(f"{operation} needs {tag.__name__}, cursor has {self.traversal.__name__}")

    def _same_range(self, other):
        if not isinstance(other, SequenceCursor) or other.sequence is not self.sequence:
            raise ValueError("cursors do not refer to the same sequence")

    def _index(self, offset):
        index = self._checked(self.position + offset)
        if index == len(self.sequence):
            raise IndexError("cannot dereference the past-the-end position")
        return index

    def value(self):
        """The element under the cursor."""
        return self.sequence[self._index(0)]

    def increment(self):
        """Move one step forward; returns the cursor."""
        self._require(IncrementableTraversal, "increment")
        self.position = self._checked(self.position + 1)
        return self

    def decrement(self):
        """Move one step back; returns the cursor."""
        self._require(BidirectionalTraversal, "decrement")
        self.position = self._checked(self.position - 1)
        return self

    def advance(self, n):
        """Jump ``n`` positions in place; returns the cursor."""
        self._require(RandomAccessTraversal, "advance")
        self.position = self._checked(self.position + n)
        return self

    def distance_to(self, other):
        """Number of steps from this cursor to ``other``."""
        self._require(RandomAccessTraversal, "distance_to")
        self._same_range(other)
        return other.position - self.position

    def copy(self):
        """An independent cursor at the same position."""
        return SequenceCursor(self.sequence, self.position, self.traversal, self.readonly)

    def __getitem__(self, offset):
        self._require(RandomAccessTraversal, "indexing")
        return self.sequence[self._index(offset)]

    def __setitem__(self, offset, value):
        if self.readonly:
            raise TypeError("cursor is read-only")
        if offset != 0:
            self._require(RandomAccessTraversal, "indexing")
        self.sequence[self._index(offset)] = value

    def __eq__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self.sequence is other.sequence and self.position == other.position

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._require(RandomAccessTraversal, "ordering")
        self._same_range(other)
        return self.position < other.position

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.copy().advance(n)

    def __radd__(self, n):
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, int):
            return self.copy().advance(-other)
        if isinstance(other, SequenceCursor):
            return other.distance_to(self)
        return NotImplemented

    def __repr__(self):
        return (
            f"SequenceCursor(position={self.position}, "
            f"traversal={self.traversal.__name__}, readonly={self.readonly})"
        )


def is_interoperable(a, b) -> bool:
    """True if one iterator type converts to the other (is a subclass of it).

    Accepts types or instances.
    """
    type_a = a if isinstance(a, type) else type(a)
    type_b = b if isinstance(b, type) else type(b)
    return issubclass(type_a, type_b) or issubclass(type_b, type_a)


def distance(first, last):
    """Number of increments needed to get from ``first`` to ``last``.

    Random-access iterators are subtracted; others are stepped on a copy.
    """
    try:
        traversal = iterator_traversal(first)
    except TypeError:
        traversal = None
    if traversal is not None and issubclass(traversal, RandomAccessTraversal):
        return last - first
    cursor = first.copy() if hasattr(first, "copy") else _copy.copy(first)
    steps = 0
    while not cursor == last:
        cursor.increment()
        steps += 1
    return steps