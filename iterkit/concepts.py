"""Checks that an iterator models the access and traversal concepts.

Access checks (readable, writable, swappable, lvalue) exercise the iterator
on copies. Traversal checks inspect its category tag and the operations its
type provides. Every failure raises :class:`ConceptError`.
"""

from __future__ import annotations

import copy as _copy

from .categories import (
    BidirectionalTraversal,
    ForwardTraversal,
    IncrementableTraversal,
    RandomAccessTraversal,
    SinglePassTraversal,
    iterator_traversal,
    minimum_traversal,
    pure_traversal,
)
from .cursor import is_interoperable

__all__ = [
    "ConceptError",
    "check_readable",
    "check_writable",
    "check_swappable",
    "check_lvalue",
    "check_incrementable",
    "check_single_pass",
    "check_forward",
    "check_bidirectional",
    "check_random_access",
    "check_interoperable",
]


class ConceptError(TypeError):
    """An iterator does not model the concept it was checked against."""


def _copy_of(iterator):
    copier = getattr(iterator, "copy", None)
    return copier() if callable(copier) else _copy.copy(iterator)


def _has_operation(iterator, name):
    attr = getattr(type(iterator), name, None)
    return callable(attr) and attr is not getattr(object, name, None)


def _require(iterator, names, concept):
    missing = [name for name in names if not _has_operation(iterator, name)]
    if missing:
        raise ConceptError(
            f"{type(iterator).__name__} does not model {concept}: "
            f"missing {', '.join(missing)}"
        )


def _require_traversal(iterator, tag, concept):
    try:
        traversal = pure_traversal(iterator_traversal(iterator))
    except TypeError as exc:
        raise ConceptError(f"{type(iterator).__name__} does not model {concept}: {exc}") from exc
    if not issubclass(traversal, tag):
        raise ConceptError(
            f"{type(iterator).__name__} does not model {concept}: "
            f"its traversal is {traversal.__name__}"
        )
    return traversal


def _write(iterator, value):
    writer = getattr(iterator, "write", None)
    if callable(writer):
        writer(value)
        return
    try:
        iterator[0] = value
    except TypeError as exc:
        raise ConceptError(f"{type(iterator).__name__} is not writable: {exc}") from exc


def check_readable(iterator):
    """Read through a copy of ``iterator`` and return the value."""
    _require(iterator, ("value",), "ReadableIterator")
    return _copy_of(iterator).value()


def check_writable(iterator, value):
    """Write ``value`` through a copy of ``iterator``."""
    _write(_copy_of(iterator), value)


def check_swappable(first, second):
    """Swap the values under two iterators and swap them back.

    Returns the pair of values originally under ``first`` and ``second``.
    """
    a = check_readable(first)
    b = check_readable(second)
    i1 = _copy_of(first)
    i2 = _copy_of(second)
    _write(i1, b)
    try:
        _write(i2, a)
    except ConceptError:
        _write(i1, a)
        raise
    swapped = first.value() == b and second.value() == a
    _write(i1, a)
    _write(i2, b)
    if not swapped:
        raise ConceptError("swapping through the iterators did not exchange their values")
    return a, b


def check_lvalue(iterator):
    """Check that reading yields the stored object itself; return it."""
    _require(iterator, ("value",), "LvalueIterator")
    first = iterator.value()
    second = _copy_of(iterator).value()
    if first is not second:
        raise ConceptError(
            f"{type(iterator).__name__} does not model LvalueIterator: "
            "each read yields a fresh object"
        )
    return first


def check_incrementable(iterator):
    """Check the IncrementableIterator concept; return the pure traversal."""
    traversal = _require_traversal(iterator, IncrementableTraversal, "IncrementableIterator")
    _require(iterator, ("increment",), "IncrementableIterator")
    return traversal


def check_single_pass(iterator):
    """Check the SinglePassIterator concept; return the pure traversal."""
    check_incrementable(iterator)
    traversal = _require_traversal(iterator, SinglePassTraversal, "SinglePassIterator")
    _require(iterator, ("__eq__",), "SinglePassIterator")
    return traversal


def check_forward(iterator):
    """Check the ForwardTraversal concept; return the pure traversal."""
    check_single_pass(iterator)
    return _require_traversal(iterator, ForwardTraversal, "ForwardTraversal")


def check_bidirectional(iterator):
    """Check the BidirectionalTraversal concept; return the pure traversal."""
    check_forward(iterator)
    traversal = _require_traversal(iterator, BidirectionalTraversal, "BidirectionalTraversal")
    _require(iterator, ("decrement",), "BidirectionalTraversal")
    return traversal


def check_random_access(iterator):
    """Check the RandomAccessTraversal concept; return the pure traversal."""
    check_bidirectional(iterator)
    traversal = _require_traversal(iterator, RandomAccessTraversal, "RandomAccessTraversal")
    _require(iterator, ("advance", "__add__", "__sub__", "__lt__"), "RandomAccessTraversal")
    return traversal


def check_interoperable(iterator, const_iterator):
    """Check that two iterators compare (and, if random access, order and subtract) with each other.

    Returns the weaker of their two traversals.
    """
    t1 = check_single_pass(iterator)
    t2 = check_single_pass(const_iterator)
    if not is_interoperable(iterator, const_iterator):
        raise ConceptError(
            f"{type(iterator).__name__} and {type(const_iterator).__name__} are not interoperable"
        )
    try:
        forward_eq = iterator == const_iterator
        forward_ne = iterator != const_iterator
        backward_eq = const_iterator == iterator
        backward_ne = const_iterator != iterator
        if forward_eq == forward_ne or backward_eq == backward_ne or forward_eq != backward_eq:
            raise ConceptError("equality and inequality disagree between the iterators")
        if issubclass(t1, RandomAccessTraversal) and issubclass(t2, RandomAccessTraversal):
            less = iterator < const_iterator
            if (iterator <= const_iterator) != (less or forward_eq):
                raise ConceptError("ordering is inconsistent between the iterators")
            if (const_iterator > iterator) != less or (iterator >= const_iterator) == less:
                raise ConceptError("ordering is inconsistent between the iterators")
            if (iterator - const_iterator) != -(const_iterator - iterator):
                raise ConceptError("differences between the iterators are not antisymmetric")
    except (TypeError, ValueError) as exc:
        if isinstance(exc, ConceptError):
            raise
        raise ConceptError(f"iterators do not interoperate: {exc}") from exc
    return minimum_traversal(t1, t2)