"""Run-time checks that an iterator behaves as its category promises.

Each check takes the iterators by value: it works on copies and leaves the
caller's iterators where they were (writes through them do land in the
underlying data). A failing condition raises :class:`IteratorCheckFailed`.
"""

from __future__ import annotations

import copy as _copy
from itertools import islice

from .cursor import is_interoperable

__all__ = [
    "IteratorCheckFailed",
    "trivial_iterator_test",
    "mutable_trivial_iterator_test",
    "input_iterator_test",
    "forward_iterator_test",
    "bidirectional_iterator_test",
    "random_access_iterator_test",
    "const_nonconst_iterator_test",
    "readable_iterator_test",
    "writable_iterator_test",
    "swappable_iterator_test",
    "constant_lvalue_iterator_test",
    "non_const_lvalue_iterator_test",
    "forward_readable_iterator_test",
    "forward_swappable_iterator_test",
    "bidirectional_readable_iterator_test",
    "random_access_readable_iterator_test",
]


class IteratorCheckFailed(AssertionError):
    """An iterator did not behave as its category requires."""


def _check(condition, message):
    if not condition:
        raise IteratorCheckFailed(message)


def _copy_of(iterator):
    copier = getattr(iterator, "copy", None)
    return copier() if callable(copier) else _copy.copy(iterator)


def _post_increment(iterator):
    old = _copy_of(iterator)
    iterator.increment()
    return old


def _post_decrement(iterator):
    old = _copy_of(iterator)
    iterator.decrement()
    return old


def _write(iterator, value):
    writer = getattr(iterator, "write", None)
    if callable(writer):
        writer(value)
        return
    try:
        iterator[0] = value
    except TypeError as exc:
        raise IteratorCheckFailed(f"cannot write through {iterator!r}") from exc


def _check_lvalue(iterator):
    _check(
        iterator.value() is _copy_of(iterator).value(),
        "dereferencing does not yield the stored object",
    )


# Classic iterator requirements


def trivial_iterator_test(i, j, val):
    """Preconditions: ``i != j`` and ``i`` reads ``val``."""
    _check(i == i, "i == i")
    _check(j == j, "j == j")
    _check(i != j, "i != j")
    _check(i.value() == val, "*i == val")
    k = _copy_of(i)
    _check(k == k, "k == k")
    _check(k == i, "copy of i == i")
    _check(k != j, "copy of i != j")
    _check(k.value() == val, "*copy == val")


def mutable_trivial_iterator_test(i, j, val):
    """Write ``val`` through ``i``, then run the trivial iterator test."""
    _write(i, val)
    trivial_iterator_test(i, j, val)


def input_iterator_test(i, v1, v2):
    """Preconditions: ``i`` reads ``v1`` and the next position reads ``v2``."""
    i = _copy_of(i)
    i1 = _copy_of(i)
    _check(i == i1, "i == copy")
    _check(not (i != i1), "not (i != copy)")
    _check(i1.value() == v1, "*copy == v1")
    _check(i.value() == v1, "*i == v1")
    _check(_post_increment(i).value() == v1, "*i++ == v1")

    i1 = _copy_of(i)
    _check(i == i1, "i == copy after increment")
    _check(not (i != i1), "not (i != copy) after increment")
    _check(i1.value() == v2, "*copy == v2")
    _check(i.value() == v2, "*i == v2")
    i.increment()


def forward_iterator_test(i, v1, v2):
    """Input requirements plus multi-pass copies and lvalue reads."""
    input_iterator_test(i, v1, v2)
    i = _copy_of(i)
    i1 = _copy_of(i)
    i2 = _copy_of(i)
    _check(i == _post_increment(i1), "i == i1++")
    _check(i != i2.increment(), "i != ++i2")

    trivial_iterator_test(i, i1, v1)
    trivial_iterator_test(i, i2, v1)

    i.increment()
    _check(i == i1, "++i == i1")
    _check(i == i2, "++i == i2")
    i1.increment()
    i2.increment()

    trivial_iterator_test(i, i1, v2)
    trivial_iterator_test(i, i2, v2)

    _check_lvalue(i)


def bidirectional_iterator_test(i, v1, v2):
    """Forward requirements plus decrement."""
    forward_iterator_test(i, v1, v2)
    i = _copy_of(i)
    i.increment()
    i1 = _copy_of(i)
    i2 = _copy_of(i)
    _check(i == _post_decrement(i1), "i == i1--")
    _check(i != i2.decrement(), "i != --i2")

    trivial_iterator_test(i, i1, v2)
    trivial_iterator_test(i, i2, v2)

    i.decrement()
    _check(i == i1, "--i == i1")
    _check(i == i2, "--i == i2")
    i1.increment()
    i2.increment()

    trivial_iterator_test(i, i1, v1)
    trivial_iterator_test(i, i2, v1)


def _random_access_walk(i, n, vals):
    i = _copy_of(i)
    j = _copy_of(i)

    for c, expected in enumerate(islice(vals, n - 1)):
        _check(i == j + c, f"i == j + {c}")
        _check(i.value() == expected, f"*i == vals[{c}]")
        _check(i.value() == j[c], f"*i == j[{c}]")
        _check(i.value() == (j + c).value(), f"*i == *(j + {c})")
        _check(i.value() == (c + j).value(), f"*i == *({c} + j)")
        i.increment()
        _check(i > j, "i > j")
        _check(i >= j, "i >= j")
        _check(j <= i, "j <= i")
        _check(j < i, "j < i")

    k = j + (n - 1)
    for c in range(n - 1):
        back = n - 1 - c
        _check(i == k - c, f"i == k - {c}")
        _check(i.value() == vals[back], f"*i == vals[{back}]")
        _check(i.value() == j[back], f"*i == j[{back}]")
        q = k - c
        _check(i.value() == q.value(), f"*i == *(k - {c})")
        _check(i > j, "i > j")
        _check(i >= j, "i >= j")
        _check(j <= i, "j <= i")
        _check(j < i, "j < i")
        i.decrement()


def random_access_iterator_test(i, n, vals):
    """Precondition: ``[i, i + n)`` is a valid range reading ``vals``."""
    bidirectional_iterator_test(i, vals[0], vals[1])
    _random_access_walk(i, n, vals)


def const_nonconst_iterator_test(i, j):
    """Precondition: ``i != j``; a copy of ``i`` compares equal to ``i`` both ways."""
    _check(i != j, "i != j")
    _check(j != i, "j != i")
    _check(is_interoperable(i, j), "iterator types are not interoperable")
    k = _copy_of(i)
    _check(k == i, "k == i")
    _check(i == k, "i == k")


# Access and traversal requirements


def readable_iterator_test(i, v):
    """Precondition: ``i`` reads ``v``."""
    i2 = _copy_of(i)
    _check(i.value() == v, "*i == v")
    _check(i2.value() == v, "*copy == v")
    if callable(getattr(i, "increment", None)):
        _check(_post_increment(_copy_of(i)).value() == v, "*i++ == v")


def writable_iterator_test(i, v, v2):
    """Write ``v`` at ``i`` and, if incrementable, ``v2`` at the next position."""
    _write(_copy_of(i), v)
    if callable(getattr(i, "increment", None)):
        i1 = _copy_of(i)
        i1.increment()
        _write(_post_increment(i1), v2)
        _post_increment(i1)


def swappable_iterator_test(i, j):
    """Swapping through copies exchanges the values read through ``i`` and ``j``."""
    i2 = _copy_of(i)
    j2 = _copy_of(j)
    bi, bj = i.value(), j.value()
    a, b = i2.value(), j2.value()
    _write(i2, b)
    _write(j2, a)
    ai, aj = i.value(), j.value()
    _check(bi == aj and bj == ai, "values were not exchanged")


def constant_lvalue_iterator_test(i, v1):
    """``i`` reads the stored object ``v1`` and cannot be written through."""
    i2 = _copy_of(i)
    v2 = i2.value()
    _check(v1 == v2, "*i == v1")
    _check_lvalue(i)
    try:
        _write(i2, v2)
    except IteratorCheckFailed:
        return
    raise IteratorCheckFailed("a constant iterator accepted a write")


def non_const_lvalue_iterator_test(i, v1, v2):
    """``i`` reads ``v1``; after writing ``v2`` a copy reads ``v2`` too."""
    i2 = _copy_of(i)
    _check(i2.value() == v1, "*i == v1")
    _write(i, v2)
    _check(i2.value() == v2, "*copy == v2 after write")
    _check_lvalue(i)


def forward_readable_iterator_test(i, j, val1, val2):
    """Preconditions: ``i != j``, ``i`` reads ``val1``, the next position ``val2``."""
    i2 = _copy_of(i)
    i3 = _copy_of(i)
    _check(i2 == i3, "copies are equal")
    _check(i != j, "i != j")
    _check(i2 != j, "copy != j")
    readable_iterator_test(i, val1)
    readable_iterator_test(i2, val1)
    readable_iterator_test(i3, val1)

    _check(i == _post_increment(i2), "i == i2++")
    _check(i != i3.increment(), "i != ++i3")

    readable_iterator_test(i2, val2)
    readable_iterator_test(i3, val2)
    readable_iterator_test(i, val1)


def forward_swappable_iterator_test(i, j, val1, val2):
    """Forward readable requirements, then swap the values at ``i`` and ``i + 1``."""
    forward_readable_iterator_test(i, j, val1, val2)
    i2 = _copy_of(i)
    i2.increment()
    swappable_iterator_test(i, i2)


def bidirectional_readable_iterator_test(i, v1, v2):
    """Preconditions: ``i`` reads ``v1`` and the next position ``v2``."""
    i = _copy_of(i)
    j = _copy_of(i)
    j.increment()
    forward_readable_iterator_test(i, j, v1, v2)
    i.increment()

    i1 = _copy_of(i)
    i2 = _copy_of(i)
    _check(i == _post_decrement(i1), "i == i1--")
    _check(i != i2.decrement(), "i != --i2")

    readable_iterator_test(i, v2)
    readable_iterator_test(i1, v1)
    readable_iterator_test(i2, v1)

    i.decrement()
    _check(i == i1, "--i == i1")
    _check(i == i2, "--i == i2")
    i1.increment()
    i2.increment()

    readable_iterator_test(i, v1)
    readable_iterator_test(i1, v2)
    readable_iterator_test(i2, v2)


def random_access_readable_iterator_test(i, n, vals):
    """Precondition: ``[i, i + n)`` is a valid range reading ``vals``."""
    bidirectional_readable_iterator_test(i, vals[0], vals[1])
    _random_access_walk(i, n, vals)