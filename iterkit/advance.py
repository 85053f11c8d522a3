"""Move an iterator by a signed number of steps, using the best means its traversal allows."""

from __future__ import annotations

from .categories import (
    BidirectionalTraversal,
    RandomAccessTraversal,
    iterator_traversal,
    pure_traversal,
)

__all__ = ["advance"]


def advance(iterator, n):
    """Move ``iterator`` by ``n`` steps in place and return it.

    Random-access iterators jump with ``advance(n)``. Bidirectional ones step
    forwards or backwards one at a time. Anything weaker only steps forwards,
    so a negative ``n`` leaves it where it is.
    """
    traversal = pure_traversal(iterator_traversal(iterator))
    if issubclass(traversal, RandomAccessTraversal):
        iterator.advance(n)
    elif issubclass(traversal, BidirectionalTraversal):
        for _ in range(abs(n)):
            if n > 0:
                iterator.increment()
            else:
                iterator.decrement()
    else:
        for _ in range(max(n, 0)):
            iterator.increment()
    return iterator