"""Iterator category and traversal tags, and the conversions between them.

Tags are classes. A tag "converts" to another tag when it is a subclass
of it, so a more capable tag can stand in wherever a weaker one is asked for.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "NoTraversal",
    "IncrementableTraversal",
    "SinglePassTraversal",
    "ForwardTraversal",
    "BidirectionalTraversal",
    "RandomAccessTraversal",
    "OutputIteratorTag",
    "InputIteratorTag",
    "ForwardIteratorTag",
    "BidirectionalIteratorTag",
    "RandomAccessIteratorTag",
    "InputOutputIteratorTag",
    "is_iterator_category",
    "is_iterator_traversal",
    "category_to_traversal",
    "pure_traversal",
    "iterator_traversal",
    "minimum_traversal",
    "category_with_traversal",
    "facade_iterator_category",
]


# Traversal tags


class NoTraversal:
    """Root of the traversal hierarchy; supports no movement at all."""


class IncrementableTraversal(NoTraversal):
    """The iterator can be incremented."""


class SinglePassTraversal(IncrementableTraversal):
    """Incrementable and equality comparable; one pass only."""


class ForwardTraversal(SinglePassTraversal):
    """Multi-pass forward movement."""


class BidirectionalTraversal(ForwardTraversal):
    """Forward movement plus decrement."""


class RandomAccessTraversal(BidirectionalTraversal):
    """Constant-time jumps, differences and ordering."""


# Classic iterator category tags


class OutputIteratorTag:
    """Write-only, single-pass iterator."""


class InputIteratorTag:
    """Read-only, single-pass iterator."""


class ForwardIteratorTag(InputIteratorTag):
    """Multi-pass forward iterator."""


class BidirectionalIteratorTag(ForwardIteratorTag):
    """Forward iterator that can also move backwards."""


class RandomAccessIteratorTag(BidirectionalIteratorTag):
    """Bidirectional iterator with constant-time jumps."""


class InputOutputIteratorTag(InputIteratorTag, OutputIteratorTag):
    """Category of an iterator that is both readable and writable in one pass."""


_PURE_TRAVERSALS = (
    RandomAccessTraversal,
    BidirectionalTraversal,
    ForwardTraversal,
    SinglePassTraversal,
    IncrementableTraversal,
)

_CATEGORY_TRAVERSALS = (
    (RandomAccessIteratorTag, RandomAccessTraversal),
    (BidirectionalIteratorTag, BidirectionalTraversal),
    (ForwardIteratorTag, ForwardTraversal),
    (InputIteratorTag, SinglePassTraversal),
    (OutputIteratorTag, IncrementableTraversal),
)


def _converts(tag, target) -> bool:
    return isinstance(tag, type) and issubclass(tag, target)


def _name(tag) -> str:
    return getattr(tag, "__name__", repr(tag))


def is_iterator_category(tag) -> bool:
    """True if ``tag`` converts to a classic input or output category."""
    return _converts(tag, (InputIteratorTag, OutputIteratorTag))


def is_iterator_traversal(tag) -> bool:
    """True if ``tag`` converts to :class:`IncrementableTraversal`."""
    return _converts(tag, IncrementableTraversal)


def category_to_traversal(category):
    """Return the traversal tag for a category; traversal tags pass through."""
    if is_iterator_traversal(category):
        return category
    for old, traversal in _CATEGORY_TRAVERSALS:
        if _converts(category, old):
            return traversal
    raise TypeError(f"{_name(category)} is neither an iterator category nor a traversal")


def pure_traversal(traversal):
    """Reduce a traversal (possibly a composite tag) to one of the five standard ones."""
    for pure in _PURE_TRAVERSALS:
        if _converts(traversal, pure):
            return pure
    raise TypeError(f"{_name(traversal)} is not a traversal tag")


def iterator_traversal(iterator):
    """Traversal tag of an iterator, read from its ``iterator_category`` attribute."""
    try:
        category = iterator.iterator_category
    except AttributeError:
        raise TypeError(f"{iterator!r} has no iterator_category") from None
    return category_to_traversal(category)


def minimum_traversal(*args):
    """The weakest standard traversal among the given categories or traversals.

    With no arguments the result is :class:`RandomAccessTraversal`.
    """
    result = RandomAccessTraversal
    for tag in args:
        pure = pure_traversal(category_to_traversal(tag))
        if issubclass(result, pure):
            result = pure
        elif not issubclass(pure, result):
            raise TypeError(f"{_name(result)} and {_name(pure)} are unrelated")
    return result


@lru_cache(maxsize=None)
def category_with_traversal(category, traversal):
    """A composite tag converting to both ``category`` and ``traversal``.

    ``traversal`` must be strictly more capable than what ``category`` implies.
    The same pair always yields the same class.
    """
    if not is_iterator_category(category):
        raise TypeError(f"{_name(category)} is not an iterator category")
    if is_iterator_traversal(category):
        raise TypeError(f"{_name(category)} is already a traversal tag")
    if is_iterator_category(traversal):
        raise TypeError(f"{_name(traversal)} is an iterator category")
    if not is_iterator_traversal(traversal):
        raise TypeError(f"{_name(traversal)} is not a traversal tag")
    if issubclass(category_to_traversal(category), traversal):
        raise TypeError(
            f"{_name(category)} already implies {_name(traversal)}; use it directly"
        )
    name = f"{category.__name__}With{traversal.__name__}"
    return type(name, (category, traversal), {"__module__": __name__})


def facade_iterator_category(category_or_traversal, reference_is_lvalue, readable):
    """Compute the category tag of an iterator built on a traversal.

    Classic categories are returned unchanged. For a traversal tag, the
    classic category is chosen from whether dereferencing yields an lvalue
    and whether the result is readable as a value; when that category does
    not express the full traversal, a composite tag is returned.
    """
    if is_iterator_category(category_or_traversal):
        return category_or_traversal
    traversal = category_or_traversal
    if not is_iterator_traversal(traversal):
        raise TypeError(f"{_name(traversal)} is not a traversal tag")

    if reference_is_lvalue and issubclass(traversal, ForwardTraversal):
        if issubclass(traversal, RandomAccessTraversal):
            category = RandomAccessIteratorTag
        elif issubclass(traversal, BidirectionalTraversal):
            category = BidirectionalIteratorTag
        else:
            category = ForwardIteratorTag
    elif readable and issubclass(traversal, SinglePassTraversal):
        category = InputIteratorTag
    else:
        category = traversal

    if category_to_traversal(category) is traversal:
        return category
    return category_with_traversal(category, traversal)