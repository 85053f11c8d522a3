"""An output iterator that hands every written value to a function."""

from __future__ import annotations

from .categories import OutputIteratorTag

__all__ = ["FunctionOutputIterator", "make_function_output_iterator"]


class FunctionOutputIterator:
    """Writing a value calls ``function`` with it; incrementing does nothing."""

    __slots__ = ("function",)

    iterator_category = OutputIteratorTag

    def __init__(self, function):
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function

    def write(self, value):
        """Pass ``value`` to the function; returns the iterator."""
        self.function(value)
        return self

    def increment(self):
        """Has no effect; returns the iterator."""
        return self

    def __repr__(self):
        return f"FunctionOutputIterator({self.function!r})"


def make_function_output_iterator(function):
    """Build a :class:`FunctionOutputIterator` around ``function``."""
    return FunctionOutputIterator(function)