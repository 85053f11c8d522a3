import pytest

from iterkit.advance import advance
from iterkit.categories import (
    BidirectionalTraversal,
    ForwardIteratorTag,
    ForwardTraversal,
    IncrementableTraversal,
    RandomAccessTraversal,
    SinglePassTraversal,
)
from iterkit.cursor import SequenceCursor
from iterkit.zip import make_zip_iterator


class _CountingForward:
    iterator_category = ForwardIteratorTag

    def __init__(self):
        self.steps = 0

    def increment(self):
        self.steps += 1
        return self


def test_random_access_moves_both_ways():
    data = list(range(10))
    cursor = SequenceCursor(data)
    result = advance(cursor, 4)
    assert result is cursor
    assert cursor.value() == data[4]
    advance(cursor, -3)
    assert cursor.value() == data[1]


def test_bidirectional_moves_backwards_by_stepping():
    data = list(range(10))
    cursor = SequenceCursor(data, 5, BidirectionalTraversal)
    advance(cursor, -2)
    assert cursor.position == 3
    advance(cursor, 4)
    assert cursor.position == 7


def test_forward_ignores_negative_distance():
    data = list(range(10))
    cursor = SequenceCursor(data, 5, ForwardTraversal)
    advance(cursor, -3)
    assert cursor.position == 5


def test_forward_steps_one_at_a_time():
    counter = _CountingForward()
    advance(counter, 6)
    assert counter.steps == 6


@pytest.mark.parametrize(
    "traversal",
    [IncrementableTraversal, SinglePassTraversal, ForwardTraversal, BidirectionalTraversal, RandomAccessTraversal],
)
def test_zero_leaves_position(traversal):
    cursor = SequenceCursor([1, 2, 3], 1, traversal)
    advance(cursor, 0)
    assert cursor.position == 1


@pytest.mark.parametrize("traversal", [SinglePassTraversal, IncrementableTraversal])
def test_weak_traversals_step_forward(traversal):
    cursor = SequenceCursor([1, 2, 3, 4], 0, traversal)
    advance(cursor, 3)
    assert cursor.position == 3


def test_out_of_range_raises():
    cursor = SequenceCursor([1, 2, 3])
    with pytest.raises(IndexError):
        advance(cursor, 5)


def test_bidirectional_before_start_raises():
    cursor = SequenceCursor([1, 2, 3], 1, BidirectionalTraversal)
    with pytest.raises(IndexError):
        advance(cursor, -2)


def test_object_without_category_raises():
    with pytest.raises(TypeError):
        advance(object(), 1)


def test_zip_iterator_advances_all_components():
    left = [1, 2, 3, 4]
    right = ["a", "b", "c", "d"]
    zipped = make_zip_iterator([SequenceCursor(left), SequenceCursor(right)])
    advance(zipped, 2)
    assert zipped.value() == (left[2], right[2])