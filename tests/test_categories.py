import pytest

from iterkit.categories import (
    BidirectionalIteratorTag,
    BidirectionalTraversal,
    ForwardIteratorTag,
    ForwardTraversal,
    IncrementableTraversal,
    InputIteratorTag,
    InputOutputIteratorTag,
    NoTraversal,
    OutputIteratorTag,
    RandomAccessIteratorTag,
    RandomAccessTraversal,
    SinglePassTraversal,
    category_to_traversal,
    category_with_traversal,
    facade_iterator_category,
    is_iterator_category,
    is_iterator_traversal,
    iterator_traversal,
    minimum_traversal,
    pure_traversal,
)

TRAVERSALS = [
    IncrementableTraversal,
    SinglePassTraversal,
    ForwardTraversal,
    BidirectionalTraversal,
    RandomAccessTraversal,
]
CATEGORIES = [
    OutputIteratorTag,
    InputIteratorTag,
    ForwardIteratorTag,
    BidirectionalIteratorTag,
    RandomAccessIteratorTag,
    InputOutputIteratorTag,
]


class NewRandomAccess(RandomAccessIteratorTag, RandomAccessTraversal):
    pass


class NewIterator:
    iterator_category = NewRandomAccess


class OldIterator:
    iterator_category = RandomAccessIteratorTag


def test_traversal_hierarchy_is_a_chain():
    for weaker, stronger in zip(TRAVERSALS, TRAVERSALS[1:]):
        assert issubclass(stronger, weaker)
        assert not issubclass(weaker, stronger)
        assert minimum_traversal(weaker, stronger) is weaker
        assert minimum_traversal(stronger, weaker) is weaker
        assert pure_traversal(stronger) is stronger
    assert issubclass(IncrementableTraversal, NoTraversal)
    assert minimum_traversal(*TRAVERSALS) is IncrementableTraversal


@pytest.mark.parametrize("tag", CATEGORIES)
def test_categories_are_categories_not_traversals(tag):
    assert is_iterator_category(tag)
    assert not is_iterator_traversal(tag)


@pytest.mark.parametrize("tag", TRAVERSALS)
def test_traversals_are_traversals_not_categories(tag):
    assert is_iterator_traversal(tag)
    assert not is_iterator_category(tag)


def test_no_traversal_and_non_types_are_neither():
    assert not is_iterator_traversal(NoTraversal)
    assert not is_iterator_category(NoTraversal)
    assert not is_iterator_category(42)
    assert not is_iterator_traversal("tag")


def test_input_output_tag_converts_to_both():
    assert issubclass(InputOutputIteratorTag, InputIteratorTag)
    assert issubclass(InputOutputIteratorTag, OutputIteratorTag)
    assert category_to_traversal(InputOutputIteratorTag) is SinglePassTraversal


@pytest.mark.parametrize(
    "category, traversal",
    [
        (RandomAccessIteratorTag, RandomAccessTraversal),
        (BidirectionalIteratorTag, BidirectionalTraversal),
        (ForwardIteratorTag, ForwardTraversal),
        (InputIteratorTag, SinglePassTraversal),
        (OutputIteratorTag, IncrementableTraversal),
    ],
)
def test_category_to_traversal(category, traversal):
    assert category_to_traversal(category) is traversal


@pytest.mark.parametrize("tag", TRAVERSALS)
def test_category_to_traversal_passes_traversals_through(tag):
    assert category_to_traversal(tag) is tag


def test_category_to_traversal_rejects_unknown():
    with pytest.raises(TypeError):
        category_to_traversal(NoTraversal)
    with pytest.raises(TypeError):
        category_to_traversal(int)


def test_iterator_traversal_of_new_style_iterator():
    tc = iterator_traversal(NewIterator)
    assert tc is NewRandomAccess
    assert issubclass(tc, RandomAccessTraversal)
    assert iterator_traversal(NewIterator()) is NewRandomAccess


def test_iterator_traversal_of_old_style_iterator():
    assert iterator_traversal(OldIterator) is RandomAccessTraversal


def test_iterator_traversal_requires_category():
    with pytest.raises(TypeError):
        iterator_traversal(object())


def test_pure_traversal_strips_composites():
    assert pure_traversal(NewRandomAccess) is RandomAccessTraversal
    composite = category_with_traversal(InputIteratorTag, BidirectionalTraversal)
    assert pure_traversal(composite) is BidirectionalTraversal


@pytest.mark.parametrize("tag", TRAVERSALS)
def test_pure_traversal_is_idempotent(tag):
    assert pure_traversal(pure_traversal(tag)) is pure_traversal(tag) is tag


def test_pure_traversal_rejects_categories():
    with pytest.raises(TypeError):
        pure_traversal(RandomAccessIteratorTag)


def test_minimum_traversal():
    assert minimum_traversal() is RandomAccessTraversal
    assert minimum_traversal(RandomAccessTraversal, BidirectionalTraversal) is BidirectionalTraversal
    assert (
        minimum_traversal(BidirectionalIteratorTag, RandomAccessIteratorTag)
        is BidirectionalTraversal
    )
    assert minimum_traversal(ForwardTraversal, SinglePassTraversal, RandomAccessTraversal) is (
        SinglePassTraversal
    )


def test_minimum_traversal_is_order_independent():
    tags = [RandomAccessTraversal, ForwardIteratorTag, BidirectionalTraversal]
    assert minimum_traversal(*tags) is minimum_traversal(*reversed(tags))


def test_category_with_traversal_builds_composite():
    composite = category_with_traversal(InputIteratorTag, RandomAccessTraversal)
    assert issubclass(composite, InputIteratorTag)
    assert issubclass(composite, RandomAccessTraversal)
    assert is_iterator_category(composite)
    assert category_with_traversal(InputIteratorTag, RandomAccessTraversal) is composite


@pytest.mark.parametrize(
    "category, traversal",
    [
        (ForwardIteratorTag, ForwardTraversal),
        (RandomAccessIteratorTag, BidirectionalTraversal),
        (ForwardTraversal, RandomAccessTraversal),
        (InputIteratorTag, RandomAccessIteratorTag),
        (InputIteratorTag, NoTraversal),
    ],
)
def test_category_with_traversal_rejects_bad_pairs(category, traversal):
    with pytest.raises(TypeError):
        category_with_traversal(category, traversal)


def test_facade_keeps_classic_categories():
    assert facade_iterator_category(ForwardIteratorTag, False, False) is ForwardIteratorTag


@pytest.mark.parametrize(
    "traversal, category",
    [
        (RandomAccessTraversal, RandomAccessIteratorTag),
        (BidirectionalTraversal, BidirectionalIteratorTag),
        (ForwardTraversal, ForwardIteratorTag),
    ],
)
def test_facade_lvalue_traversals_map_to_classic(traversal, category):
    assert facade_iterator_category(traversal, True, True) is category


def test_facade_readable_non_lvalue_gets_composite():
    result = facade_iterator_category(RandomAccessTraversal, False, True)
    assert issubclass(result, InputIteratorTag)
    assert category_to_traversal(result) is result
    assert pure_traversal(result) is RandomAccessTraversal


def test_facade_single_pass_readable_is_input():
    assert facade_iterator_category(SinglePassTraversal, False, True) is InputIteratorTag


def test_facade_unreadable_keeps_traversal():
    assert facade_iterator_category(ForwardTraversal, False, False) is ForwardTraversal
    assert facade_iterator_category(IncrementableTraversal, True, True) is IncrementableTraversal


def test_facade_rejects_non_tags():
    with pytest.raises(TypeError):
        facade_iterator_category(NoTraversal, True, True)