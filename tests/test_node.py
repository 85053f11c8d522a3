import pytest

from iterkit.node import Node


def test_new_node_has_no_next():
    node = Node(1)
    assert node.next is None
    assert list(node) == [node]


def test_append_links_in_order():
    head = Node(1)
    second = Node(2.5)
    third = Node("x")
    head.append(second)
    head.append(third)
    assert head.next is second
    assert second.next is third
    assert [n.value for n in head] == [1, 2.5, "x"]


def test_append_brings_whole_tail():
    head = Node(1)
    tail = Node(2)
    tail.append(Node(3))
    head.append(tail)
    assert [n.value for n in head] == [1, 2, 3]


def test_double_me_int_and_str():
    number = Node(21)
    number.double_me()
    assert number.value == 42
    text = Node("ab")
    text.double_me()
    assert text.value == "abab"


def test_double_me_touches_only_its_node():
    head = Node(1)
    head.append(Node(5))
    head.next.double_me()
    assert head.value == 1


def test_str_is_value_str():
    node = Node("hello")
    assert str(node) == "hello"
    assert " ".join(str(n) for n in Node(7)) == str(7)


def test_append_self_raises():
    head = Node(1)
    with pytest.raises(ValueError):
        head.append(head)


def test_append_node_already_in_list_raises():
    head = Node(1)
    second = Node(2)
    head.append(second)
    with pytest.raises(ValueError):
        second.append(head)
    assert [n.value for n in head] == [1, 2]