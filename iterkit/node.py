"""A singly linked list of nodes holding arbitrary values."""

from __future__ import annotations

__all__ = ["Node"]


class Node:
    """A list node holding ``value`` and a link to the next node."""

    __slots__ = ("value", "next")

    def __init__(self, value):
        self.value = value
        self.next = None

    def append(self, node):
        """Attach ``node`` (and whatever follows it) at the end of this list."""
        chain = {id(n) for n in self}
        if any(id(n) in chain for n in node):
            raise ValueError("appending this node would make the list cyclic")
        last = self
        for last in self:
            pass
        last.next = node

    def double_me(self):
        """Replace this node's value with the value added to itself."""
        self.value = self.value + self.value

    def __iter__(self):
        node = self
        while node is not None:
            yield node
            node = node.next

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Node({self.value!r})"