"""A circular singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One element of a circular linked list."""

    value: int
    next: Node | None = field(default=None, repr=False)


class CircularLinkedList:
    """A ring of nodes entered at ``head``; the last node links back to it."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push(value)

    def _nodes(self) -> Iterator[Node]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head:
                break

    def _last(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, value: int) -> Node:
        """Insert ``value`` at the end of the ring and return its node."""
        node = Node(value)
        last = self._last()
        if last is None:
            node.next = node
            self.head = node
        else:
            last.next = node
            node.next = self.head
        return node

    def insert_at_head(self, value: int) -> Node:
        """Insert ``value`` before the current head and make it the head."""
        node = self.push(value)
        self.head = node
        return node

    def insert_after(self, position: int, value: int) -> Node:
        """Insert ``value`` so that it lands at the 1-based ``position``.

        A position of 2 or less puts it right after the head; a position past
        the end puts it last. In an empty list the new node becomes the head.
        """
        if self.head is None:
            return self.push(value)
        nodes = list(self._nodes())
        anchor = nodes[max(0, min(position - 2, len(nodes) - 1))]
        node = Node(value, anchor.next)
        anchor.next = node
        return node

    def delete_head(self) -> int:
        """Remove the head node and return its value."""
        head = self.head
        if head is None:
            raise IndexError("delete from an empty list")
        if head.next is head:
            self.head = None
        else:
            last = self._last()
            last.next = head.next
            self.head = head.next
        return head.value

    def delete_at(self, position: int) -> int:
        """Remove the node at the 0-based ``position`` and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        nodes = list(self._nodes())
        if not 0 <= position < len(nodes):
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            return self.delete_head()
        removed = nodes[position]
        nodes[position - 1].next = removed.next
        return removed.value

    def delete_last(self) -> int:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        nodes = list(self._nodes())
        removed = nodes[-1]
        if len(nodes) == 1:
            self.head = None
        else:
            nodes[-2].next = self.head
        return removed.value

    def reverse(self) -> None:
        """Reverse the ring in place by turning each link around."""
        head = self.head
        if head is None:
            return
        previous = head
        current = head.next
        while current is not head:
            following = current.next
            current.next = previous
            previous, current = current, following
        head.next = previous
        self.head = previous

    def search(self, value: int) -> bool:
        """Return whether any node holds ``value``."""
        return any(item == value for item in self)

    def swap(self, first: int, second: int) -> bool:
        """Swap the nodes (not just values) holding ``first`` and ``second``.

        The first node holding each value is used. Returns whether a swap
        happened: equal values or a missing value leave the ring unchanged.
        """
        if first == second:
            return False
        nodes = list(self._nodes())
        values = [node.value for node in nodes]
        if first not in values or second not in values:
            return False
        index_a, index_b = values.index(first), values.index(second)
        nodes[index_a], nodes[index_b] = nodes[index_b], nodes[index_a]
        for node, following in zip(nodes, nodes[1:] + nodes[:1]):
            node.next = following
        self.head = nodes[0]
        return True