"""A doubly linked list of integers with insertion, deletion, search and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One element of a doubly linked list."""

    value: int
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A chain of nodes reachable from ``head``, linked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._last()
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __str__(self) -> str:
        return "NULL <- " + " <=> ".join(map(str, self)) + " -> NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _contains_node(self, node: Node) -> bool:
        return any(candidate is node for candidate in self._nodes())

    def push(self, value: int) -> Node:
        """Insert ``value`` before the current head and return its node."""
        node = Node(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return node

    def append(self, value: int) -> Node:
        """Insert ``value`` after the last node and return its node."""
        node = Node(value)
        last = self._last()
        if last is None:
            self.head = node
        else:
            last.next = node
            node.prev = last
        return node

    def node_at(self, index: int) -> Node:
        """Return the node at the 0-based ``index``."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"index {index} is out of range")

    def insert_after(self, node: Node, value: int) -> Node:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None or not self._contains_node(node):
            raise ValueError("the given node is not part of this list")
        new_node = Node(value, next=node.next, prev=node)
        if node.next is not None:
            node.next.prev = new_node
        node.next = new_node
        return new_node

    def delete_head(self) -> int:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        if self.head is not None:
            self.head.prev = None
        return removed.value

    def delete_after(self, node: Node) -> int:
        """Remove the node following ``node`` and return its value."""
        if node is None or not self._contains_node(node):
            raise ValueError("the given node is not part of this list")
        removed = node.next
        if removed is None:
            raise IndexError("no node follows the given one")
        node.next = removed.next
        if removed.next is not None:
            removed.next.prev = node
        return removed.value

    def delete_end(self) -> int:
        """Remove the last node and return its value."""
        last = self._last()
        if last is None:
            raise IndexError("delete from an empty list")
        if last.prev is None:
            self.head = None
        else:
            last.prev.next = None
        return last.value

    def reverse_iterative(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        current = self.head
        new_head = current
        while current is not None:
            current.prev, current.next = current.next, current.prev
            new_head = current
            current = current.prev
        self.head = new_head

    def reverse_recursive(self) -> None:
        """Reverse the list in place, swapping links recursively."""

        def turn(node: Node) -> Node:
            node.prev, node.next = node.next, node.prev
            if node.prev is None:
                return node
            return turn(node.prev)

        if self.head is not None:
            self.head = turn(self.head)

    def reverse_with_stack(self) -> None:
        """Reverse the list in place by relinking nodes popped from a stack."""
        stack = list(self._nodes())
        if not stack:
            return
        self.head = previous = stack.pop()
        previous.prev = None
        while stack:
            current = stack.pop()
            previous.next = current
            current.prev = previous
            previous = current
        previous.next = None

    def search(self, value: int) -> bool:
        """Return whether any node holds ``value``."""
        return any(item == value for item in self)

    def swap(self, first: int, second: int) -> bool:
        """Swap the nodes (not just values) holding ``first`` and ``second``.

        When a value occurs more than once, its last node is used. Returns
        whether a swap happened: equal values or a missing value leave the
        list unchanged.
        """
        if first == second:
            return False
        nodes = list(self._nodes())
        index_a = index_b = None
        for index, node in enumerate(nodes):
            if node.value == first:
                index_a = index
            if node.value == second:
                index_b = index
        if index_a is None or index_b is None:
            return False
        nodes[index_a], nodes[index_b] = nodes[index_b], nodes[index_a]
        self._relink(nodes)
        return True

    def _relink(self, nodes: list[Node]) -> None:
        previous: Node | None = None
        for node in nodes:
            node.prev = previous
            if previous is not None:
                previous.next = node
            previous = node
        if previous is not None:
            previous.next = None
        self.head = nodes[0] if nodes else None