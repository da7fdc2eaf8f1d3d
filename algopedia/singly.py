"""A singly linked list of integers with insertion, deletion, search and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One element of a singly linked list."""

    value: int
    next: Node | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A chain of nodes reachable from ``head``, each pointing to the next."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, value: int) -> Node:
        """Insert ``value`` before the current head and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def append(self, value: int) -> Node:
        """Insert ``value`` after the last node and return its node."""
        node = Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def insert_after(self, key: int, value: int) -> bool:
        """Insert ``value`` after the first node holding ``key``.

        Returns whether ``key`` was found; the list is unchanged otherwise.
        """
        for node in self._nodes():
            if node.value == key:
                node.next = Node(value, node.next)
                return True
        return False

    def delete_head(self) -> int:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        return removed.value

    def delete_end(self) -> int:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        previous: Node | None = None
        last = self.head
        while last.next is not None:
            previous, last = last, last.next
        if previous is None:
            self.head = None
        else:
            previous.next = None
        return last.value

    def delete_nth(self, position: int) -> int:
        """Remove the node at the 1-based ``position`` and return its value."""
        if position < 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            return self.delete_head()
        previous = self.head
        for _ in range(position - 2):
            if previous is None:
                break
            previous = previous.next
        if previous is None or previous.next is None:
            raise IndexError(f"position {position} is out of range")
        removed = previous.next
        previous.next = removed.next
        return removed.value

    def reverse_iterative(self) -> None:
        """Reverse the list in place by turning each link around in one pass."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, turning links around recursively."""

        def turn(current: Node | None, previous: Node | None) -> Node | None:
            if current is None:
                return previous
            following = current.next
            current.next = previous
            return turn(following, current)

        self.head = turn(self.head, None)

    def reverse_with_stack(self) -> None:
        """Reverse the list in place by relinking nodes popped from a stack."""
        stack = list(self._nodes())
        if not stack:
            return
        self.head = current = stack.pop()
        while stack:
            current.next = stack.pop()
            current = current.next
        current.next = None

    def search(self, value: int) -> int | None:
        """Return the 0-based index of the first node holding ``value``, or ``None``."""
        return next(
            (index for index, item in enumerate(self) if item == value), None
        )

    def swap(self, first: int, second: int) -> bool:
        """Swap the nodes (not just values) holding ``first`` and ``second``.

        Returns whether a swap happened: equal values or a missing value leave
        the list unchanged.
        """
        if first == second:
            return False

        def locate(value: int) -> tuple[Node | None, Node | None]:
            previous: Node | None = None
            for node in self._nodes():
                if node.value == value:
                    return previous, node
                previous = node
            return previous, None

        previous_a, node_a = locate(first)
        previous_b, node_b = locate(second)
        if node_a is None or node_b is None:
            return False

        if previous_a is None:
            self.head = node_b
        else:
            previous_a.next = node_b
        if previous_b is None:
            self.head = node_a
        else:
            previous_b.next = node_a
        node_a.next, node_b.next = node_b.next, node_a.next
        return True