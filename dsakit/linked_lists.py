"""Singly and circular linked lists with positional insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A list cell holding a value and a link to the next cell."""

    data: T
    next: Optional["Node[T]"] = field(default=None, repr=False)


class SinglyLinkedList(Generic[T]):
    """A null-terminated singly linked list with one-based positions."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self._size = 0
        tail: Optional[Node[T]] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def push_front(self, item: T) -> None:
        """Put ``item`` before the current head."""
        self.head = Node(item, self.head)
        self._size += 1

    def append(self, item: T) -> None:
        """Put ``item`` after the current last node."""
        node = Node(item)
        if self.head is None:
            self.head = node
        else:
            *_, tail = self._nodes()
            tail.next = node
        self._size += 1

    def insert(self, position: int, item: T) -> None:
        """Insert ``item`` so it becomes the node at one-based ``position``.

        A position past the end appends.
        """
        if position < 1:
            raise IndexError(f"position {position} must be at least 1")
        if position == 1 or self.head is None:
            self.push_front(item)
            return
        node = self.head
        count = 1
        while node.next is not None and count != position - 1:
            node = node.next
            count += 1
        node.next = Node(item, node.next)
        self._size += 1

    def pop_last(self) -> T:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            item = self.head.data
            self.head = None
            self._size = 0
            return item
        node = self.head
        while node.next.next is not None:
            node = node.next
        item = node.next.data
        node.next = None
        self._size -= 1
        return item

    def delete(self, position: int) -> T:
        """Remove and return the value at one-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        if position == 1:
            removed = self.head
            self.head = removed.next
        else:
            node = self.head
            for _ in range(position - 2):
                node = node.next
            removed = node.next
            node.next = removed.next
        self._size -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the links in place."""
        previous: Optional[Node[T]] = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def middle(self) -> T:
        """Return the middle value; for an even length, the second of the two."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        fast: Optional[Node[T]] = self.head
        slow = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.data

    def remove_adjacent_duplicates(self) -> None:
        """Drop every node equal to the node just before it."""
        node = self.head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next


class CircularLinkedList(Generic[T]):
    """A circular singly linked list tracked through its last node."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.last: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node[T]]:
        if self.last is None:
            return
        node = self.last.next
        while True:
            yield node
            if node is self.last:
                return
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def push_front(self, item: T) -> None:
        """Put ``item`` at the head, just after the last node."""
        node = Node(item)
        if self.last is None:
            node.next = node
            self.last = node
        else:
            node.next = self.last.next
            self.last.next = node
        self._size += 1

    def append(self, item: T) -> None:
        """Put ``item`` after the last node, making it the new last."""
        self.push_front(item)
        self.last = self.last.next

    def insert(self, position: int, item: T) -> None:
        """Insert ``item`` so it becomes the node at one-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self.push_front(item)
            return
        node = self.last.next
        for _ in range(position - 2):
            node = node.next
        new_node = Node(item, node.next)
        node.next = new_node
        if node is self.last:
            self.last = new_node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the head value."""
        if self.last is None:
            raise IndexError("pop from an empty list")
        head = self.last.next
        if head is self.last:
            self.last = None
        else:
            self.last.next = head.next
        self._size -= 1
        return head.data

    def pop_last(self) -> T:
        """Remove and return the last value."""
        if self.last is None:
            raise IndexError("pop from an empty list")
        removed = self.last
        if removed.next is removed:
            self.last = None
        else:
            node = removed.next
            while node.next is not removed:
                node = node.next
            node.next = removed.next
            self.last = node
        self._size -= 1
        return removed.data