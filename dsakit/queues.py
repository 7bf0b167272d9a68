"""Bounded array queues and an unbounded linked queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue(Generic[T]):
    """Fixed-size array queue whose slots are not reused until it drains.

    Once ``capacity`` items have been enqueued the queue reports itself full,
    even after some are dequeued; it only starts afresh when emptied.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"LinearQueue({list(self)!r}, capacity={self.capacity})"

    def is_full(self) -> bool:
        """Return True once every slot has been used since the queue was last empty."""
        return len(self._slots) == self.capacity

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._slots

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear; raise QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._front]
        if self._front >= len(self._slots) - 1:
            self._slots = []
            self._front = 0
        else:
            self._front += 1
        return item


class CircularQueue(Generic[T]):
    """Fixed-size ring-buffer queue that reuses freed slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"

    def is_full(self) -> bool:
        """Return True if every slot holds an item."""
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._items

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()


@dataclass
class _Link(Generic[T]):
    data: T
    next: Optional["_Link[T]"] = None


class LinkedQueue(Generic[T]):
    """Unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Link[T]] = None
        self._rear: Optional[_Link[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        link = self._front
        while link is not None:
            yield link.data
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._front is None

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        link = _Link(item)
        if self._rear is None:
            self._front = self._rear = link
        else:
            self._rear.next = link
            self._rear = link
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        link = self._front
        self._front = link.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return link.data