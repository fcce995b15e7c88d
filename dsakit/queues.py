"""FIFO queues: linear array, circular array, linked, and built from two stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import chain, islice
from typing import Any

from .stack import Stack


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")


class LinearQueue:
    """An array queue whose slots are not reused until it is fully drained.

    Once ``capacity`` values have been enqueued the queue reports full, even
    if some of them were dequeued since; emptying it completely resets it.
    """

    def __init__(self, capacity: int = 20) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])


class CircularQueue:
    """A fixed-size ring buffer queue holding up to ``capacity`` values."""

    def __init__(self, capacity: int = 20) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return value

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        ring = chain(self._slots[self._front:], self._slots[: self._front])
        return islice(ring, self._size)


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class StackQueue:
    """A bounded queue kept in one stack, using a second stack to dequeue."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._inbox: Stack[Any] = Stack(capacity)
        self._spare: Stack[Any] = Stack(capacity)

    def enqueue(self, value: Any) -> None:
        if self._inbox.is_full():
            raise QueueFullError("queue is full")
        self._inbox.push(value)

    def dequeue(self) -> Any:
        if self._inbox.is_empty():
            raise QueueEmptyError("queue is empty")
        while not self._inbox.is_empty():
            self._spare.push(self._inbox.pop())
        value = self._spare.pop()
        while not self._spare.is_empty():
            self._inbox.push(self._spare.pop())
        return value

    def is_empty(self) -> bool:
        return self._inbox.is_empty()

    def is_full(self) -> bool:
        return self._inbox.is_full()

    def __len__(self) -> int:
        return len(self._inbox)

    def __iter__(self) -> Iterator[Any]:
        return self._inbox.bottom_up()