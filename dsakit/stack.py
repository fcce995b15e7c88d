"""A LIFO stack that is either bounded by a capacity or unbounded."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class Stack(Generic[T]):
    """A last-in, first-out stack.

    With ``capacity`` set the stack behaves like a fixed array stack and
    refuses pushes once full; with ``capacity=None`` it grows without bound.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack is full (capacity {self.capacity})")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def bottom_up(self) -> Iterator[T]:
        """Iterate from the bottom of the stack up to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity!r})"