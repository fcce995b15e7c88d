"""A singly linked list of values with positional inserts and deletes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


class ListEmptyError(IndexError):
    """Raised when removing from an empty list."""


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = str(n)
    return sum(int(d) ** len(digits) for d in digits) == n


def is_palindrome(n: int) -> bool:
    """Return True if the decimal digits of ``n`` read the same both ways."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _require_head(self) -> _Node:
        if self._head is None:
            raise ListEmptyError("list is empty")
        return self._head

    def insert_at_beginning(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        if self._head is None:
            self.insert_at_beginning(value)
            return
        *_, tail = self._nodes()
        tail.next = _Node(value)
        self._size += 1

    def insert_after_first(self, value: Any) -> None:
        """Put ``value`` second; on an empty list it becomes the only value."""
        if self._head is None:
            self.insert_at_beginning(value)
            return
        self._head.next = _Node(value, self._head.next)
        self._size += 1

    def insert_before_last(self, value: Any) -> None:
        """Put ``value`` just before the last value; with fewer than two, at the front."""
        if self._head is None or self._head.next is None:
            self.insert_at_beginning(value)
            return
        node = self._head
        while node.next.next is not None:
            node = node.next
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_in_ascending_order(self, value: Any) -> None:
        """Insert ``value`` so that an ascending list stays ascending."""
        if self._head is None or self._head.value > value:
            self.insert_at_beginning(value)
            return
        node = self._head
        while node.next is not None and node.next.value < value:
            node = node.next
        node.next = _Node(value, node.next)
        self._size += 1

    def delete_first(self) -> Any:
        head = self._require_head()
        self._head = head.next
        self._size -= 1
        return head.value

    def delete_last(self) -> Any:
        head = self._require_head()
        if head.next is None:
            self._head = None
            self._size -= 1
            return head.value
        node = head
        while node.next.next is not None:
            node = node.next
        last = node.next
        node.next = None
        self._size -= 1
        return last.value

    def delete_after_first(self) -> Any:
        head = self._require_head()
        second = head.next
        if second is None:
            raise IndexError("no node after the first")
        head.next = second.next
        self._size -= 1
        return second.value

    def delete_before_last(self) -> Any:
        head = self._require_head()
        if head.next is None:
            raise IndexError("no node before the last")
        if head.next.next is None:
            return self.delete_first()
        previous, current = head, head.next
        while current.next.next is not None:
            previous, current = current, current.next
        previous.next = current.next
        self._size -= 1
        return current.value

    def delete_alternate(self) -> list[Any]:
        """Remove the second, fourth, ... values and return them in order."""
        removed: list[Any] = []
        node = self._head
        while node is not None and node.next is not None:
            removed.append(node.next.value)
            node.next = node.next.next
            node = node.next
        self._size -= len(removed)
        return removed

    def delete_value(self, value: Any) -> None:
        """Remove the first occurrence of ``value``."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def alternate(self) -> list[Any]:
        """Return the first, third, fifth, ... values."""
        return list(islice(self, 0, None, 2))

    def primes(self) -> list[Any]:
        return [value for value in self if is_prime(value)]

    def armstrongs(self) -> list[Any]:
        return [value for value in self if is_armstrong(value)]

    def palindromes(self) -> list[Any]:
        return [value for value in self if is_palindrome(value)]

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*map(str, self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"