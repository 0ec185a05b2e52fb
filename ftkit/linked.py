"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["LinkedList"]

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list with cheap insertion at both ends."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the last element; raise IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every element in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to every element."""
        return LinkedList(func(value) for value in self)

    def clear(self, release: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each to ``release`` first if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if release is not None:
                release(node.value)
            node = node.next