"""Singly linked list, stack and queue built on a shared node type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class Node(Generic[T]):
    """A single link holding one value and a reference to the next node."""

    data: T
    next: Optional["Node[T]"] = None


def _walk(node: Optional[Node[T]]) -> Iterator[T]:
    while node is not None:
        yield node.data
        node = node.next


class LinkedList(Generic[T]):
    """Singly linked list that appends at the tail in constant time."""

    __slots__ = ("_head", "_tail", "_count")

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._count = 0

    def insert(self, value: T) -> None:
        """Append a value at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._count += 1

    def remove(self, value: T) -> bool:
        """Remove the first occurrence of a value; return whether one was found."""
        prev: Optional[Node[T]] = None
        current = self._head
        while current is not None:
            if current.data == value:
                if prev is None:
                    self._head = current.next
                    if self._head is None:
                        self._tail = None
                else:
                    prev.next = current.next
                    if current.next is None:
                        self._tail = prev
                self._count -= 1
                return True
            prev, current = current, current.next
        return False

    def contains(self, value: T) -> bool:
        """Return whether the value is in the list."""
        return any(item == value for item in self)

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._count = 0

    def __iter__(self) -> Iterator[T]:
        return _walk(self._head)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class Stack(Generic[T]):
    """Last-in, first-out stack of linked nodes."""

    __slots__ = ("_top", "_count")

    def __init__(self) -> None:
        self._top: Optional[Node[T]] = None
        self._count = 0

    def push(self, value: T) -> None:
        """Place a value on top of the stack."""
        self._top = Node(value, self._top)
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def clear(self) -> None:
        """Remove every element."""
        self._top = None
        self._count = 0

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack downwards."""
        return _walk(self._top)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"


class Queue(Generic[T]):
    """First-in, first-out queue of linked nodes."""

    __slots__ = ("_front", "_rear", "_count")

    def __init__(self) -> None:
        self._front: Optional[Node[T]] = None
        self._rear: Optional[Node[T]] = None
        self._count = 0

    def enqueue(self, value: T) -> None:
        """Add a value at the rear of the queue."""
        node = Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front value; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("dequeue from empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.data

    def clear(self) -> None:
        """Remove every element."""
        self._front = self._rear = None
        self._count = 0

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        return _walk(self._front)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"