"""A shared set of character structures driven through flat operations."""

from __future__ import annotations

from typing import List, Optional

from linkedstructs.structures import LinkedList, Queue, Stack


def _check_char(value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


class Workspace:
    """One linked list, one stack and one queue of characters, side by side."""

    def __init__(self) -> None:
        self._list: LinkedList[str] = LinkedList()
        self._stack: Stack[str] = Stack()
        self._queue: Queue[str] = Queue()

    # Linked list

    def list_insert(self, value: str) -> None:
        """Append a character to the list."""
        self._list.insert(_check_char(value))

    def list_remove(self, value: str) -> bool:
        """Remove the first occurrence of a character; return whether it was there."""
        return self._list.remove(_check_char(value))

    def list_contains(self, value: str) -> bool:
        """Return whether the character is in the list."""
        return self._list.contains(_check_char(value))

    def list_get_all(self) -> List[str]:
        """Return the list's characters in insertion order."""
        return list(self._list)

    def list_size(self) -> int:
        """Return the number of characters in the list."""
        return len(self._list)

    def list_clear(self) -> None:
        """Empty the list."""
        self._list.clear()

    # Stack

    def stack_push(self, value: str) -> None:
        """Push a character onto the stack."""
        self._stack.push(_check_char(value))

    def stack_pop(self) -> Optional[str]:
        """Pop the top character, or return None when the stack is empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def stack_get_all(self) -> List[str]:
        """Return the stack's characters from the top downwards."""
        return list(self._stack)

    def stack_size(self) -> int:
        """Return the number of characters on the stack."""
        return len(self._stack)

    def stack_clear(self) -> None:
        """Empty the stack."""
        self._stack.clear()

    # Queue

    def queue_enqueue(self, value: str) -> None:
        """Add a character at the rear of the queue."""
        self._queue.enqueue(_check_char(value))

    def queue_dequeue(self) -> Optional[str]:
        """Take the front character, or return None when the queue is empty."""
        if not self._queue:
            return None
        return self._queue.dequeue()

    def queue_get_all(self) -> List[str]:
        """Return the queue's characters from front to rear."""
        return list(self._queue)

    def queue_size(self) -> int:
        """Return the number of characters in the queue."""
        return len(self._queue)

    def queue_clear(self) -> None:
        """Empty the queue."""
        self._queue.clear()

    def debug_test(self) -> None:
        """Put one marker character into each structure."""
        self.list_insert("D")
        self.stack_push("S")
        self.queue_enqueue("Q")