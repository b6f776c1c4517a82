"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """A queue whose values leave in the order they arrived."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add value to the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue: queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise IndexError("peek: queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def clone(self) -> Queue:
        """Return a shallow copy of the queue."""
        copy = Queue()
        copy._items.extend(self._items)
        return copy

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"