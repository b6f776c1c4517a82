"""A priority queue in which lower priority numbers leave first."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Any


class PriorityQueue:
    """A queue ordered by priority, with ties broken by arrival order.

    A smaller priority number means a more urgent value.  Values that
    share a priority leave in the order in which they were enqueued.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Any]] = []
        self._sequence = count()

    def enqueue(self, value: Any, priority: float) -> None:
        """Add value to the queue with the given priority."""
        heapq.heappush(self._heap, (priority, next(self._sequence), value))

    def dequeue(self) -> Any:
        """Remove and return the value with the most urgent priority."""
        if not self._heap:
            raise IndexError("dequeue: queue is empty")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Any:
        """Return the most urgent value without removing it."""
        if not self._heap:
            raise IndexError("peek: queue is empty")
        return self._heap[0][2]

    def peek_priority(self) -> float:
        """Return the priority of the most urgent value."""
        if not self._heap:
            raise IndexError("peek: queue is empty")
        return self._heap[0][0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._heap

    def clear(self) -> None:
        """Remove every value."""
        self._heap.clear()

    def clone(self) -> PriorityQueue:
        """Return a shallow copy that keeps the same ordering of ties."""
        copy = PriorityQueue()
        copy._heap = list(self._heap)
        next_sequence = max((entry[1] for entry in self._heap), default=-1) + 1
        copy._sequence = count(next_sequence)
        self._sequence = count(next_sequence)
        return copy

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        ordered = [(value, priority) for priority, _, value in sorted(self._heap)]
        return f"PriorityQueue({ordered!r})"