"""Priority queue kept sorted by ascending priority."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter
from typing import Any

_priority = itemgetter(1)


class PriorityQueue:
    """A queue whose front holds the lowest priority value.

    Among equal priorities, the most recently queued value comes first.
    """

    def __init__(self) -> None:
        self._items: list[tuple[Any, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def queue(self, value: Any, priority: int) -> None:
        """Insert ``value`` before the first entry whose priority is not lower."""
        position = bisect_left(self._items, priority, key=_priority)
        self._items.insert(position, (value, priority))

    def top(self) -> tuple[Any, int]:
        """Return ``(value, priority)`` of the front entry."""
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def dequeue(self) -> None:
        """Drop the front entry; does nothing when the queue is empty."""
        if self._items:
            del self._items[0]