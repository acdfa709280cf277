"""Bounded binary min-heap of key/data pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HeapItem:
    """A key with the data stored under it."""

    key: int
    data: Any


class Heap:
    """A min-heap ordered by integer key with a fixed maximum size.

    Pushing onto a full heap is silently ignored.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, data: Any) -> bool:
        return any(item.data == data for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def push(self, key: int, data: Any) -> None:
        """Insert ``data`` under ``key``; does nothing when the heap is full."""
        if len(self._items) == self._max_size:
            return
        self._items.append(HeapItem(key, data))
        self._up(len(self._items) - 1)

    def pop(self) -> HeapItem:
        """Remove and return the item with the smallest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._items.pop()

    def remove(self, data: Any) -> bool:
        """Remove the first item holding ``data``; return whether one was found."""
        for index, item in enumerate(self._items):
            if item.data == data:
                last = len(self._items) - 1
                if index != last:
                    self._swap(index, last)
                    self._down(index, last)
                    self._up(index)
                self._items.pop()
                return True
        return False

    def decrease_key(self, data: Any, new_key: int) -> None:
        """Give ``data`` a new key by removing and pushing it again."""
        if self.remove(data):
            self.push(new_key, data)

    def _less(self, i: int, j: int) -> bool:
        return self._items[i].key < self._items[j].key

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, i: int, n: int) -> None:
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and not self._less(left, right):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child