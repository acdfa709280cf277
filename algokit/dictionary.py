"""Hash table with prime-sized bucket array and a free list of entry slots."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_HASH_MASK = 0x7FFFFFFF
_INT32_MAX = 0x7FFFFFFF
_HASH_PRIME = 101
_PRIMES = (
    3, 7, 11, 17, 23, 29, 37, 47, 59, 71, 89, 107, 131, 163, 197, 239, 293, 353, 431,
    521, 631, 761, 919, 1103, 1327, 1597, 1931, 2333, 2801, 3371, 4049, 4861, 5839,
    7013, 8419, 10103, 12143, 14591, 17519, 21023, 25229, 30293, 36353, 43627, 52361,
    62851, 75431, 90523, 108631, 130363, 156437, 187751, 225307, 270371, 324449,
    389357, 467237, 560689, 672827, 807403, 968897, 1162687, 1395263, 1674319,
    2009191, 2411033, 2893249, 3471899, 4166287, 4999559, 5999471, 7199369,
)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def get_next_prime(n: int) -> int:
    """Return the table size to use for at least ``n`` slots.

    Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("size must not be negative")
    for prime in _PRIMES:
        if prime >= n:
            return prime
    for candidate in range(n | 1, _INT32_MAX, 2):
        if _is_prime(candidate) and (candidate - 1) % _HASH_PRIME != 0:
            return candidate
    return n


@dataclass(frozen=True)
class KeyValuePair:
    """A key together with the value stored under it."""

    key: Any
    value: Any


class _Entry:
    __slots__ = ("hash_code", "next", "key", "value")

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.hash_code = -1
        self.next = -1
        self.key: Any = None
        self.value: Any = None


def _hash(key: Hashable) -> int:
    return hash(key) & _HASH_MASK


class Dictionary:
    """A chained hash table whose entries live in one growable array.

    Removed slots are reused most-recent first, and iteration walks the
    entry array in slot order.
    """

    def __init__(self, capacity: int = 0) -> None:
        size = get_next_prime(capacity)
        self._buckets = [-1] * size
        self._entries = [_Entry() for _ in range(size)]
        self._count = 0
        self._free_list = -1
        self._free_count = 0

    def __len__(self) -> int:
        return self._count - self._free_count

    def _find(self, key: Hashable) -> int:
        hash_code = _hash(key)
        i = self._buckets[hash_code % len(self._buckets)]
        while i >= 0:
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                return i
            i = entry.next
        return -1

    def __getitem__(self, key: Hashable) -> Any:
        i = self._find(key)
        if i < 0:
            raise KeyError(key)
        return self._entries[i].value

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._insert(key, value, add=False)

    def __contains__(self, key: Hashable) -> bool:
        return self._find(key) >= 0

    def __iter__(self) -> Iterator[KeyValuePair]:
        """Yield each stored pair in slot order."""
        for entry in self._entries[:self._count]:
            if entry.hash_code >= 0:
                yield KeyValuePair(entry.key, entry.value)

    def get(self, key: Hashable, default: Optional[Any] = None) -> Any:
        """Return the value for ``key``, or ``default`` if it is absent."""
        i = self._find(key)
        return self._entries[i].value if i >= 0 else default

    def add(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under a new ``key``; return False if the key exists."""
        return self._insert(key, value, add=True)

    def contains_pair(self, key: Hashable, value: Any) -> bool:
        """Return True if ``key`` is present and holds a value equal to ``value``."""
        i = self._find(key)
        return i >= 0 and self._entries[i].value == value

    def remove(self, key: Hashable) -> bool:
        """Delete ``key``; return whether it was present."""
        hash_code = _hash(key)
        bucket = hash_code % len(self._buckets)
        last = -1
        i = self._buckets[bucket]
        while i >= 0:
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                if last < 0:
                    self._buckets[bucket] = entry.next
                else:
                    self._entries[last].next = entry.next
                entry.reset()
                entry.next = self._free_list
                self._free_list = i
                self._free_count += 1
                return True
            last, i = i, entry.next
        return False

    def clear(self) -> None:
        """Remove every entry, keeping the current table size."""
        if self._count > 0:
            self._buckets = [-1] * len(self._buckets)
            for entry in self._entries:
                entry.reset()
            self._free_list = -1
            self._free_count = 0
            self._count = 0

    def _insert(self, key: Hashable, value: Any, add: bool) -> bool:
        hash_code = _hash(key)
        target = hash_code % len(self._buckets)
        i = self._buckets[target]
        while i >= 0:
            entry = self._entries[i]
            if entry.hash_code == hash_code and entry.key == key:
                if add:
                    return False
                entry.value = value
                return True
            i = entry.next

        if self._free_count > 0:
            index = self._free_list
            self._free_list = self._entries[index].next
            self._free_count -= 1
        else:
            if self._count == len(self._entries):
                self._resize(get_next_prime(self._count * 2))
                target = hash_code % len(self._buckets)
            index = self._count
            self._count += 1

        entry = self._entries[index]
        entry.hash_code = hash_code
        entry.next = self._buckets[target]
        entry.key = key
        entry.value = value
        self._buckets[target] = index
        return True

    def _resize(self, new_size: int) -> None:
        self._buckets = [-1] * new_size
        self._entries.extend(_Entry() for _ in range(new_size - len(self._entries)))
        for i, entry in enumerate(self._entries[:self._count]):
            if entry.hash_code >= 0:
                bucket = entry.hash_code % new_size
                entry.next = self._buckets[bucket]
                self._buckets[bucket] = i