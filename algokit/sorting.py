"""Comparison and radix sorts that work in place on mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

_UINT32_LIMIT = 1 << 32


def bubble_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    """Sort ``items[start:end + 1]`` in place by repeated adjacent swaps.

    Raises ValueError unless ``start < end``.
    """
    if start >= end:
        raise ValueError(f"start ({start}) must be less than end ({end})")
    swapped = True
    while swapped:
        swapped = False
        for i in range(start + 1, end + 1):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
                swapped = True


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort the whole sequence in place by insertion."""
    for position in range(1, len(items)):
        current = items[position]
        j = position - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current


def _merge(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    merged: list[Any] = []
    lpos, rpos = left, mid + 1
    while lpos <= mid and rpos <= right:
        if items[lpos] < items[rpos]:
            merged.append(items[lpos])
            lpos += 1
        else:
            merged.append(items[rpos])
            rpos += 1
    merged.extend(items[lpos:mid + 1])
    merged.extend(items[rpos:right + 1])
    items[left:left + len(merged)] = merged


def merge_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    """Sort ``items[left:right + 1]`` in place with top-down merge sort."""
    if left < right:
        mid = (left + right) // 2
        merge_sort(items, left, mid)
        merge_sort(items, mid + 1, right)
        _merge(items, left, mid, right)


def _counting_pass(byte: int, source: Sequence[int]) -> list[int]:
    shift = byte * 8
    counts = [0] * 256
    for value in source:
        counts[(value >> shift) & 0xFF] += 1
    index = [0] * 256
    total = 0
    for digit, count in enumerate(counts):
        index[digit] = total
        total += count
    dest = [0] * len(source)
    for value in source:
        digit = (value >> shift) & 0xFF
        dest[index[digit]] = value
        index[digit] += 1
    return dest


def radix_sort(values: MutableSequence[int]) -> None:
    """Sort unsigned 32-bit integers in place, one byte per counting pass.

    Raises ValueError for a value outside ``0 <= v < 2**32``.
    """
    for value in values:
        if not 0 <= value < _UINT32_LIMIT:
            raise ValueError(f"value {value} is not an unsigned 32-bit integer")
    result = list(values)
    for byte in range(4):
        result = _counting_pass(byte, result)
    values[:] = result


def check_order(values: Sequence[Any]) -> None:
    """Raise ValueError if the sequence is not in non-decreasing order."""
    for index, (a, b) in enumerate(zip(values, values[1:])):
        if a > b:
            raise ValueError(f"values out of order at index {index}: {a!r} > {b!r}")