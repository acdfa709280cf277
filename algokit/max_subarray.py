"""Kadane's maximum contiguous subarray."""

from __future__ import annotations

from collections.abc import Sequence


def max_subarray(values: Sequence[int]) -> tuple[int, int]:
    """Return the inclusive ``(begin, end)`` range of the largest-sum subarray.

    Raises ValueError on an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray() requires at least one value")
    subvalue = maxvalue = values[0]
    begin = end = new_begin = 0
    for i, value in enumerate(values[1:], start=1):
        if subvalue > 0:
            subvalue += value
        else:
            subvalue = value
            new_begin = i
        if maxvalue < subvalue:
            maxvalue = subvalue
            begin, end = new_begin, i
    return begin, end