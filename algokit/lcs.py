"""Longest common subsequence by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def lcs_length(x: Sequence[Any], y: Sequence[Any]) -> list[list[int]]:
    """Return the ``(len(x)+1) x (len(y)+1)`` table of LCS lengths."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x, start=1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(y, start=1):
            if a == b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])
    return table


def lcs_backtrack(
    table: Sequence[Sequence[int]], x: Sequence[Any], y: Sequence[Any]
) -> list[Any]:
    """Recover a longest common subsequence, in order, from ``table``."""
    result: list[Any] = []
    i, j = len(x), len(y)
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            result.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    result.reverse()
    return result