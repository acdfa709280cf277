"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def kmp_table(word: Sequence[Any]) -> list[int]:
    """Build the partial-match (failure) table for ``word``."""
    if not word:
        return []
    table = [0] * len(word)
    table[0] = -1
    pos, cnd = 2, 0
    while pos < len(word):
        if word[pos - 1] == word[cnd]:
            cnd += 1
            table[pos] = cnd
            pos += 1
        elif cnd > 0:
            cnd = table[cnd]
        else:
            table[pos] = 0
            pos += 1
    return table


def kmp_search(text: Sequence[Any], word: Sequence[Any]) -> int:
    """Return the first index of ``word`` in ``text``, or -1 if absent.

    Raises ValueError for an empty word.
    """
    if not word:
        raise ValueError("cannot search for an empty word")
    table = kmp_table(word)
    last = len(word) - 1
    m = i = 0
    while m + i < len(text):
        if word[i] == text[m + i]:
            if i == last:
                return m
            i += 1
        else:
            m = m + i - table[i]
            i = table[i] if table[i] > -1 else 0
    return -1