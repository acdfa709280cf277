"""Prefix tree over lowercase ASCII letters counting words and prefixes."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _Node:
    words: int = 0
    prefixes: int = 0
    edges: dict[str, _Node] = field(default_factory=dict)


def _normalise(word: str) -> str:
    lowered = word.lower()
    for char in lowered:
        if char not in _ALPHABET:
            raise ValueError(f"character {char!r} is not a letter a-z")
    return lowered


class Trie:
    """Counts words added and how many added words extend a given prefix."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, word: str) -> None:
        """Add one occurrence of ``word`` (case-insensitive)."""
        node = self._root
        for char in _normalise(word):
            node.prefixes += 1
            node = node.edges.setdefault(char, _Node())
        node.words += 1

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for char in _normalise(text):
            node = node.edges.get(char)
            if node is None:
                return None
        return node

    def count(self, word: str) -> int:
        """Return how many times ``word`` was added."""
        node = self._find(word)
        return 0 if node is None else node.words

    def count_prefix(self, prefix: str) -> int:
        """Return how many added words are strictly longer and start with ``prefix``."""
        node = self._find(prefix)
        return 0 if node is None else node.prefixes