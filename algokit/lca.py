"""Lowest common ancestor queries on a tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class LCA:
    """Answers lowest-common-ancestor queries on a tree rooted at node 0.

    The tree has ``len(edges) + 1`` nodes numbered from 0.
    """

    def __init__(self, edges: Iterable[tuple[int, int]]) -> None:
        edge_list = list(edges)
        self._size = len(edge_list) + 1
        adjacency: list[list[int]] = [[] for _ in range(self._size)]
        for a, b in edge_list:
            for node in (a, b):
                if not 0 <= node < self._size:
                    raise ValueError(f"node {node} is out of range for {self._size} nodes")
            adjacency[a].append(b)
            adjacency[b].append(a)

        self._max_log = 1
        reach = 1
        while reach < self._size:
            reach *= 2
            self._max_log += 1

        self._parent = [-1] * self._size
        self._depth = [0] * self._size
        visited = [False] * self._size
        visited[0] = True
        stack = [0]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    self._parent[neighbour] = node
                    self._depth[neighbour] = self._depth[node] + 1
                    stack.append(neighbour)
        if not all(visited):
            raise ValueError("edges do not describe a tree")

        self._up = [[-1] * (self._max_log + 1) for _ in range(self._size)]
        for node in range(self._size):
            self._up[node][0] = self._parent[node]
        for level in range(1, self._max_log + 1):
            for node in range(self._size):
                half = self._up[node][level - 1]
                self._up[node][level] = -1 if half == -1 else self._up[half][level - 1]

    def query(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of nodes ``a`` and ``b``."""
        for node in (a, b):
            if not 0 <= node < self._size:
                raise ValueError(f"node {node} is out of range for {self._size} nodes")
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        for level in range(self._max_log, -1, -1):
            ancestor = self._up[a][level]
            if ancestor != -1 and self._depth[ancestor] >= self._depth[b]:
                a = ancestor
        if a == b:
            return a
        for level in range(self._max_log, -1, -1):
            ancestor = self._up[a][level]
            if ancestor != -1 and ancestor != self._up[b][level]:
                a, b = ancestor, self._up[b][level]
        return self._parent[a]