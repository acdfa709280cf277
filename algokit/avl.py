"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from typing import Any, Optional, TextIO


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.height


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update_height(node)
    balance = _balance_factor(node)
    if balance >= 2:
        assert node.left is not None
        if _balance_factor(node.left) <= -1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance <= -2:
        assert node.right is not None
        if _balance_factor(node.right) >= 1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value <= node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _pop_max(node: _Node) -> tuple[Optional[_Node], Any]:
    if node.right is None:
        return node.left, node.value
    node.right, value = _pop_max(node.right)
    return _rebalance(node), value


def _erase(node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if node.value == value:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.left, node.value = _pop_max(node.left)
        return _rebalance(node), True
    if value < node.value:
        node.left, found = _erase(node.left, value)
    else:
        node.right, found = _erase(node.right, value)
    return _rebalance(node), found


def _contains(node: Optional[_Node], value: Any) -> bool:
    while node is not None:
        if node.value == value:
            return True
        node = node.left if value < node.value else node.right
    return False


def _write_graphviz(node: _Node, stream: TextIO) -> None:
    stream.write(f"{node.value};\n")
    for child in (node.left, node.right):
        if child is not None:
            stream.write(f"{child.value};\n")
            stream.write(f"{node.value}->{child.value};\n")
            _write_graphviz(child, stream)


class AVLTree:
    """An AVL tree that keeps duplicates and guarantees O(log n) search."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return _contains(self._root, value)

    def root(self) -> Any:
        """Return the value at the root; raise IndexError if the tree is empty."""
        if self._root is None:
            raise IndexError("root of an empty tree")
        return self._root.value

    def height(self) -> int:
        """Return the height of the tree, 0 when empty."""
        return _height(self._root)

    def is_empty(self) -> bool:
        return self._size == 0

    def insert(self, value: Any) -> None:
        """Insert ``value``; equal values are kept as separate entries."""
        self._root = _insert(self._root, value)
        self._size += 1

    def erase(self, value: Any) -> None:
        """Remove one occurrence of ``value`` if present."""
        self._root, found = _erase(self._root, value)
        if found:
            self._size -= 1

    def to_graphviz(self, stream: TextIO, name: str) -> None:
        """Write the tree as a GraphViz digraph; writes nothing when empty."""
        if self._root is None:
            return
        stream.write(f"digraph {name} {{\n")
        _write_graphviz(self._root, stream)
        stream.write("}\n")