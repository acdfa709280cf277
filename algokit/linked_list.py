"""Circular doubly linked list built around a sentinel node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class ListNode:
    """A node of a :class:`LinkedList` carrying one value."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: ListNode = self
        self.next: ListNode = self
        self._owner: Optional[LinkedList] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """A doubly linked list whose nodes can be moved between lists in O(1).

    The push methods return the new node so that it can later be removed
    or moved.  Iteration tolerates removal of the node just yielded.
    """

    def __init__(self) -> None:
        self._head = ListNode()
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node.value
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            preceding = node.prev
            yield node.value
            node = preceding

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head.next is self._head

    def _attach(self, node: ListNode, prev: ListNode, nxt: ListNode) -> None:
        nxt.prev = node
        node.next = nxt
        node.prev = prev
        prev.next = node
        node._owner = self
        self._size += 1

    def _detach(self, node: ListNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        node._owner = None
        self._size -= 1

    def push_front(self, value: Any) -> ListNode:
        """Insert ``value`` at the front and return its node."""
        node = ListNode(value)
        self._attach(node, self._head, self._head.next)
        return node

    def push_back(self, value: Any) -> ListNode:
        """Insert ``value`` at the back and return its node."""
        node = ListNode(value)
        self._attach(node, self._head.prev, self._head)
        return node

    def remove(self, node: ListNode) -> Any:
        """Unlink ``node`` from this list and return its value."""
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        self._detach(node)
        return node.value

    def _take(self, node: ListNode) -> None:
        owner = node._owner
        if owner is None:
            raise ValueError("node does not belong to any list")
        owner._detach(node)

    def move_to_front(self, node: ListNode) -> None:
        """Move ``node`` from whichever list holds it to the front of this one."""
        self._take(node)
        self._attach(node, self._head, self._head.next)

    def move_to_back(self, node: ListNode) -> None:
        """Move ``node`` from whichever list holds it to the back of this one."""
        self._take(node)
        self._attach(node, self._head.prev, self._head)

    def splice(self, other: LinkedList) -> None:
        """Move every node of ``other`` to the front of this list, keeping order.

        ``other`` is left empty.
        """
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other.is_empty():
            return
        first = other._head.next
        last = other._head.prev
        at = self._head.next

        node = first
        while node is not other._head:
            node._owner = self
            node = node.next

        first.prev = self._head
        self._head.next = first
        last.next = at
        at.prev = last

        self._size += other._size
        other._head.next = other._head.prev = other._head
        other._size = 0