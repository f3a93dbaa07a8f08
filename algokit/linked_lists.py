"""Singly, doubly and circular linked lists, plus cycle checks on raw nodes."""

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "ListNode",
    "SinglyLinkedList",
    "DoublyLinkedList",
    "CircularLinkedList",
    "is_circular",
    "has_cycle",
]


@dataclass(eq=False)
class ListNode:
    """A list node; ``prev`` is used only by doubly linked lists."""

    value: Any
    next: Optional["ListNode"] = field(default=None, repr=False)
    prev: Optional["ListNode"] = field(default=None, repr=False)


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


class SinglyLinkedList:
    """A list whose nodes link forward only."""

    def __init__(self, values=()):
        self.head = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, value):
        self.head = ListNode(value, next=self.head)
        self._size += 1

    def push_back(self, value):
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            *_, last = _walk(self.head)
            last.next = node
        self._size += 1

    def _check_position(self, position):
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")

    def _node_at(self, position):
        for index, node in enumerate(_walk(self.head), start=1):
            if index == position:
                return node
        raise IndexError(position)

    def delete_at(self, position):
        """Remove the node at 1-based ``position``."""
        self._check_position(position)
        if position == 1:
            self.head = self.head.next
        else:
            before = self._node_at(position - 1)
            before.next = before.next.next
        self._size -= 1

    def delete_value(self, value):
        """Remove the first node holding ``value``; return whether one was removed."""
        before = None
        for node in _walk(self.head):
            if node.value == value:
                if before is None:
                    self.head = node.next
                else:
                    before.next = node.next
                self._size -= 1
                return True
            before = node
        return False

    def __iter__(self):
        return (node.value for node in _walk(self.head))

    def __len__(self):
        return self._size


class DoublyLinkedList:
    """A list whose nodes link both ways, iterable in either direction."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value):
        node = ListNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_back(self, value):
        node = ListNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def delete_at(self, position):
        """Remove the node at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        node = next(n for i, n in enumerate(_walk(self.head), start=1) if i == position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def __iter__(self):
        return (node.value for node in _walk(self.head))

    def __reversed__(self):
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size


class CircularLinkedList:
    """A ring of nodes reached through ``tail``; iteration starts at the tail."""

    def __init__(self):
        self.tail = None
        self._size = 0

    def _nodes(self):
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node
            node = node.next
            if node is self.tail:
                break

    def insert_after(self, element, value):
        """Insert ``value`` after the first node holding ``element``.

        On an empty list the value becomes the only node and ``element`` is ignored.
        """
        node = ListNode(value)
        if self.tail is None:
            node.next = node
            self.tail = node
        else:
            anchor = next((n for n in self._nodes() if n.value == element), None)
            if anchor is None:
                raise ValueError(f"{element!r} is not in the list")
            node.next = anchor.next
            anchor.next = node
        self._size += 1

    def delete(self, value):
        """Remove the first node holding ``value``, searching from after the tail."""
        if self.tail is None:
            raise ValueError("list is empty")
        before = self.tail
        current = before.next
        for _ in range(self._size):
            if current.value == value:
                break
            before, current = current, current.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        before.next = current.next
        if current is before:
            self.tail = None
        elif current is self.tail:
            self.tail = before
        current.next = None
        self._size -= 1

    def is_circular(self):
        return is_circular(self.tail)

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __len__(self):
        return self._size


def is_circular(head):
    """Return whether following ``next`` from ``head`` leads back to ``head``.

    An empty chain counts as circular.
    """
    if head is None:
        return True
    seen = set()
    node = head.next
    while node is not None and node is not head:
        if node in seen:
            return False
        seen.add(node)
        node = node.next
    return node is head


def has_cycle(head):
    """Return whether following ``next`` from ``head`` ever revisits a node."""
    seen = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False