"""A singly linked list that several threads may insert into and remove from."""

from __future__ import annotations

import threading

from .errors import ErrorCode, TaskworksError

__all__ = ["ListNode", "ConcurrentList"]


class ListNode:
    """A position in a :class:`ConcurrentList`, holding one item.

    A removed node keeps its link to the node that followed it, so a
    traversal that is standing on it when it is removed can still move on.
    """

    __slots__ = ("item", "_next", "_removed", "_owner")

    def __init__(self, item, owner=None, next_node=None):
        self.item = item
        self._next = next_node
        self._removed = False
        self._owner = owner

    @property
    def removed(self):
        """Whether the node has been taken out of its list."""
        return self._removed

    def __repr__(self):
        state = " removed" if self._removed else ""
        return f"<ListNode {self.item!r}{state}>"


class ConcurrentList:
    """Linked list whose items are matched by identity.

    New items go to the front or after a given node. Removing a node marks it
    as removed; inserting after a removed node fails, as does removing a node
    twice.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._head = ListNode(None, owner=self)
        self._count = 0

    def _walk(self):
        node = self._head._next
        while node is not None:
            yield node
            node = node._next

    def _check_node(self, node):
        if not isinstance(node, ListNode):
            raise TypeError("expected a ListNode")
        if node._owner is not self or node is self._head:
            raise TaskworksError(ErrorCode.INVAL, "node does not belong to this list")

    def _link_after(self, pos, item):
        node = ListNode(item, owner=self, next_node=pos._next)
        pos._next = node
        self._count += 1
        return node

    def _unlink(self, prev, node):
        prev._next = node._next
        node._removed = True
        self._count -= 1

    def insert_front(self, item):
        """Put ``item`` at the front and return its node."""
        with self._lock:
            return self._link_after(self._head, item)

    def insert_after(self, node, item):
        """Put ``item`` right after ``node``.

        Return the new node, or ``None`` if ``node`` has already been removed.
        """
        self._check_node(node)
        with self._lock:
            if node._removed:
                return None
            return self._link_after(node, item)

    def remove_node(self, node):
        """Take ``node`` out of the list; return ``False`` if it was already removed."""
        self._check_node(node)
        with self._lock:
            if node._removed:
                return False
            prev = self._head
            for cur in self._walk():
                if cur is node:
                    self._unlink(prev, cur)
                    return True
                prev = cur
            return False

    def remove(self, item):
        """Remove the first node holding ``item``; return whether one was found."""
        with self._lock:
            prev = self._head
            for cur in self._walk():
                if cur.item is item:
                    self._unlink(prev, cur)
                    return True
                prev = cur
            return False

    def find(self, item):
        """Return the first node holding ``item``, or ``None``."""
        with self._lock:
            return next((node for node in self._walk() if node.item is item), None)

    def previous(self, node):
        """Return the node before ``node``, or ``None`` if ``node`` is first.

        Raise :class:`TaskworksError` if ``node`` is not in the list.
        """
        self._check_node(node)
        with self._lock:
            prev = None
            for cur in self._walk():
                if cur is node:
                    return prev
                prev = cur
        raise TaskworksError(ErrorCode.NOT_FOUND, "node is not in the list")

    def nodes(self):
        """Yield the nodes currently in the list, front to back."""
        with self._lock:
            snapshot = list(self._walk())
        yield from snapshot

    def __iter__(self):
        for node in self.nodes():
            yield node.item

    def __len__(self):
        with self._lock:
            return self._count