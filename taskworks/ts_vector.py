"""A vector guarded by a readers-writer lock, safe to share between threads."""

from __future__ import annotations

import contextlib

from .errors import ErrorCode, TaskworksError
from .rwlock import RWLock

__all__ = ["ThreadSafeVector", "INITIAL_CAPACITY", "GROWTH_FACTOR"]

INITIAL_CAPACITY = 32
GROWTH_FACTOR = 20


class ThreadSafeVector:
    """Sequence of items that may be read and modified from several threads.

    Items are matched by identity in :meth:`find`, :meth:`erase` and
    :meth:`swap_erase`. Reads and slot writes take the lock shared; operations
    that change the length take it exclusively. Inside a :meth:`locked` block
    the calling thread may read and write slots but must not change the length.
    """

    def __init__(self):
        self._lock = RWLock()
        self._items = []
        self._capacity = INITIAL_CAPACITY

    @property
    def capacity(self):
        """Number of slots reserved before the next growth."""
        return self._capacity

    def _grow(self, size):
        capacity = self._capacity
        while capacity < size:
            capacity *= GROWTH_FACTOR
        self._capacity = capacity

    def _check_index(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("vector index must be an int")
        size = len(self._items)
        if not 0 <= index < size:
            raise IndexError(f"vector index out of bound: size = {size}, index = {index}")

    def read(self, index):
        """Return the item at ``index``."""
        with self._lock.reading():
            self._check_index(index)
            return self._items[index]

    def write(self, index, item):
        """Replace the item at ``index`` with ``item``."""
        with self._lock.reading():
            self._check_index(index)
            self._items[index] = item

    def erase_at(self, index):
        """Remove the item at ``index``, moving later items down by one."""
        with self._lock.writing():
            self._check_index(index)
            del self._items[index]

    def erase(self, item):
        """Remove the last occurrence of ``item``, keeping order.

        Return the index it was removed from, or -1 if it was absent.
        """
        with self._lock.writing():
            for pos in range(len(self._items) - 1, -1, -1):
                if self._items[pos] is item:
                    del self._items[pos]
                    return pos
            return -1

    def swap_erase(self, item):
        """Remove the last occurrence of ``item`` by moving the last item into its slot.

        Return the index it was removed from, or -1 if it was absent.
        """
        with self._lock.writing():
            for pos in range(len(self._items) - 1, -1, -1):
                if self._items[pos] is item:
                    self._items[pos] = self._items[-1]
                    self._items.pop()
                    return pos
            return -1

    def find(self, item):
        """Return the index of the first occurrence of ``item``, or -1."""
        with self._lock.reading():
            return next(
                (pos for pos, entry in enumerate(self._items) if entry is item), -1
            )

    def push_back(self, item):
        """Append ``item`` to the end."""
        with self._lock.writing():
            if len(self._items) >= self._capacity:
                self._grow(len(self._items) + 1)
            self._items.append(item)

    def resize(self, size):
        """Set the length to ``size``, truncating or padding with ``None``."""
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise TaskworksError(ErrorCode.INVAL, "size must be a non-negative int")
        with self._lock.writing():
            if self._capacity < size:
                self._grow(size)
            if size <= len(self._items):
                del self._items[size:]
            else:
                self._items.extend([None] * (size - len(self._items)))

    def __len__(self):
        with self._lock.reading():
            return len(self._items)

    @contextlib.contextmanager
    def locked(self):
        """Hold the vector shared for the duration of a ``with`` block."""
        with self._lock.reading():
            yield self

    def __iter__(self):
        with self._lock.reading():
            snapshot = list(self._items)
        return iter(snapshot)