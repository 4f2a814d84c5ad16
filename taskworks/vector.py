"""A growable stack-like vector with geometric capacity growth."""

from __future__ import annotations

from .errors import ErrorCode, TaskworksError

__all__ = ["Vector", "INITIAL_CAPACITY", "GROWTH_SHIFT"]

INITIAL_CAPACITY = 0x400
GROWTH_SHIFT = 4


class Vector:
    """Sequence of items that grows its capacity sixteenfold when full.

    Not thread safe.
    """

    def __init__(self):
        self._items = []
        self._capacity = INITIAL_CAPACITY

    def _extend(self, size):
        capacity = self._capacity
        while size > capacity:
            capacity <<= GROWTH_SHIFT
        self._capacity = capacity

    @property
    def capacity(self):
        """Number of slots reserved before the next growth."""
        return self._capacity

    def push_back(self, item):
        """Append ``item`` to the end."""
        if len(self._items) == self._capacity:
            self._extend(self._capacity + 1)
        self._items.append(item)

    def pop_back(self):
        """Remove and return the last item; raise :class:`TaskworksError` if empty."""
        if not self._items:
            raise TaskworksError(ErrorCode.INVAL, "pop from empty vector")
        return self._items.pop()

    def resize(self, size):
        """Set the length to ``size``, truncating or padding with ``None``."""
        if not isinstance(size, int) or size < 0:
            raise TaskworksError(ErrorCode.INVAL, "size must be a non-negative int")
        if size > self._capacity:
            self._extend(size)
        if size <= len(self._items):
            del self._items[size:]
        else:
            self._items.extend([None] * (size - len(self._items)))

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]