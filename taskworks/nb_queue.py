"""A first-in first-out queue shared between threads."""

from __future__ import annotations

import collections
import threading

from .errors import ErrorCode, TaskworksError

__all__ = ["ConcurrentQueue"]


class ConcurrentQueue:
    """Unbounded FIFO queue that many threads may push to and pop from."""

    def __init__(self):
        self._lock = threading.Lock()
        self._items = collections.deque()

    def push(self, item):
        """Add ``item`` at the back of the queue."""
        with self._lock:
            self._items.append(item)

    def try_pop(self):
        """Take the oldest item.

        Return ``(True, item)``, or ``(False, None)`` if the queue is empty.
        """
        with self._lock:
            if not self._items:
                return False, None
            return True, self._items.popleft()

    def pop(self):
        """Take and return the oldest item; raise :class:`TaskworksError` if empty."""
        ok, item = self.try_pop()
        if not ok:
            raise TaskworksError(ErrorCode.INVAL, "pop from empty queue")
        return item

    def __len__(self):
        with self._lock:
            return len(self._items)

    def __bool__(self):
        with self._lock:
            return bool(self._items)