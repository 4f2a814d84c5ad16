"""Deferred disposal of objects shared between threads.

Objects handed to a :class:`Disposer` are destroyed only once every
participating thread has moved past the timestamp at which they were
discarded, so a thread still looking at an object never sees it destroyed.
"""

from __future__ import annotations

import contextlib
import threading
from dataclasses import dataclass
from typing import Any, Callable

from .errors import ErrorCode, TaskworksError

__all__ = ["Disposer", "BIN_SIZE", "LEFT_TIMESTAMP"]

BIN_SIZE = 4
LEFT_TIMESTAMP = 2**31 - 1


@dataclass
class _Trash:
    obj: Any
    handler: Callable[[Any], Any]
    ts: int


class Disposer:
    """Collects discarded objects and destroys them when all threads agree.

    Threads take part through :meth:`join` and :meth:`leave` (or the
    :meth:`participating` context manager); joins nest. Pending objects are
    destroyed newest first.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._list_lock = threading.Lock()
        self._local = threading.local()
        self._ts = 1
        self._tmin = 0
        self._tss = []
        self._trash = []  # oldest first
        self._closed = False

    def _thread_id(self):
        tid = getattr(self._local, "tid", None)
        if tid is None or getattr(self._local, "count", 0) == 0:
            raise TaskworksError(ErrorCode.INVAL, "calling thread has not joined the disposer")
        return tid

    def join(self):
        """Register the calling thread; nested joins are counted."""
        count = getattr(self._local, "count", 0)
        self._local.count = count + 1
        if count:
            return
        with self._lock:
            tid = getattr(self._local, "tid", None)
            if tid is None:
                tid = len(self._tss)
                self._tss.append(0)
                self._local.tid = tid
            with self._list_lock:
                self._tss[tid] = self._ts

    def leave(self):
        """Undo one :meth:`join`; the last one stops the thread holding objects back."""
        count = getattr(self._local, "count", 0)
        if count == 0:
            raise TaskworksError(ErrorCode.INVAL, "calling thread has not joined the disposer")
        self._local.count = count - 1
        if count == 1:
            with self._lock:
                self._tss[self._local.tid] = LEFT_TIMESTAMP

    @contextlib.contextmanager
    def participating(self):
        """Join for the duration of a ``with`` block."""
        self.join()
        try:
            yield self
        finally:
            self.leave()

    def dispose(self, obj, handler):
        """Schedule ``handler(obj)`` to run once no thread can still see ``obj``."""
        if not callable(handler):
            raise TaskworksError(ErrorCode.INVAL, "handler must be callable")
        if self._closed:
            raise TaskworksError(ErrorCode.STATUS, "disposer is closed")
        with self._list_lock:
            self._trash.append(_Trash(obj, handler, self._ts))
            self._ts += 1

    def flush(self):
        """Record the calling thread's progress and destroy what everyone agreed on.

        Destruction is attempted only every few timestamps and only by one
        thread at a time; other threads return without waiting.
        """
        tid = self._thread_id()
        with self._list_lock:
            now = self._ts
        if self._tss[tid] >= now:
            return
        self._tss[tid] = now
        if now - self._tmin <= BIN_SIZE:
            return
        if not self._lock.acquire(blocking=False):
            return
        try:
            tmin = min(self._tss, default=LEFT_TIMESTAMP)
            with self._list_lock:
                keep_from = next(
                    (
                        pos
                        for pos in range(len(self._trash) - 1, -1, -1)
                        if self._trash[pos].ts <= tmin
                    ),
                    0,
                )
                expired = self._trash[:keep_from]
                del self._trash[:keep_from]
            for trash in reversed(expired):
                trash.handler(trash.obj)
            self._tmin = tmin
        finally:
            self._lock.release()

    def pending(self):
        """Return how many objects are waiting to be destroyed."""
        with self._list_lock:
            return len(self._trash)

    def close(self):
        """Destroy every pending object at once and refuse further disposals."""
        with self._list_lock:
            remaining = self._trash
            self._trash = []
            self._closed = True
        for trash in reversed(remaining):
            trash.handler(trash.obj)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False