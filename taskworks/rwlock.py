"""A readers-writer lock built on a condition variable."""

from __future__ import annotations

import contextlib
import threading

__all__ = ["RWLock"]


class RWLock:
    """Lock that admits many readers or a single writer at a time.

    Readers are admitted whenever no writer holds the lock. A thread that
    holds the write lock may not acquire the lock again; doing so raises
    :class:`RuntimeError` instead of deadlocking.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = None

    def _check_not_writer(self):
        if self._writer == threading.get_ident():
            raise RuntimeError("calling thread already holds the write lock")

    def acquire_read(self):
        """Block until a shared (read) hold is obtained."""
        with self._cond:
            self._check_not_writer()
            while self._writer is not None:
                self._cond.wait()
            self._readers += 1

    def try_acquire_read(self):
        """Take a read hold if no writer holds the lock; return whether it was taken."""
        with self._cond:
            if self._writer is not None:
                return False
            self._readers += 1
            return True

    def release_read(self):
        """Give back one read hold."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read called without a read hold")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        """Block until the exclusive (write) hold is obtained."""
        with self._cond:
            self._check_not_writer()
            while self._writer is not None or self._readers:
                self._cond.wait()
            self._writer = threading.get_ident()

    def try_acquire_write(self):
        """Take the write hold if the lock is free; return whether it was taken."""
        with self._cond:
            if self._writer is not None or self._readers:
                return False
            self._writer = threading.get_ident()
            return True

    def release_write(self):
        """Give back the write hold held by the calling thread."""
        with self._cond:
            if self._writer != threading.get_ident():
                raise RuntimeError("release_write called by a thread without the write lock")
            self._writer = None
            self._cond.notify_all()

    @contextlib.contextmanager
    def reading(self):
        """Hold the lock for reading for the duration of a ``with`` block."""
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextlib.contextmanager
    def writing(self):
        """Hold the lock for writing for the duration of a ``with`` block."""
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()