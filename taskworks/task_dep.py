"""Dependency handlers that decide when a task may run."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import ErrorCode, TaskworksError
from .status import TaskStatus

__all__ = [
    "DependencyHandler",
    "AllCompleteState",
    "all_complete_init",
    "all_complete_finalize",
    "all_complete_status_change",
    "DEP_NULL",
    "DEP_ALL_COMPLETE",
]


@dataclass(frozen=True)
class DependencyHandler:
    """Callbacks that turn parent status changes into a child's status.

    ``mask`` selects the parent statuses the handler wants to hear about.
    ``init(task, num_deps)`` returns the per-task state,
    ``finalize(task, state)`` releases it and
    ``status_change(task, parent, old_status, new_status, state)`` returns the
    child's new status.
    """

    mask: int = 0
    data: Any = None
    init: Optional[Callable[[Any, int], Any]] = None
    finalize: Optional[Callable[[Any, Any], Any]] = None
    status_change: Optional[Callable[[Any, Any, int, int, Any], int]] = None


class AllCompleteState:
    """Count of parents still to complete, shared between threads."""

    def __init__(self, num_deps):
        if isinstance(num_deps, bool) or not isinstance(num_deps, int):
            raise TaskworksError(ErrorCode.INVAL, "num_deps must be an int")
        self._lock = threading.Lock()
        self._remaining = num_deps
        self._closed = False

    @property
    def remaining(self):
        """Number of parents not yet completed."""
        with self._lock:
            return self._remaining

    @property
    def closed(self):
        """Whether the state has been finalized."""
        return self._closed

    def close(self):
        """Mark the state as finalized."""
        with self._lock:
            self._closed = True

    def status_change(self, old_status, new_status):
        """Return the child's status after a parent moved to ``new_status``.

        The child becomes ready when the last parent completes and is aborted
        as soon as any parent aborts or fails; otherwise it stays on hold.
        """
        if new_status == TaskStatus.COMPLETED:
            with self._lock:
                if self._closed:
                    raise TaskworksError(ErrorCode.STATUS, "dependency state is finalized")
                self._remaining -= 1
                if self._remaining == 0:
                    return TaskStatus.READY
        elif new_status in (TaskStatus.ABORTED, TaskStatus.FAILED):
            return TaskStatus.ABORTED
        return TaskStatus.DEPHOLD


def all_complete_init(task, num_deps):
    """Create the state of the all-complete handler for ``task``."""
    return AllCompleteState(num_deps)


def all_complete_finalize(task, state):
    """Release the state of the all-complete handler."""
    state.close()


def all_complete_status_change(task, parent, old_status, new_status, state):
    """React to a parent's status change on behalf of the all-complete handler."""
    return state.status_change(old_status, new_status)


DEP_NULL = DependencyHandler()

DEP_ALL_COMPLETE = DependencyHandler(
    mask=TaskStatus.COMPLETED,
    data=None,
    init=all_complete_init,
    finalize=all_complete_finalize,
    status_change=all_complete_status_change,
)