"""Task and event status flags and their display names."""

from __future__ import annotations

import enum

__all__ = ["TaskStatus", "EventStatus", "task_status_str", "event_status_str"]


class TaskStatus(enum.IntFlag):
    """Life-cycle states of a task, one bit each."""

    IDLE = 1 << 0
    DEPHOLD = 1 << 1
    READY = 1 << 2
    QUEUE = 1 << 3
    RUNNING = 1 << 4
    COMPLETED = 1 << 5
    ABORTED = 1 << 6
    FAILED = 1 << 7
    FINAL = 1 << 8
    TRANS = 1 << 9


class EventStatus(enum.IntFlag):
    """Life-cycle states of an event, one bit each."""

    IDLE = 1 << 0
    WATCHING = 1 << 1
    TRIGGER = 1 << 2
    QUEUE = 1 << 3
    RUNNING = 1 << 4
    COMPLETED = 1 << 5
    FAILED = 1 << 6
    TRANS = 1 << 7


# Checked in order: the first bit present in a status decides its name.
_TASK_NAMES = (
    (TaskStatus.IDLE, "idle"),
    (TaskStatus.DEPHOLD, "dep. hold"),
    (TaskStatus.READY, "ready"),
    (TaskStatus.QUEUE, "queuing"),
    (TaskStatus.RUNNING, "running"),
    (TaskStatus.COMPLETED, "completed"),
    (TaskStatus.ABORTED, "aborted"),
    (TaskStatus.FAILED, "failed"),
    (TaskStatus.FINAL, "finalizing"),
    (TaskStatus.TRANS, "transition"),
)

_EVENT_NAMES = (
    (EventStatus.IDLE, "idle"),
    (EventStatus.WATCHING, "watching"),
    (EventStatus.TRIGGER, "triggered"),
    (EventStatus.RUNNING, "running"),
    (EventStatus.FAILED, "failed"),
    (EventStatus.TRANS, "transition"),
)

_UNKNOWN = "unknown"


def _name_of(status, table):
    status = int(status)
    return next((name for flag, name in table if status & flag), _UNKNOWN)


def task_status_str(status):
    """Return the display name of a task status, or ``"unknown"``."""
    return _name_of(status, _TASK_NAMES)


def event_status_str(status):
    """Return the display name of an event status, or ``"unknown"``."""
    return _name_of(status, _EVENT_NAMES)