"""Error codes, their messages and the exception raised for them."""

from __future__ import annotations

import enum

__all__ = ["ErrorCode", "TaskworksError", "error_message"]


class ErrorCode(enum.IntEnum):
    """Error codes reported by the library."""

    SUCCESS = 0
    MEM = enum.auto()
    OS = enum.auto()
    INVAL = enum.auto()
    INVAL_BACKEND = enum.auto()
    INVAL_EVT_BACKEND = enum.auto()
    INVAL_HANDLE = enum.auto()
    INCOMPATIBLE_OBJECT = enum.auto()
    NOT_FOUND = enum.auto()
    STATUS = enum.auto()
    TIMEOUT = enum.auto()
    DEP_INIT = enum.auto()
    THREAD_CREATE = enum.auto()
    THREAD_SIG = enum.auto()
    NOT_SUPPORTED = enum.auto()


_MESSAGES = {
    ErrorCode.SUCCESS: "Operation finished successfully",
    ErrorCode.MEM: "Memory allocation fail",
    ErrorCode.OS: "System call fail",
    ErrorCode.INVAL: "Invalid arguments",
    ErrorCode.INVAL_BACKEND: "Unrecognized engine backend",
    ErrorCode.INVAL_EVT_BACKEND: "Unrecognized event backend",
    ErrorCode.INVAL_HANDLE: "Invalid handle",
    ErrorCode.INCOMPATIBLE_OBJECT: "Object not compatible with the current backend ",
    ErrorCode.NOT_FOUND: "Cannot find specified object",
    ErrorCode.STATUS: (
        "Operation cannot be performed while the object is in the current status"
    ),
    ErrorCode.TIMEOUT: "Operation timed out",
    ErrorCode.DEP_INIT: "The dependency initialization handler returns non-zero",
    ErrorCode.THREAD_CREATE: "Cannot create thread",
    ErrorCode.THREAD_SIG: "Cannot send signal to thread",
    ErrorCode.NOT_SUPPORTED: "The backend does not support such function",
}

_UNKNOWN = "Unknown error"


def error_message(code):
    """Return the human-readable message for an error code."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except (ValueError, TypeError):
        return _UNKNOWN


class TaskworksError(Exception):
    """Raised when an operation fails; carries an :class:`ErrorCode`."""

    def __init__(self, code, message=None):
        try:
            code = ErrorCode(code)
        except (ValueError, TypeError):
            pass
        self.code = code
        self.message = message if message is not None else error_message(code)
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.code, self.message))