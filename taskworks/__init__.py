"""Concurrency building blocks for a task engine."""

__version__ = "0.1.0"

__all__ = [
    "clock",
    "disposer",
    "errors",
    "hashset",
    "nb_list",
    "nb_queue",
    "rwlock",
    "status",
    "task_dep",
    "ts_vector",
    "vector",
]