# taskworks

Thread-safe building blocks for running tasks. It provides error codes,
containers, locks, concurrent lists and queues, deferred disposal of shared
objects, and helpers for task and event status.

## Installation

```
pip install taskworks
```

To run the tests:

```
pip install "taskworks[test]"
pytest
```

## Modules

- `taskworks.errors` has `ErrorCode`, the `TaskworksError` exception (with
  `code` and `message` attributes) and `error_message(code)`, which returns
  the text for a code or `"Unknown error"`.
- `taskworks.hashset` has `IdentitySet`, a set whose members are compared by
  identity and spread over `2 ** index_bits` buckets. `insert` raises on a
  duplicate, `try_insert` returns whether the item was added, and `remove`
  raises if the item is absent.
- `taskworks.clock` has `now_us()`, the current wall-clock time in
  microseconds since the Unix epoch.
- `taskworks.rwlock` has `RWLock`, a readers-writer lock.
  - It has blocking and non-blocking acquire methods.
  - It has the context managers `reading()` and `writing()`.
  - A thread that holds the write lock and tries to acquire it again gets
    `RuntimeError`.
- `taskworks.vector` has `Vector`, a growable stack-like sequence.
  - Its `capacity` grows sixteenfold from 1024.
  - It has `push_back`, `pop_back` and `resize`. `resize` pads with `None`.
- `taskworks.ts_vector` has `ThreadSafeVector`, a vector guarded by an
  `RWLock`.
  - It has `read`, `write`, `erase_at`, `erase`, `swap_erase`, `find`,
    `push_back` and `resize`.
  - Items are matched by identity.
  - The `locked()` context manager holds the vector shared.
- `taskworks.disposer` has `Disposer`. It defers cleanup handlers until every
  participating thread has moved past the point at which the object was
  disposed.
  - Threads take part with `join`/`leave` or `participating()`.
  - `flush()` records progress and runs the handlers.
  - `close()`, or leaving a `with` block, runs everything still pending.
- `taskworks.nb_list` has `ConcurrentList` and `ListNode`, a singly linked
  list that several threads may insert into and remove from.
- `taskworks.nb_queue` has `ConcurrentQueue`, an unbounded FIFO queue.
  - `pop` raises `TaskworksError` when the queue is empty.
  - `try_pop` returns `(ok, item)`.
- `taskworks.status` has the `TaskStatus` and `EventStatus` flags, together
  with `task_status_str` and `event_status_str`.
- `taskworks.task_dep` has `DependencyHandler`, the "all parents complete"
  rule (`AllCompleteState` and the `all_complete_*` functions), and the
  ready-made handlers `DEP_NULL` and `DEP_ALL_COMPLETE`.

## Example

```python
from taskworks.nb_queue import ConcurrentQueue
from taskworks.rwlock import RWLock
from taskworks.status import TaskStatus, task_status_str

queue = ConcurrentQueue()
queue.push("a")
queue.push("b")
assert queue.pop() == "a"

lock = RWLock()
with lock.reading():
    pass

print(task_status_str(TaskStatus.COMPLETED))  # "completed"
```

## What this package does not do

The package holds no task engine. It does not create worker threads, and it
does not schedule or run tasks. It does not watch files, sockets or timers for
events. The status flags and dependency handlers describe tasks, but nothing
here drives them; an engine that uses these pieces has to be supplied
separately.