import threading

import pytest

from taskworks.errors import ErrorCode, TaskworksError
from taskworks.nb_queue import ConcurrentQueue


def test_fifo_order():
    q = ConcurrentQueue()
    for item in ("a", "b", "c"):
        q.push(item)
    assert [q.pop(), q.pop(), q.pop()] == ["a", "b", "c"]


def test_pop_empty_raises():
    q = ConcurrentQueue()
    with pytest.raises(TaskworksError) as info:
        q.pop()
    assert info.value.code == ErrorCode.INVAL


def test_try_pop_empty():
    q = ConcurrentQueue()
    assert q.try_pop() == (False, None)


def test_try_pop_distinguishes_none_item():
    q = ConcurrentQueue()
    q.push(None)
    assert q.try_pop() == (True, None)
    assert q.try_pop() == (False, None)


def test_len_and_bool():
    q = ConcurrentQueue()
    assert not q
    q.push(1)
    q.push(2)
    assert q
    assert len(q) == 2
    q.pop()
    assert len(q) == 1


def test_interleaved_push_pop_keeps_order():
    q = ConcurrentQueue()
    q.push("x")
    q.push("y")
    assert q.pop() == "x"
    q.push("z")
    assert q.pop() == "y"
    assert q.pop() == "z"
    assert len(q) == 0


def test_concurrent_producers_consumers():
    q = ConcurrentQueue()
    per_thread = 500
    produced = [[(p, i) for i in range(per_thread)] for p in range(4)]
    consumed = []
    consumed_lock = threading.Lock()

    def produce(batch):
        for item in batch:
            q.push(item)

    producers = [threading.Thread(target=produce, args=(b,)) for b in produced]
    for t in producers:
        t.start()
    for t in producers:
        t.join()

    def consume():
        local = []
        while True:
            ok, item = q.try_pop()
            if not ok:
                break
            local.append(item)
        with consumed_lock:
            consumed.extend(local)

    consumers = [threading.Thread(target=consume) for _ in range(4)]
    for t in consumers:
        t.start()
    for t in consumers:
        t.join()

    assert sorted(consumed) == sorted(x for b in produced for x in b)
    assert len(q) == 0


def test_single_producer_order_preserved_across_threads():
    q = ConcurrentQueue()
    items = list(range(300))
    worker = threading.Thread(target=lambda: [q.push(i) for i in items])
    worker.start()
    worker.join()
    assert [q.pop() for _ in items] == items