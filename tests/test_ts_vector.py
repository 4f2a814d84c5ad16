import threading

import pytest

from taskworks.errors import ErrorCode, TaskworksError
from taskworks.ts_vector import GROWTH_FACTOR, INITIAL_CAPACITY, ThreadSafeVector


def make(items):
    vec = ThreadSafeVector()
    for item in items:
        vec.push_back(item)
    return vec


def test_push_and_read_round_trip():
    vec = make(["a", "b", "c"])
    assert len(vec) == 3
    assert [vec.read(i) for i in range(3)] == ["a", "b", "c"]
    assert list(vec) == ["a", "b", "c"]


def test_write_replaces_slot():
    vec = make(["a", "b"])
    vec.write(1, "z")
    assert list(vec) == ["a", "z"]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_read_out_of_range(index):
    vec = make(["a", "b"])
    with pytest.raises(IndexError):
        vec.read(index)
    with pytest.raises(IndexError):
        vec.write(index, "x")


def test_erase_at_shifts_items():
    vec = make(["a", "b", "c", "d"])
    vec.erase_at(1)
    assert list(vec) == ["a", "c", "d"]


def test_erase_returns_index_and_keeps_order():
    a, b, c = object(), object(), object()
    vec = make([a, b, c])
    assert vec.erase(b) == 1
    assert list(vec) == [a, c]
    assert vec.erase(b) == -1
    assert len(vec) == 2


def test_erase_removes_last_occurrence():
    a, b = object(), object()
    vec = make([a, b, a])
    assert vec.erase(a) == 2
    assert list(vec) == [a, b]


def test_swap_erase_moves_last_into_slot():
    a, b, c, d = object(), object(), object(), object()
    vec = make([a, b, c, d])
    assert vec.swap_erase(b) == 1
    assert list(vec) == [a, d, c]
    assert vec.swap_erase(b) == -1


def test_find_uses_identity():
    first = [1]
    second = [1]
    vec = make([first, second])
    assert vec.find(second) == 1
    assert vec.find(first) == 0
    assert vec.find([1]) == -1


def test_resize_pads_and_truncates():
    vec = make(["a", "b", "c"])
    vec.resize(5)
    assert list(vec) == ["a", "b", "c", None, None]
    vec.resize(1)
    assert list(vec) == ["a"]


def test_resize_grows_capacity():
    vec = ThreadSafeVector()
    assert vec.capacity == INITIAL_CAPACITY
    vec.resize(INITIAL_CAPACITY + 1)
    assert vec.capacity == INITIAL_CAPACITY * GROWTH_FACTOR
    assert len(vec) == INITIAL_CAPACITY + 1


def test_push_back_grows_capacity():
    vec = make(range(INITIAL_CAPACITY + 1))
    assert vec.capacity == INITIAL_CAPACITY * GROWTH_FACTOR
    assert list(vec) == list(range(INITIAL_CAPACITY + 1))


def test_resize_negative_rejected():
    vec = ThreadSafeVector()
    with pytest.raises(TaskworksError) as info:
        vec.resize(-1)
    assert info.value.code == ErrorCode.INVAL


def test_locked_allows_reads_and_writes():
    vec = make(["a", "b"])
    with vec.locked() as held:
        assert held.read(0) == "a"
        held.write(0, "x")
    assert list(vec) == ["x", "b"]


def test_concurrent_push_back():
    vec = ThreadSafeVector()
    per_thread = 100
    workers = 8

    def work(base):
        for n in range(per_thread):
            vec.push_back(base * per_thread + n)

    threads = [threading.Thread(target=work, args=(w,)) for w in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(vec) == per_thread * workers
    assert sorted(vec) == list(range(per_thread * workers))