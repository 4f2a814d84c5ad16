import threading

import pytest

from taskworks.disposer import Disposer
from taskworks.errors import ErrorCode, TaskworksError


def test_flush_frees_all_but_newest_agreed():
    freed = []
    disposer = Disposer()
    with disposer.participating():
        for n in range(10):
            disposer.dispose(n, freed.append)
        disposer.flush()
        assert freed == list(range(8, -1, -1))
        assert disposer.pending() == 1
    disposer.close()
    assert freed == list(range(8, -1, -1)) + [9]
    assert disposer.pending() == 0


def test_flush_below_bin_size_frees_nothing():
    freed = []
    disposer = Disposer()
    with disposer.participating():
        disposer.dispose("a", freed.append)
        disposer.dispose("b", freed.append)
        disposer.flush()
    assert freed == []
    assert disposer.pending() == 2


def test_lagging_thread_holds_objects_back():
    freed = []
    disposer = Disposer()
    joined = threading.Event()
    release = threading.Event()
    left = threading.Event()

    def other():
        disposer.join()
        joined.set()
        release.wait()
        disposer.leave()
        left.set()

    worker = threading.Thread(target=other)
    worker.start()
    joined.wait()

    disposer.join()
    objs = list(range(10))
    for obj in objs:
        disposer.dispose(obj, freed.append)
    disposer.flush()
    assert freed == []
    assert disposer.pending() == len(objs)

    release.set()
    left.wait()
    worker.join()

    disposer.dispose(10, freed.append)
    disposer.flush()
    assert sorted(freed) == objs
    assert disposer.pending() == 1
    disposer.leave()


def test_nested_join_requires_matching_leaves():
    disposer = Disposer()
    disposer.join()
    disposer.join()
    disposer.leave()
    disposer.flush()
    disposer.leave()
    with pytest.raises(TaskworksError) as info:
        disposer.flush()
    assert info.value.code == ErrorCode.INVAL


def test_flush_without_join_raises():
    disposer = Disposer()
    with pytest.raises(TaskworksError) as info:
        disposer.flush()
    assert info.value.code == ErrorCode.INVAL


def test_leave_without_join_raises():
    disposer = Disposer()
    with pytest.raises(TaskworksError) as info:
        disposer.leave()
    assert info.value.code == ErrorCode.INVAL


def test_close_runs_handlers_newest_first():
    freed = []
    disposer = Disposer()
    for name in ["a", "b", "c"]:
        disposer.dispose(name, freed.append)
    disposer.close()
    assert freed == ["c", "b", "a"]


def test_context_manager_closes_and_rejects_later_dispose():
    freed = []
    with Disposer() as disposer:
        disposer.dispose("x", freed.append)
        assert disposer.pending() == 1
    assert freed == ["x"]
    with pytest.raises(TaskworksError) as info:
        disposer.dispose("y", freed.append)
    assert info.value.code == ErrorCode.STATUS


def test_dispose_requires_callable_handler():
    disposer = Disposer()
    with pytest.raises(TaskworksError) as info:
        disposer.dispose("x", None)
    assert info.value.code == ErrorCode.INVAL
    assert disposer.pending() == 0