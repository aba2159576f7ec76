import threading
import time

from rsdriver.sync_queue import SyncQueue


def test_push_returns_size():
    q = SyncQueue()
    assert q.push("a") == 1
    assert q.push("b") == 2
    assert len(q) == 2


def test_pop_is_fifo():
    q = SyncQueue()
    for item in ("x", "y", "z"):
        q.push(item)
    assert [q.pop(), q.pop(), q.pop()] == ["x", "y", "z"]


def test_pop_empty_returns_none():
    q = SyncQueue()
    assert q.pop() is None
    assert len(q) == 0


def test_pop_wait_returns_ready_value():
    q = SyncQueue()
    q.push(42)
    assert q.pop_wait(1000) == 42


def test_pop_wait_times_out():
    q = SyncQueue()
    start = time.monotonic()
    assert q.pop_wait(20_000) is None
    assert time.monotonic() - start >= 0.015


def test_pop_wait_wakes_on_push():
    q = SyncQueue()

    def producer():
        time.sleep(0.02)
        q.push("late")

    thread = threading.Thread(target=producer)
    thread.start()
    result = q.pop_wait(2_000_000)
    thread.join()
    assert result == "late"


def test_clear_empties_queue():
    q = SyncQueue()
    q.push(1)
    q.push(2)
    q.clear()
    assert len(q) == 0
    assert q.pop() is None
    assert q.push(3) == 1