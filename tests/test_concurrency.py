import queue
import threading
import time

import pytest

from drillbook.concurrency import BoundedQueue, QueueClosed, TaskQueue, ThreadPool


def test_bounded_queue_is_fifo():
    q = BoundedQueue(3)
    for item in ("x", "y", "z"):
        q.put(item)
    assert [q.get(), q.get(), q.get()] == ["x", "y", "z"]


def test_try_get_on_empty_raises():
    q = BoundedQueue(2)
    with pytest.raises(queue.Empty):
        q.try_get()


def test_try_get_returns_oldest():
    q = BoundedQueue(2)
    q.put(10)
    q.put(20)
    assert q.try_get() == 10
    assert q.get() == 20


def test_put_after_close_raises():
    q = BoundedQueue(2)
    q.close()
    with pytest.raises(QueueClosed):
        q.put(1)


def test_get_drains_before_reporting_closed():
    q = BoundedQueue(2)
    q.put("a")
    q.put("b")
    q.close()
    assert q.get() == "a"
    assert q.get() == "b"
    with pytest.raises(QueueClosed):
        q.get()


def test_put_blocks_until_space():
    q = BoundedQueue(1)
    q.put("a")
    done = threading.Event()

    def producer():
        q.put("b")
        done.set()

    thread = threading.Thread(target=producer)
    thread.start()
    assert not done.wait(0.1)
    assert q.get() == "a"
    assert done.wait(2)
    assert q.get() == "b"
    thread.join(2)


def test_close_wakes_blocked_getter():
    q = BoundedQueue(2)
    outcome = []

    def consumer():
        try:
            outcome.append(q.get())
        except QueueClosed:
            outcome.append("closed")

    thread = threading.Thread(target=consumer)
    thread.start()
    time.sleep(0.05)
    q.close()
    thread.join(2)
    assert not thread.is_alive()
    assert outcome == ["closed"]
    with pytest.raises(QueueClosed):
        q.get()


def test_close_wakes_blocked_putter():
    q = BoundedQueue(1)
    q.put(0)
    outcome = []

    def producer():
        try:
            q.put(1)
            outcome.append("put")
        except QueueClosed:
            outcome.append("closed")

    thread = threading.Thread(target=producer)
    thread.start()
    time.sleep(0.05)
    q.close()
    thread.join(2)
    assert not thread.is_alive()
    assert outcome == ["closed"]
    assert q.get() == 0
    with pytest.raises(QueueClosed):
        q.get()


def test_task_queue_order_and_close():
    tasks = TaskQueue()
    first, second = (lambda: 1), (lambda: 2)
    tasks.put(first)
    tasks.put(second)
    tasks.close()
    assert tasks.get() is first
    assert tasks.get() is second
    with pytest.raises(QueueClosed):
        tasks.get()
    with pytest.raises(QueueClosed):
        tasks.put(first)


def test_pool_returns_results():
    with ThreadPool(3) as pool:
        futures = [pool.submit(pow, n, 2) for n in range(20)]
        results = [f.result(timeout=5) for f in futures]
    assert results == [n * n for n in range(20)]


def test_pool_passes_keyword_arguments():
    with ThreadPool(1) as pool:
        future = pool.submit(int, "ff", base=16)
        assert future.result(timeout=5) == 255


def test_pool_propagates_exceptions():
    def fail():
        raise ValueError("boom")

    with ThreadPool(2) as pool:
        future = pool.submit(fail)
        with pytest.raises(ValueError, match="boom"):
            future.result(timeout=5)


def test_submit_after_shutdown_raises():
    pool = ThreadPool(2)
    pool.shutdown()
    with pytest.raises(RuntimeError, match="thread pool is closed"):
        pool.submit(print)


def test_shutdown_runs_queued_tasks():
    seen = []
    lock = threading.Lock()

    def record(n):
        with lock:
            seen.append(n)
        return n

    pool = ThreadPool(2)
    futures = [pool.submit(record, n) for n in range(50)]
    pool.shutdown()
    assert all(f.done() for f in futures)
    assert [f.result(timeout=5) for f in futures] == list(range(50))
    assert sorted(seen) == list(range(50))