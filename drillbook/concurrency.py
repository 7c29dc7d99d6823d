"""Blocking queues and a small thread pool built on them."""

from __future__ import annotations

import queue
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, Deque, Generic, List, TypeVar

T = TypeVar("T")


class QueueClosed(Exception):
    """Raised when putting into a closed queue or getting from a closed, drained one."""


class BoundedQueue(Generic[T]):
    """A FIFO queue holding at most ``capacity`` items, safe to share between threads."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def put(self, item: T) -> None:
        """Add an item, blocking while the queue is full.

        Raises QueueClosed if the queue is, or becomes, closed.
        """
        with self._not_full:
            self._not_full.wait_for(
                lambda: len(self._items) < self._capacity or self._closed
            )
            if self._closed:
                raise QueueClosed("queue is closed")
            self._items.append(item)
            self._not_empty.notify()

    def get(self) -> T:
        """Remove and return the oldest item, blocking while the queue is empty.

        Items left when the queue is closed are still handed out; once they
        are gone QueueClosed is raised.
        """
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items) or self._closed)
            if not self._items:
                raise QueueClosed("queue is closed and drained")
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def try_get(self) -> T:
        """Remove and return the oldest item without blocking.

        Raises queue.Empty if there is nothing to take.
        """
        with self._lock:
            if not self._items:
                raise queue.Empty
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def close(self) -> None:
        """Close the queue and wake every waiting thread."""
        with self._lock:
            self._closed = True
            self._not_full.notify_all()
            self._not_empty.notify_all()


class TaskQueue:
    """An unbounded FIFO queue of callables, safe to share between threads."""

    def __init__(self) -> None:
        self._tasks: Deque[Callable[[], Any]] = deque()
        self._closed = False
        self._not_empty = threading.Condition()

    def put(self, task: Callable[[], Any]) -> None:
        """Add a task; raises QueueClosed once the queue is closed."""
        with self._not_empty:
            if self._closed:
                raise QueueClosed("queue is closed")
            self._tasks.append(task)
            self._not_empty.notify()

    def get(self) -> Callable[[], Any]:
        """Take the oldest task, blocking while empty.

        Raises QueueClosed once the queue is closed and drained.
        """
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._tasks) or self._closed)
            if not self._tasks:
                raise QueueClosed("queue is closed and drained")
            return self._tasks.popleft()

    def close(self) -> None:
        """Refuse further tasks and wake every waiting thread."""
        with self._not_empty:
            self._closed = True
            self._not_empty.notify_all()


class ThreadPool:
    """A fixed set of worker threads that run submitted calls in order."""

    def __init__(self, workers: int) -> None:
        self._tasks = TaskQueue()
        self._threads: List[threading.Thread] = [
            threading.Thread(target=self._work, daemon=True) for _ in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while True:
            try:
                task = self._tasks.get()
            except QueueClosed:
                return
            task()

    def submit(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Future[T]":
        """Schedule ``fn(*args, **kwargs)`` and return a future for its result.

        Raises RuntimeError if the pool has been shut down.
        """
        future: "Future[T]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        try:
            self._tasks.put(run)
        except QueueClosed:
            raise RuntimeError("thread pool is closed") from None
        return future

    def shutdown(self) -> None:
        """Stop accepting work, let queued tasks finish and join the workers."""
        self._tasks.close()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()