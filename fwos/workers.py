"""A fixed-size worker pool and a blocking FIFO queue."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ThreadPool:
    """Runs queued callables on a fixed number of threads.

    On shutdown the pool finishes every queued task before its threads exit.
    """

    def __init__(self, count: int) -> None:
        self._tasks: deque[Callable[[], object]] = deque()
        self._cond = threading.Condition()
        self._stopped = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(count)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopped or self._tasks)
                if self._stopped and not self._tasks:
                    return
                task = self._tasks.popleft()
            task()

    def enqueue(self, task: Callable[[], object]) -> None:
        with self._cond:
            if self._stopped:
                raise RuntimeError("cannot enqueue on a pool that has been shut down")
            self._tasks.append(task)
            self._cond.notify()

    def shutdown(self) -> None:
        """Stop accepting work, drain the queue and wait for the threads."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


class BlockingQueue(Generic[T]):
    """Thread-safe FIFO whose pop waits until an item is available."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> None:
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def pop(self) -> T:
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)