"""A resizable pool of worker threads returning futures."""

from __future__ import annotations

import logging
import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any

_log = logging.getLogger(__name__)


@dataclass
class _Task:
    future: Future
    func: Callable[..., Any]
    args: tuple
    kwargs: dict

    def run(self) -> None:
        if not self.future.set_running_or_notify_cancel():
            return
        try:
            result = self.func(*self.args, **self.kwargs)
        except BaseException as exc:  # noqa: BLE001 - handed to the caller through the future
            self.future.set_exception(exc)
        else:
            self.future.set_result(result)


@dataclass(eq=False)
class _Worker:
    stop: bool = False
    thread: threading.Thread | None = field(default=None, repr=False)


class ThreadPool:
    """Run callables on a fixed but resizable set of threads."""

    def __init__(self, num_threads: int) -> None:
        self._cond = threading.Condition()
        self._tasks: deque[_Task] = deque()
        self._workers: list[_Worker] = []
        self._idle = 0
        self._done = False
        self._stopped = False
        self.resize(num_threads)

    def submit(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._done or self._stopped:
                raise RuntimeError("thread pool is stopped")
            self._tasks.append(_Task(future, func, args, kwargs))
            self._cond.notify()
        return future

    def size(self) -> int:
        """Number of running worker threads."""
        with self._cond:
            return len(self._workers)

    def idle_count(self) -> int:
        """Number of worker threads waiting for work."""
        with self._cond:
            return self._idle

    def resize(self, num_threads: int) -> None:
        """Grow or shrink the pool; has no effect once the pool is stopped."""
        if num_threads < 0:
            raise ValueError("number of threads must not be negative")
        with self._cond:
            if self._stopped or self._done:
                return
            current = len(self._workers)
            if num_threads >= current:
                for _ in range(num_threads - current):
                    worker = _Worker()
                    worker.thread = threading.Thread(target=self._run, args=(worker,), daemon=True)
                    self._workers.append(worker)
                    worker.thread.start()
            else:
                for worker in self._workers[num_threads:]:
                    worker.stop = True
                del self._workers[num_threads:]
                self._cond.notify_all()

    def stop(self, wait: bool = False) -> None:
        """Stop the pool and join its threads.

        With ``wait`` every queued task runs first; without it queued tasks
        are cancelled and each thread returns after its current task.
        """
        dropped: list[_Task] = []
        with self._cond:
            if not wait:
                if self._stopped:
                    return
                self._stopped = True
                for worker in self._workers:
                    worker.stop = True
                dropped.extend(self._tasks)
                self._tasks.clear()
            else:
                if self._done or self._stopped:
                    return
                self._done = True
            self._cond.notify_all()
            workers = list(self._workers)
        for task in dropped:
            task.future.cancel()
        current = threading.current_thread()
        for worker in workers:
            if worker.thread is not None and worker.thread is not current:
                worker.thread.join()
        with self._cond:
            leftover = list(self._tasks)
            self._tasks.clear()
            self._workers.clear()
        for task in leftover:
            task.future.cancel()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop(wait=True)

    def _run(self, worker: _Worker) -> None:
        def ready() -> bool:
            return bool(self._tasks) or self._done or worker.stop

        while True:
            with self._cond:
                if not ready():
                    self._idle += 1
                    try:
                        self._cond.wait_for(ready)
                    finally:
                        self._idle -= 1
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            task.run()
            if worker.stop:
                return


_global_lock = threading.Lock()
_global_size = 0
_global_pool: ThreadPool | None = None


def init_global_thread_pool(num_threads: int) -> None:
    """Set the size of the shared pool; only the first call takes effect."""
    global _global_size
    if num_threads <= 0:
        _log.error("num_threads should be bigger than 0")
        return
    with _global_lock:
        if _global_size == 0:
            _global_size = num_threads
            return
        size = _global_size
    _log.warning("Global ThreadPool has already been initialized with threads num: %d", size)


def get_global_thread_pool() -> ThreadPool:
    """Return the shared pool, creating it on first use."""
    global _global_size, _global_pool
    with _global_lock:
        if _global_size == 0:
            _global_size = os.cpu_count() or 1
            _log.warning(
                "Global ThreadPool has not been initialized yet, init it with threads num: %d",
                _global_size,
            )
        if _global_pool is None:
            _global_pool = ThreadPool(_global_size)
        return _global_pool