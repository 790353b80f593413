"""Active-object threads: jobs are executed one by one in a background thread."""

from __future__ import annotations

import functools
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

from .jobqueue import JobQueue, _Task


class AOThread:
    """Background thread draining a JobQueue; started on construction."""

    def __init__(self, name: str = "aothread") -> None:
        self._queue = JobQueue()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def enqueue(self, job: Callable[..., Any], *args: Any) -> Future:
        """Queue a job and return the future of its result."""
        return self._queue.enqueue(job, *args)

    def stop(self) -> None:
        """Stop dequeuing, cancel queued jobs and wait for the thread to finish."""
        self._queue.stop()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def _run(self) -> None:
        while (task := self._queue.dequeue()) is not None:
            task()

    def __enter__(self) -> AOThread:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class TaskThread:
    """Background thread running jobs of any signature; started explicitly."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._jobs: deque[_Task] = deque()
        self._thread: threading.Thread | None = None
        self._stop_flag: threading.Event | None = None

    def start(self) -> bool:
        """Start the worker thread; False if it is already running or cannot start."""
        with self._cond:
            if self._thread is not None:
                return False
            flag = threading.Event()
            thread = threading.Thread(
                target=self._run, args=(flag,), name="TaskThread", daemon=True
            )
            try:
                thread.start()
            except RuntimeError:
                return False
            self._thread = thread
            self._stop_flag = flag
            return True

    def stop(self) -> None:
        """Signal the worker to exit, cancel queued jobs and wait for it."""
        with self._cond:
            thread, flag = self._thread, self._stop_flag
            if thread is None or flag is None:
                return
            flag.set()
            self._thread = None
            self._stop_flag = None
            pending = list(self._jobs)
            self._jobs.clear()
            self._cond.notify_all()
        for task in pending:
            task.future.cancel()
        if thread is not threading.current_thread():
            thread.join()

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return the future of its result."""
        bound = functools.partial(func, *args, **kwargs) if args or kwargs else func
        future: Future = Future()
        with self._cond:
            self._jobs.append(_Task(bound, future))
            self._cond.notify()
        return future

    def _run(self, flag: threading.Event) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: flag.is_set() or self._jobs)
                if flag.is_set():
                    break
                task = self._jobs.popleft()
            task()

    def __enter__(self) -> TaskThread:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()