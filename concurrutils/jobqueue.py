"""Thread-safe queue of jobs whose results are delivered through futures."""

from __future__ import annotations

import functools
import threading
from collections import deque
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class _Task:
    """A job bound to the future that receives its outcome."""

    func: Callable[[], Any]
    future: Future

    def __call__(self) -> None:
        if not self.future.set_running_or_notify_cancel():
            return
        try:
            result = self.func()
        except Exception as exc:  # the outcome belongs to the future
            self.future.set_exception(exc)
        else:
            self.future.set_result(result)


class JobQueue:
    """FIFO of jobs, filled by producers and drained by a consumer thread."""

    def __init__(self) -> None:
        self._jobs: deque[_Task] = deque()
        self._cond = threading.Condition()
        self._stopped = False

    def enqueue(self, job: Callable[..., Any], *args: Any) -> Future:
        """Queue ``job`` (bound to ``args``) and return the future of its result."""
        func = functools.partial(job, *args) if args else job
        future: Future = Future()
        task = _Task(func, future)
        with self._cond:
            if self._stopped:
                future.cancel()
                return future
            self._jobs.append(task)
            self._cond.notify()
        return future

    def dequeue(self) -> _Task | None:
        """Block until a job is available and return it, or None once stopped."""
        with self._cond:
            self._cond.wait_for(lambda: self._jobs or self._stopped)
            if self._stopped:
                return None
            return self._jobs.popleft()

    def stop(self) -> None:
        """Stop dequeuing; jobs still queued are cancelled."""
        with self._cond:
            self._stopped = True
            pending = list(self._jobs)
            self._jobs.clear()
            self._cond.notify_all()
        for task in pending:
            task.future.cancel()

    def __len__(self) -> int:
        with self._cond:
            return len(self._jobs)