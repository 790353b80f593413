"""Logging data to a file through an in-memory cache and a background thread."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Iterable

from .aothread import AOThread
from .filestream import OutputFileStream


class DataLogger(ABC):
    """Interface of loggers that take chunks of data."""

    @abstractmethod
    def log(self, data: Any) -> Any:
        """Log one chunk of data."""


class FileLogger(DataLogger):
    """Collects logged chunks in a fixed-size cache and flushes it to a file.

    All cache and file work runs sequentially in a background thread.
    """

    def __init__(self, cache: int, file: OutputFileStream, name: str = "FileLogger") -> None:
        if cache < 0:
            raise ValueError("cache size must not be negative")
        self._capacity = cache
        self._buffer: list[Any] = []
        self._file = file
        self._thread = AOThread(name)
        self._closed = False
        self._close_lock = threading.Lock()

    def log(self, data: Iterable[Any]) -> Future:
        """Queue a chunk; the cache is flushed first when it lacks room for it."""
        if self._closed:
            raise ValueError("logger is closed")
        return self._thread.enqueue(self._store, list(data))

    def _store(self, items: list[Any]) -> None:
        if self._capacity - len(self._buffer) < len(items):
            self._file.write(self._buffer)
            self._buffer.clear()
        self._buffer.extend(items)

    def _flush(self) -> None:
        self._file.write(self._buffer)
        self._buffer.clear()

    def close(self) -> None:
        """Flush the cache, stop the thread and close the file."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
        try:
            self._thread.enqueue(self._flush).result()
        finally:
            self._thread.stop()
            self._file.close()

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()