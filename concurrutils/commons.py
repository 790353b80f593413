"""Shared helpers: printf-style formatting, enum values, class-level locks and a console logger."""

from __future__ import annotations

import sys
import threading
from enum import Enum
from typing import Any, TextIO

_class_locks: dict[type, threading.Lock] = {}
_registry_lock = threading.Lock()


def string_format(fmt: str, *args: Any) -> str:
    """Format ``fmt`` printf-style with ``args``; raise ValueError if it cannot be done."""
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise ValueError(f"Error while formatting: {exc}") from exc


def to_underlying(value: Enum) -> Any:
    """Return the underlying value of an enumeration member."""
    if not isinstance(value, Enum):
        raise TypeError(f"expected an enumeration member, got {type(value).__name__}")
    return value.value


def class_lock(host: type) -> threading.Lock:
    """Return the single lock shared by every instance of ``host``."""
    with _registry_lock:
        return _class_locks.setdefault(host, threading.Lock())


class ConsoleLogger:
    """Console logger whose writes are serialised by a class-level lock."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log_all(self, *args: Any) -> None:
        """Write all arguments one after another, with no separator or newline."""
        with class_lock(ConsoleLogger):
            out = self._out
            out.write("".join(str(arg) for arg in args))
            out.flush()

    def log(self, fmt: str, *args: Any) -> None:
        """Write one line: ``fmt`` itself, or ``fmt`` formatted with ``args``."""
        with class_lock(ConsoleLogger):
            message = string_format(fmt, *args) if args else fmt
            out = self._out
            out.write(message + "\n")
            out.flush()