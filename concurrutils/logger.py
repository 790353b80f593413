"""Tagged loggers with verbosity filtering, tag builders and logging to several targets."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any, TextIO

from .commons import class_lock, string_format


class Verbosity(IntEnum):
    """Logging verbosity levels, from the most to the least detailed."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


class Logger(ABC):
    """Logger that carries a tag, such as an application channel tree."""

    def __init__(self, tag: str) -> None:
        self._tag = _require_str(tag, "tag")

    @property
    def tag(self) -> str:
        return self._tag

    @abstractmethod
    def log(self, verbosity: Verbosity, msg: str) -> None:
        """Log one message at the given verbosity."""

    def log_formatted(self, verbosity: Verbosity, fmt: str, *args: Any) -> None:
        """Log ``fmt`` formatted printf-style with ``args``.

        A format that cannot be applied is reported on standard error instead.
        """
        try:
            msg = string_format(fmt, *args)
        except ValueError as exc:
            sys.stderr.write(f"<Error> {exc}")
            sys.stderr.flush()
            return
        self.log(verbosity, msg)


class CoutLogger(Logger):
    """Logs to standard output, and errors to standard error.

    Messages below ``level`` are dropped, except errors, which are always written.
    """

    def __init__(
        self,
        tag: str,
        out: TextIO | None = None,
        err: TextIO | None = None,
        level: Verbosity = Verbosity.INFO,
    ) -> None:
        super().__init__(tag)
        self._out = out
        self._err = err
        self._level = Verbosity(level)

    @property
    def level(self) -> Verbosity:
        return self._level

    def log(self, verbosity: Verbosity, msg: str) -> None:
        """Write ``<tag>: msg`` to the stream chosen by the verbosity."""
        verbosity = Verbosity(verbosity)
        text = f"<{self.tag}>: {_require_str(msg, 'message')}\n"
        with class_lock(CoutLogger):
            if verbosity is Verbosity.ERROR:
                stream = self._err if self._err is not None else sys.stderr
            elif verbosity >= self._level:
                stream = self._out if self._out is not None else sys.stdout
            else:
                return
            stream.write(text)
            stream.flush()


class LoggingMerge:
    """Sends each message to several loggers at once."""

    def __init__(self, *args: Logger) -> None:
        self._policies: tuple[Logger, ...] = tuple(args)

    def __len__(self) -> int:
        return len(self._policies)

    def log(self, verbosity: Verbosity, msg: str) -> None:
        """Log the message with every logger, in order."""
        for policy in self._policies:
            policy.log(verbosity, msg)

    def log_to(self, policy: int, verbosity: Verbosity, msg: str) -> None:
        """Log the message with the logger at index ``policy`` only."""
        if not 0 <= policy < len(self._policies):
            raise IndexError("Policy index out of range!")
        self._policies[policy].log(verbosity, msg)


def to_str(value: Any) -> str | None:
    """Convert a value to a string for logging, or None if it has no conversion.

    Enumerations give their underlying value, booleans ``1``/``0``, floats six
    decimals, and objects with a ``to_string`` method what that method returns.
    """
    if isinstance(value, Enum):
        return to_str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return "%f" % value
    to_string = getattr(value, "to_string", None)
    if callable(to_string):
        result = to_string()
        if isinstance(result, str):
            return result
    return None


def append_subchannels(*args: str) -> str:
    """Join subchannels as ``.sub1.sub2...``."""
    return "".join("." + _require_str(sub, "subchannel") for sub in args)


def generate_log_tag(app: str, channel: str, *args: str) -> str:
    """Build a tag ``app:channel`` followed by any subchannels."""
    tag = _require_str(app, "app") + ":" + _require_str(channel, "channel")
    return tag + append_subchannels(*args)