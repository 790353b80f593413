"""Convenience wrapper giving a logger one set of methods per verbosity level."""

from __future__ import annotations

from typing import Any

from .logger import Logger, Verbosity, to_str

_NOT_AVAILABLE = "<n/a>"


def _require_str(msg: Any) -> str:
    if not isinstance(msg, str):
        raise TypeError(f"message must be a string, got {type(msg).__name__}")
    return msg


class LoggerWrapper:
    """Wraps a logger and offers plain, caller-prefixed, argument and formatted logging.

    A wrapper around no logger accepts every call and logs nothing.
    """

    def __init__(self, logger: Logger | None) -> None:
        self._logger = logger

    @property
    def logger(self) -> Logger | None:
        return self._logger

    # Shared implementations

    def _log(self, verbosity: Verbosity, msg: str) -> None:
        msg = _require_str(msg)
        if self._logger is not None:
            self._logger.log(verbosity, msg)

    def _log_with_func(self, verbosity: Verbosity, func: str, msg: str) -> None:
        msg = _require_str(msg)
        if self._logger is not None:
            self._logger.log(verbosity, f"[{func}] {msg}")

    def _log_args(self, verbosity: Verbosity, func: str, args: tuple[Any, ...]) -> None:
        if self._logger is None:
            return
        parts = []
        for arg in args:
            text = to_str(arg)
            parts.append(_NOT_AVAILABLE if text is None else text)
        self._logger.log(verbosity, f"[{func}] " + "".join(parts))

    def _log_formatted(self, verbosity: Verbosity, fmt: str, args: tuple[Any, ...]) -> None:
        if self._logger is not None:
            self._logger.log_formatted(verbosity, fmt, *args)

    def _log_formatted_with_func(
        self, verbosity: Verbosity, func: str, fmt: str, args: tuple[Any, ...]
    ) -> None:
        if self._logger is not None:
            self._logger.log_formatted(verbosity, f"[{func}] {fmt}", *args)

    # Trace level

    def trace(self, msg: str) -> None:
        """Log a message at trace level."""
        self._log(Verbosity.TRACE, msg)

    def trace_with_func(self, func: str, msg: str) -> None:
        """Log ``[func] msg`` at trace level."""
        self._log_with_func(Verbosity.TRACE, func, msg)

    def trace_args(self, func: str, *args: Any) -> None:
        """Log ``[func]`` followed by the converted arguments at trace level."""
        self._log_args(Verbosity.TRACE, func, args)

    def trace_formatted(self, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message at trace level."""
        self._log_formatted(Verbosity.TRACE, fmt, args)

    def trace_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        """Log a formatted message prefixed with ``[func]`` at trace level."""
        self._log_formatted_with_func(Verbosity.TRACE, func, fmt, args)

    # Debug level

    def debug(self, msg: str) -> None:
        """Log a message at debug level."""
        self._log(Verbosity.DEBUG, msg)

    def debug_with_func(self, func: str, msg: str) -> None:
        """Log ``[func] msg`` at debug level."""
        self._log_with_func(Verbosity.DEBUG, func, msg)

    def debug_args(self, func: str, *args: Any) -> None:
        """Log ``[func]`` followed by the converted arguments at debug level."""
        self._log_args(Verbosity.DEBUG, func, args)

    def debug_formatted(self, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message at debug level."""
        self._log_formatted(Verbosity.DEBUG, fmt, args)

    def debug_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        """Log a formatted message prefixed with ``[func]`` at debug level."""
        self._log_formatted_with_func(Verbosity.DEBUG, func, fmt, args)

    # Info level

    def info(self, msg: str) -> None:
        """Log a message at info level."""
        self._log(Verbosity.INFO, msg)

    def info_with_func(self, func: str, msg: str) -> None:
        """Log ``[func] msg`` at info level."""
        self._log_with_func(Verbosity.INFO, func, msg)

    def info_args(self, func: str, *args: Any) -> None:
        """Log ``[func]`` followed by the converted arguments at info level."""
        self._log_args(Verbosity.INFO, func, args)

    def info_formatted(self, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message at info level."""
        self._log_formatted(Verbosity.INFO, fmt, args)

    def info_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        """Log a formatted message prefixed with ``[func]`` at info level."""
        self._log_formatted_with_func(Verbosity.INFO, func, fmt, args)

    # Warning level

    def warning(self, msg: str) -> None:
        """Log a message at warning level."""
        self._log(Verbosity.WARNING, msg)

    def warning_with_func(self, func: str, msg: str) -> None:
        """Log ``[func] msg`` at warning level."""
        self._log_with_func(Verbosity.WARNING, func, msg)

    def warning_args(self, func: str, *args: Any) -> None:
        """Log ``[func]`` followed by the converted arguments at warning level."""
        self._log_args(Verbosity.WARNING, func, args)

    def warning_formatted(self, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message at warning level."""
        self._log_formatted(Verbosity.WARNING, fmt, args)

    def warning_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        """Log a formatted message prefixed with ``[func]`` at warning level."""
        self._log_formatted_with_func(Verbosity.WARNING, func, fmt, args)

    # Error level

    def error(self, msg: str) -> None:
        """Log a message at error level."""
        self._log(Verbosity.ERROR, msg)

    def error_with_func(self, func: str, msg: str) -> None:
        """Log ``[func] msg`` at error level."""
        self._log_with_func(Verbosity.ERROR, func, msg)

    def error_args(self, func: str, *args: Any) -> None:
        """Log ``[func]`` followed by the converted arguments at error level."""
        self._log_args(Verbosity.ERROR, func, args)

    def error_formatted(self, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message at error level."""
        self._log_formatted(Verbosity.ERROR, fmt, args)

    def error_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        """Log a formatted message prefixed with ``[func]`` at error level."""
        self._log_formatted_with_func(Verbosity.ERROR, func, fmt, args)