"""Measuring elapsed time for benchmarking."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

_UNITS = {"ns": 1, "us": 1_000, "ms": 1_000_000, "s": 1_000_000_000}

Clock = Callable[[], int]


def _divisor(unit: str) -> int:
    try:
        return _UNITS[unit]
    except KeyError:
        raise ValueError(f"unknown time unit {unit!r}; use one of {sorted(_UNITS)}") from None


class ElapsedTime:
    """Stopwatch: ``stop`` returns the whole units passed since ``start``."""

    def __init__(self, clock: Clock = time.perf_counter_ns, unit: str = "ms") -> None:
        self._clock = clock
        self._divisor = _divisor(unit)
        self._start: int | None = None

    def start(self) -> None:
        """Record the starting point."""
        self._start = self._clock()

    def stop(self) -> int:
        """Return the elapsed time since ``start``, truncated to whole units."""
        if self._start is None:
            raise RuntimeError("stopwatch was never started")
        return (self._clock() - self._start) // self._divisor


@dataclass
class Measurement:
    """Elapsed time of a measured block, filled in when the block ends."""

    unit: str
    elapsed: int | None = None


@contextmanager
def measure(clock: Clock = time.perf_counter_ns, unit: str = "ms") -> Iterator[Measurement]:
    """Time the enclosed block; the result is recorded even if the block raises."""
    divisor = _divisor(unit)
    measurement = Measurement(unit)
    started = clock()
    try:
        yield measurement
    finally:
        measurement.elapsed = (clock() - started) // divisor


def elapsed_time(func: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[Any, int]:
    """Call ``func`` and return its result with the elapsed milliseconds."""
    with measure() as measurement:
        result = func(*args, **kwargs)
    assert measurement.elapsed is not None
    return result, measurement.elapsed