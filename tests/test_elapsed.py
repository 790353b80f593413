import time

import pytest

from concurrutils.elapsed import ElapsedTime, Measurement, elapsed_time, measure


class FakeClock:
    def __init__(self, *ticks):
        self._ticks = iter(ticks)

    def __call__(self):
        return next(self._ticks)


def test_stopwatch_in_nanoseconds():
    watch = ElapsedTime(clock=FakeClock(100, 107), unit="ns")
    watch.start()
    assert watch.stop() == 7


def test_stopwatch_truncates_to_milliseconds():
    watch = ElapsedTime(clock=FakeClock(0, 4_999_999), unit="ms")
    watch.start()
    assert watch.stop() == 4


def test_stopwatch_can_be_stopped_repeatedly():
    watch = ElapsedTime(clock=FakeClock(10, 15, 30), unit="ns")
    watch.start()
    first = watch.stop()
    second = watch.stop()
    assert first == 5
    assert second == 20
    assert second >= first


def test_stop_without_start_raises():
    watch = ElapsedTime()
    with pytest.raises(RuntimeError):
        watch.stop()


def test_unknown_unit_raises():
    with pytest.raises(ValueError):
        ElapsedTime(unit="fortnights")


def test_measure_records_elapsed():
    with measure(clock=FakeClock(50, 80), unit="ns") as m:
        pass
    assert m == Measurement(unit="ns", elapsed=30)


def test_measure_records_elapsed_when_block_raises():
    with pytest.raises(KeyError):
        with measure(clock=FakeClock(0, 12), unit="ns") as m:
            raise KeyError("boom")
    assert m.elapsed == 12


def test_measure_with_real_clock_is_not_negative():
    with measure(unit="ns") as m:
        time.sleep(0.001)
    assert m.elapsed >= 1_000_000


def test_elapsed_time_returns_result_and_duration():
    result, elapsed = elapsed_time(lambda a, b=0: a * 10 + b, 4, b=2)
    assert result == 42
    assert elapsed >= 0


def test_elapsed_time_propagates_exceptions():
    def failing():
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        elapsed_time(failing)