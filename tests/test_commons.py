import io
import re
import threading
from enum import Enum

import pytest

from concurrutils.commons import ConsoleLogger, class_lock, string_format, to_underlying


class Colour(Enum):
    RED = 1
    GREEN = 2


def test_string_format_substitutes_arguments():
    assert string_format("%s-%d", "a", 3) == "a-3"


def test_string_format_without_arguments_collapses_percent():
    assert string_format("100%%") == "100%"


def test_string_format_rejects_mismatched_argument():
    with pytest.raises(ValueError):
        string_format("%d", "not a number")


def test_string_format_rejects_missing_argument():
    with pytest.raises(ValueError):
        string_format("%s %s", "only one")


def test_to_underlying_returns_member_value():
    assert to_underlying(Colour.GREEN) == Colour.GREEN.value
    assert to_underlying(Colour.RED) == 1


def test_to_underlying_rejects_non_enum():
    with pytest.raises(TypeError):
        to_underlying(5)


def test_class_lock_is_shared_per_host():
    class A:
        pass

    class B:
        pass

    assert class_lock(A) is class_lock(A)
    assert class_lock(A) is not class_lock(B)


def test_class_lock_is_mutual_exclusion():
    class Host:
        pass

    lock = class_lock(Host)
    with lock:
        assert class_lock(Host).acquire(blocking=False) is False
    assert lock.acquire(blocking=False) is True
    lock.release()


def test_console_logger_log_plain_message():
    out = io.StringIO()
    ConsoleLogger(out).log("hello")
    assert out.getvalue() == "hello\n"


def test_console_logger_log_formatted_message():
    out = io.StringIO()
    ConsoleLogger(out).log("%s=%d", "a", 1)
    assert out.getvalue() == "a=1\n"


def test_console_logger_log_all_concatenates():
    out = io.StringIO()
    ConsoleLogger(out).log_all("a", 1, "b")
    assert out.getvalue() == "a1b"


def test_console_logger_bad_format_raises_and_writes_nothing():
    out = io.StringIO()
    with pytest.raises(ValueError):
        ConsoleLogger(out).log("%d", "x")
    assert out.getvalue() == ""


def test_console_logger_lines_stay_whole_under_concurrency():
    out = io.StringIO()
    logger = ConsoleLogger(out)

    def worker(n):
        for i in range(50):
            logger.log("thread-%d line-%d", n, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = out.getvalue().splitlines()
    assert len(lines) == 8 * 50
    assert all(re.fullmatch(r"thread-\d+ line-\d+", line) for line in lines)