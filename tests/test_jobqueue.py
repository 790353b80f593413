import threading

import pytest

from concurrutils.jobqueue import JobQueue


def test_enqueue_then_dequeue_delivers_result():
    queue = JobQueue()
    future = queue.enqueue(lambda: "done")
    task = queue.dequeue()
    task()
    assert future.result(timeout=5) == "done"


def test_arguments_are_bound_to_job():
    queue = JobQueue()
    future = queue.enqueue(lambda a, b: (a, b), 1, 2)
    queue.dequeue()()
    assert future.result(timeout=5) == (1, 2)


def test_jobs_come_out_in_fifo_order():
    queue = JobQueue()
    futures = [queue.enqueue(lambda i=i: i) for i in range(5)]
    assert len(queue) == 5
    for _ in range(5):
        queue.dequeue()()
    assert [f.result(timeout=5) for f in futures] == list(range(5))
    assert len(queue) == 0


def test_exception_is_stored_in_future():
    queue = JobQueue()

    def fail():
        raise KeyError("missing")

    future = queue.enqueue(fail)
    queue.dequeue()()
    with pytest.raises(KeyError):
        future.result(timeout=5)


def test_dequeue_blocks_until_job_arrives():
    queue = JobQueue()
    seen = []

    def consumer():
        task = queue.dequeue()
        seen.append(task is not None)
        task()

    t = threading.Thread(target=consumer)
    t.start()
    future = queue.enqueue(lambda: "late")
    t.join(5)
    assert seen == [True]
    assert future.result(timeout=5) == "late"


def test_stop_wakes_blocked_dequeue_with_none():
    queue = JobQueue()
    timer = threading.Timer(0.05, queue.stop)
    timer.start()
    task = queue.dequeue()
    timer.join(5)
    assert task is None
    assert len(queue) == 0


def test_stop_cancels_pending_and_dequeue_returns_none():
    queue = JobQueue()
    future = queue.enqueue(lambda: "never")
    queue.stop()
    assert future.cancelled()
    assert len(queue) == 0
    assert queue.dequeue() is None


def test_enqueue_after_stop_is_cancelled():
    queue = JobQueue()
    queue.stop()
    future = queue.enqueue(lambda: "never")
    assert future.cancelled()
    assert len(queue) == 0