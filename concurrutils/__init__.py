"""Concurrency and utility building blocks: threads, queues, events, buffers, observers and loggers."""

__version__ = "0.1.0"

__all__ = [
    "aothread",
    "commons",
    "directory",
    "elapsed",
    "event",
    "expression",
    "filelogger",
    "filestream",
    "jobqueue",
    "logger",
    "observer",
    "producer_consumer",
    "ringbuffer",
    "wrapper",
]