# concurrutils

A small toolbox of concurrency and utility building blocks, written
with the standard library only.

## What is inside

| Module | What it offers |
| --- | --- |
| `concurrutils.commons` | `string_format` (printf-style, raises `ValueError` on a bad format), `to_underlying`, `class_lock`, and a `ConsoleLogger` whose writes share one class-level lock |
| `concurrutils.jobqueue` | `JobQueue`, a thread-safe FIFO of jobs whose results come back as `concurrent.futures.Future`s |
| `concurrutils.aothread` | `AOThread` (started on construction) and `TaskThread` (started with `start()`), threads that run queued jobs one by one; stopping cancels jobs still queued |
| `concurrutils.event` | `Event`, with optional auto reset, `notify`, `broadcast` and `reset`, and `EventWait`, the outcome of `wait_for(timeout_ms)` |
| `concurrutils.filestream` | `FileStream`, `OutputFileStream` and `InputFileStream` for binary or text files |
| `concurrutils.elapsed` | `ElapsedTime`, the `measure` context manager and `elapsed_time`; units `ns`, `us`, `ms`, `s` |
| `concurrutils.directory` | `Directory`, which scans a tree in a background thread on first use and caches its subdirectories and files |
| `concurrutils.filelogger` | `DataLogger` and `FileLogger`, which collects chunks in a fixed-size cache and flushes it to an `OutputFileStream` from a background thread |
| `concurrutils.logger` | `Verbosity`, `Logger`, `CoutLogger`, `LoggingMerge`, `to_str`, `append_subchannels` and `generate_log_tag` |
| `concurrutils.wrapper` | `LoggerWrapper`, with trace, debug, info, warning and error helpers |
| `concurrutils.ringbuffer` | `RingBuffer` of fixed-size `Block`s for producer/consumer hand-off, with timed reads in seconds |
| `concurrutils.observer` | `Observer`, `Observable`, `MappedObservable`, `map_observable` and a sample `Person` |
| `concurrutils.producer_consumer` | `AudioDataResult`, `producer`, `consumer` and `format_container`: a generator-driven hand-off of chunks |
| `concurrutils.expression` | Lazily evaluated `Expression` and `BinaryExpression`, `StrongType`, `add_strong`, `plus`, `minus`, `Radian` and `to_degrees` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A few examples

Run jobs in the background, one after another:

```python
from concurrutils.aothread import AOThread

with AOThread("worker") as worker:
    future = worker.enqueue(sum, [1, 2, 3])
    print(future.result())  # 6
```

Wait for an event with a timeout given in milliseconds:

```python
from concurrutils.event import Event, EventWait

event = Event(auto_reset=True)
if event.wait_for(100) is EventWait.TIMEOUT:
    print("nothing happened")
```

Tag and filter log messages (messages below `INFO` are dropped by default;
errors always go to standard error):

```python
from concurrutils.logger import CoutLogger, Verbosity, generate_log_tag

logger = CoutLogger(generate_log_tag("app", "net", "tcp"))
logger.log(Verbosity.INFO, "connected")  # <app:net.tcp>: connected
```

Observe values as they are emitted. Subscriptions are held weakly, so keep
the object `subscribe` returns for as long as you want to receive values:

```python
from concurrutils.observer import Observable, Observer

observable = Observable()
subscription = observable.subscribe(Observer(print))
observable.notify("hello")
```

## Commands

List the subdirectories and files found under one or more roots (the
current directory when none is given):

```
concurrutils-dir [PATH ...]
```

Run the producer/consumer demonstration, where a consumer on another thread
prints each chunk a producer hands out until an empty chunk ends the
exchange. The chunk defaults to `1 2 3 4` and is produced five times:

```
concurrutils-audio [N ...] [--rounds ROUNDS]
```

## What it does not do

Threads are plain Python threads: there is no control over scheduling
policy, thread priority or CPU affinity. Loggers write only to text streams
such as standard output and standard error; there is no system log target.