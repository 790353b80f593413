"""Producer and consumer that hand chunks of data to each other, one at a time."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Any, Generator, Iterable, TextIO


def format_container(container: Iterable[Any]) -> str:
    """Render the elements as ``[a, b, c]``; bytes are shown as numbers."""
    return "[" + ", ".join(str(item) for item in container) + "]"


class AudioDataResult:
    """Handle on a running producer.

    The producer runs up to its first chunk as soon as the handle is made. It
    then stays suspended until the consumer takes the chunk with ``data`` and
    calls ``resume``.
    """

    def __init__(self, generator: Generator[Iterable[Any], None, None]) -> None:
        self._generator = generator
        self._lock = threading.Lock()
        self._value: list[Any] = []
        self._ready = False
        self._done = False
        with self._lock:
            self._advance()

    def _advance(self) -> None:
        try:
            value = next(self._generator)
        except StopIteration:
            self._done = True
            self._ready = False
            self._value = []
            return
        self._value = list(value)
        self._ready = True

    def resume(self) -> None:
        """Let the producer run to its next chunk; nothing happens once it is done."""
        with self._lock:
            if not self._done:
                self._advance()

    def data(self) -> list[Any]:
        """Take the chunk the producer has ready; raise RuntimeError if there is none."""
        with self._lock:
            if not self._ready:
                raise RuntimeError("no data ready: the producer must be resumed first")
            value, self._value = self._value, []
            self._ready = False
            return value

    def done(self) -> bool:
        """True once the producer has finished."""
        return self._done


def _produce(data: list[Any], rounds: int) -> Generator[list[Any], None, None]:
    for _ in range(rounds):
        yield list(data)
    yield []  # an empty chunk tells the consumer to stop


def producer(data: Iterable[Any], rounds: int = 5) -> AudioDataResult:
    """Start a producer that hands out ``data`` ``rounds`` times, then an empty chunk."""
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    return AudioDataResult(_produce(list(data), rounds))


def consumer(result: AudioDataResult, out: TextIO | None = None) -> list[list[Any]]:
    """Take chunks from ``result`` until an empty one arrives; return those received."""
    stream = out if out is not None else sys.stdout
    received: list[list[Any]] = []
    while True:
        chunk = result.data()
        if not chunk:
            stream.write("No data - exit!\n")
            break
        stream.write("Data received:" + format_container(chunk) + "\n")
        received.append(chunk)
        result.resume()
    return received


def main(argv: list[str] | None = None) -> int:
    """Run a producer and a consumer on another thread and print what passes between them."""
    parser = argparse.ArgumentParser(description="Hand chunks of data from a producer to a consumer.")
    parser.add_argument("data", nargs="*", type=int, default=[1, 2, 3, 4], help="the chunk to produce")
    parser.add_argument("--rounds", type=int, default=5, help="how many times to produce the chunk")
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    result = producer(args.data, args.rounds)
    thread = threading.Thread(target=consumer, args=(result, sys.stdout))
    thread.start()
    thread.join()
    print("bye-bye!")
    return 0