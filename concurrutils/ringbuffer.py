"""Bounded ring buffer of fixed-size blocks shared by producer and consumer threads."""

from __future__ import annotations

import itertools
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class Block:
    """One slot of the ring buffer: the elements actually stored in it."""

    data: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    @property
    def size(self) -> int:
        """Number of elements stored in the block."""
        return len(self.data)


class RingBuffer:
    """Producer-consumer buffer of ``blocks`` slots, each holding up to ``block_size`` elements.

    Writers block while every slot is full; readers block (or time out) while
    every slot is empty. Blocks are read in the order they were written.
    """

    def __init__(self, blocks: int, block_size: int) -> None:
        if blocks <= 0:
            raise ValueError("the number of blocks must be positive")
        if block_size <= 0:
            raise ValueError("the block size must be positive")
        self._blocks = blocks
        self._block_size = block_size
        self._lock = threading.Lock()
        self._free_slots = threading.Semaphore(blocks)
        self._filled_slots = threading.Semaphore(0)
        self._slots: deque[Block] = deque()

    @property
    def blocks(self) -> int:
        return self._blocks

    @property
    def block_size(self) -> int:
        return self._block_size

    def _put(self, block: Block) -> None:
        self._free_slots.acquire()  # wait on an empty slot
        with self._lock:
            self._slots.append(block)
        self._filled_slots.release()  # signal data readiness

    def _take(self, timeout: float | None) -> Block | None:
        if not self._filled_slots.acquire(timeout=timeout):
            return None
        with self._lock:
            block = self._slots.popleft()
        self._free_slots.release()
        return block

    def write(self, block: Block) -> None:
        """Store a whole block, waiting for a free slot if needed."""
        if not isinstance(block, Block):
            raise TypeError(f"expected a Block, got {type(block).__name__}")
        if block.size > self._block_size:
            raise ValueError(
                f"block holds {block.size} elements, more than the block size {self._block_size}"
            )
        self._put(block)

    def write_collection(self, collection: Iterable[Any]) -> int:
        """Store up to ``block_size`` elements of ``collection`` as one block.

        Returns the number of elements written.
        """
        block = Block(tuple(itertools.islice(collection, self._block_size)))
        self._put(block)
        return block.size

    def read(self, timeout: float | None = None) -> Block | None:
        """Take the oldest block; None if ``timeout`` seconds pass first."""
        return self._take(timeout)

    def read_into(self, collection: Any, timeout: float | None = None) -> bool:
        """Extend ``collection`` with the oldest block's elements; False on timeout."""
        block = self._take(timeout)
        if block is None:
            return False
        collection.extend(block.data)
        return True

    def read_bytes(self, size: int, timeout: float | None = None) -> bytes | None:
        """Take the oldest block as bytes, at most ``size`` of them; None on timeout."""
        if size < 0:
            raise ValueError("size must not be negative")
        block = self._take(timeout)
        if block is None:
            return None
        return bytes(block.data[:size])

    def is_empty(self) -> bool:
        """True when no block is waiting to be read."""
        with self._lock:
            return not self._slots