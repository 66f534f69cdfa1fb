"""Fixed-size single-producer single-consumer ring buffer."""

from __future__ import annotations

from typing import Any


class SimpleSafeQueue:
    """Bounded FIFO queue, safe for one producer thread and one consumer thread."""

    def __init__(self, capacity: int = 64) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._size = capacity + 1
        self._buffer: list[Any] = [None] * self._size
        self._writer = 0
        self._reader = 0

    def _next(self, pos: int) -> int:
        pos += 1
        return 0 if pos == self._size else pos

    def push(self, value: Any) -> bool:
        """Append ``value``; return ``False`` if the queue is full."""
        writer = self._writer
        new_writer = self._next(writer)
        if new_writer == self._reader:
            return False
        self._buffer[writer] = value
        self._writer = new_writer
        return True

    def pop(self) -> Any:
        """Remove and return the oldest value; raise ``IndexError`` if empty."""
        reader = self._reader
        if self._writer == reader:
            raise IndexError("pop from empty queue")
        value = self._buffer[reader]
        self._buffer[reader] = None
        self._reader = self._next(reader)
        return value

    def __len__(self) -> int:
        return (self._writer - self._reader) % self._size