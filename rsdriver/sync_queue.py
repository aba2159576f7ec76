"""A thread-safe FIFO queue with a timed pop."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class SyncQueue(Generic[T]):
    """FIFO queue shared between threads; pops return ``None`` when empty."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> int:
        """Append ``value`` and return the queue length afterwards."""
        with self._cond:
            self._queue.append(value)
            self._cond.notify()
            return len(self._queue)

    def pop(self) -> T | None:
        """Remove and return the oldest value, or ``None`` if the queue is empty."""
        with self._cond:
            return self._queue.popleft() if self._queue else None

    def pop_wait(self, usec: int) -> T | None:
        """Wait up to ``usec`` microseconds for a value; return it or ``None``."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._queue), timeout=usec / 1_000_000)
            return self._queue.popleft() if self._queue else None

    def clear(self) -> None:
        """Drop every queued value."""
        with self._cond:
            self._queue.clear()

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)