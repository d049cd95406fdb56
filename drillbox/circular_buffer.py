"""A fixed-capacity, thread-safe FIFO queue of integers."""

from __future__ import annotations

import threading
from collections import deque


class BufferFullError(Exception):
    """Raised when pushing onto a buffer that holds ``capacity`` items."""


class BufferEmptyError(Exception):
    """Raised when popping from a buffer that holds no items."""


class CircularBuffer:
    """A bounded first-in, first-out buffer safe to share between threads.

    Pushing onto a full buffer or popping from an empty one does not block;
    it raises :class:`BufferFullError` or :class:`BufferEmptyError` so the
    caller can decide whether to retry.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._items: deque[int] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """The largest number of items the buffer can hold."""
        return self._capacity

    def push(self, item: int) -> None:
        """Append ``item`` at the tail of the buffer."""
        with self._lock:
            if len(self._items) >= self._capacity:
                raise BufferFullError("the buffer is full")
            self._items.append(item)

    def pop(self) -> int:
        """Remove and return the item at the head of the buffer."""
        with self._lock:
            if not self._items:
                raise BufferEmptyError("the buffer is empty")
            return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True if the buffer holds no items."""
        with self._lock:
            return not self._items

    def is_full(self) -> bool:
        """Return True if the buffer holds ``capacity`` items."""
        with self._lock:
            return len(self._items) >= self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self)})"