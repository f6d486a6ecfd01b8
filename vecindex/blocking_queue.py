"""A bounded FIFO queue whose readers and writers block."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 32


class BlockingQueue(Generic[T]):
    """FIFO queue: ``put`` waits while full, reads wait while empty."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._items: deque[T] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)
        self._capacity = DEFAULT_CAPACITY
        self.set_capacity(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def put(self, item: T) -> None:
        """Append ``item``, waiting for room if the queue is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._items) < self._capacity)
            self._items.append(item)
            self._not_empty.notify_all()

    def take(self) -> T:
        """Remove and return the oldest item, waiting for one if needed."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._not_full.notify_all()
            return item

    def front(self) -> T:
        """Return the oldest item without removing it, waiting if empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items[0]

    def back(self) -> T:
        """Return the newest item without removing it, waiting if empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items[-1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity; values that are not positive are ignored."""
        with self._not_full:
            if capacity > 0:
                self._capacity = capacity
                self._not_full.notify_all()