"""Thread-safe queues connecting producers, dispatcher, editors and screen."""

from __future__ import annotations

import threading
from collections import Counter, deque
from typing import Deque, Optional

from .item import Item
from .semaphore import CountingSemaphore


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"queue size must be positive, got {size}")


class UnboundedQueue:
    """A FIFO of articles with no limit on its length.

    ``done`` is set once nothing more will be enqueued.
    """

    def __init__(self) -> None:
        self._items: Deque[Item] = deque()
        self._lock = threading.Lock()
        self.done = False

    def enqueue(self, item: Item) -> None:
        """Append an article at the tail."""
        with self._lock:
            self._items.append(item)

    def dequeue(self) -> Optional[Item]:
        """Remove and return the head article, or None if the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def is_empty(self) -> bool:
        """Whether the queue holds no articles."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class ProducerQueue:
    """A fixed-size FIFO of article categories written by one producer.

    ``done`` is set when the producer has enqueued everything; ``drained``
    when the dispatcher has taken everything out.  ``counters`` counts the
    articles dispatched per category.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._items: Deque[int] = deque()
        self._cond = threading.Condition()
        self.counters: Counter[str] = Counter()
        self.done = False
        self.drained = False

    def enqueue(self, item: int) -> None:
        """Append a value, blocking while the queue is full."""
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) < self.size)
            self._items.append(item)

    def dequeue(self) -> Optional[int]:
        """Remove and return the head value, or None if the queue is empty."""
        with self._cond:
            if not self._items:
                return None
            item = self._items.popleft()
            self._cond.notify()
            return item

    def is_empty(self) -> bool:
        """Whether the queue holds no values."""
        with self._cond:
            return not self._items

    def is_full(self) -> bool:
        """Whether the queue holds as many values as its size."""
        with self._cond:
            return len(self._items) == self.size

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


class BoundedBuffer:
    """A fixed-size FIFO of screen lines guarded by two counting semaphores.

    ``finished_editors`` counts the co-editors that have stopped writing.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._items: Deque[str] = deque()
        self._lock = threading.Lock()
        self._free = CountingSemaphore(size)
        self._used = CountingSemaphore(0)
        self.finished_editors = 0

    def insert(self, text: str) -> None:
        """Append a line, blocking while the buffer is full."""
        self._free.wait()
        with self._lock:
            self._items.append(text)
        self._used.signal()

    def remove(self) -> str:
        """Remove and return the head line, blocking while the buffer is empty."""
        self._used.wait()
        with self._lock:
            text = self._items.popleft()
        self._free.signal()
        return text

    def is_empty(self) -> bool:
        """Whether the buffer holds no lines."""
        with self._lock:
            return not self._items

    def is_full(self) -> bool:
        """Whether the buffer holds as many lines as its size."""
        with self._lock:
            return len(self._items) == self.size

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)