"""Semaphores built on a condition variable."""

from __future__ import annotations

import threading


class BinarySemaphore:
    """A semaphore whose waiters block while its value is not positive."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._cond = threading.Condition()

    @property
    def value(self) -> int:
        """The current value of the semaphore."""
        with self._cond:
            return self._value

    def wait(self) -> None:
        """Block until the value is positive, then decrement it."""
        with self._cond:
            self._cond.wait_for(lambda: self._value > 0)
            self._value -= 1

    def signal(self) -> None:
        """Increment the value and wake one waiter."""
        with self._cond:
            self._value += 1
            self._cond.notify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value})"


class CountingSemaphore(BinarySemaphore):
    """A semaphore counting available slots of a shared resource."""

    def wait(self) -> None:
        """Block until a slot is available, then take it."""
        super().wait()

    def signal(self) -> None:
        """Release one slot and wake one waiter."""
        super().signal()