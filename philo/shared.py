"""Lock-protected values shared between threads, and spin waits on them."""

from __future__ import annotations

import threading
import time
from typing import Generic, TypeVar

T = TypeVar("T")


class Guarded(Generic[T]):
    """A value whose every read and write happens under its own lock."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def increment(self) -> T:
        """Add one to the value atomically and return the result."""
        with self._lock:
            self._value += 1
            return self._value

    def __repr__(self) -> str:
        return f"Guarded({self.get()!r})"


def wait_threads_ready(ready: Guarded[bool]) -> None:
    """Spin until ``ready`` holds a true value."""
    while not ready.get():
        time.sleep(0)


def wait_threads_running(running: Guarded[int], count: int) -> None:
    """Spin until ``running`` equals ``count``."""
    while running.get() != count:
        time.sleep(0)