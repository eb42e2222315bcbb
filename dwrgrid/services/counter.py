"""Process-wide monotonic identifier source.

Handlers run on the server's worker threads, so ``next()`` serialises the
read-and-increment behind a ``threading.Lock``: no two callers ever receive
the same value.
"""

from __future__ import annotations

import threading


class IdCounter:
    """Thread-safe get-and-increment counter.

    Args:
        start: First value handed out by ``next()``.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the current value and advance the counter by one."""
        with self._lock:
            value = self._value
            self._value += 1
        return value

    def peek(self) -> int:
        """Return the value the next call to ``next()`` will hand out."""
        with self._lock:
            return self._value
