"""Process-local block height source for callers that do not supply one."""

from __future__ import annotations

from threading import Lock


class BlockHeightRegression(ValueError):
    """Raised when a supplied block height is below the clock's current height."""


class BlockClock:
    """Monotonic block height counter."""

    def __init__(self, start_height: int = 0) -> None:
        if start_height < 0:
            raise ValueError("start_height must be non-negative")
        self._height = start_height
        self._lock = Lock()

    def current(self) -> int:
        with self._lock:
            return self._height

    def advance(self) -> int:
        """Move to the next block and return its height."""

        with self._lock:
            self._height += 1
            return self._height

    def observe(self, height: int) -> int:
        """Accept an externally supplied height, keeping the clock monotonic."""

        with self._lock:
            if height < self._height:
                raise BlockHeightRegression(
                    f"block height {height} is below current height {self._height}"
                )
            self._height = height
            return height
