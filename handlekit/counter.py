# handlekit/counter.py
from __future__ import annotations

import threading


class SharedCounter:
    """
    Live-strength cell shared by every clone of one dynamic handle.

    Starts at 1 for the handle that created it. Acquire and release happen
    under a lock, so clones may be made and dropped from any thread.
    Once the strength reaches 0 the counter is released for good.
    """

    __slots__ = ("_lock", "_strength")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._strength = 1

    @property
    def strength(self) -> int:
        with self._lock:
            return self._strength

    @property
    def released(self) -> bool:
        with self._lock:
            return self._strength == 0

    def acquire(self) -> int:
        """Add one owner and return the new strength."""
        with self._lock:
            if self._strength == 0:
                raise RuntimeError("Cannot acquire a released counter")
            self._strength += 1
            return self._strength

    def release(self) -> int:
        """Drop one owner and return the new strength."""
        with self._lock:
            if self._strength == 0:
                raise RuntimeError("Counter already released")
            self._strength -= 1
            return self._strength

    def __repr__(self) -> str:
        return f"SharedCounter(strength={self.strength})"
