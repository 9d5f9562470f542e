# handlekit/debug/tracker.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from handlekit.counter import SharedCounter
from handlekit.handle import Handle
from handlekit.key import Key


@dataclass(frozen=True, slots=True)
class TrackedHandle:
    """Snapshot of one tracked handle family."""

    marker: type
    key: Key
    strength: int


@dataclass(slots=True)
class _Entry:
    marker: type
    key: Key
    count: SharedCounter


class HandleTracker:
    """
    Leak tracer for counted handles.

    Records the counter behind each tracked handle so that, at a checkpoint
    (end of a scene, shutdown), the handles that still have live clones can
    be listed. Uncounted handles are ignored.
    """

    def __init__(self) -> None:
        self._entries: List[_Entry] = []

    def track(self, handle: Handle[Any]) -> Handle[Any]:
        count = handle.count
        marker = handle.marker
        if count is None or marker is None:
            return handle

        if not any(entry.count is count for entry in self._entries):
            self._entries.append(_Entry(marker, handle.key, count))
        return handle

    def live(self) -> List[TrackedHandle]:
        snapshots = []
        for entry in self._entries:
            strength = entry.count.strength
            if strength > 0:
                snapshots.append(TrackedHandle(entry.marker, entry.key, strength))
        return snapshots

    def forget_released(self) -> int:
        """Drop entries whose counter reached zero. Returns how many."""
        before = len(self._entries)
        self._entries = [e for e in self._entries if not e.count.released]
        return before - len(self._entries)

    def report(self) -> int:
        live = self.live()
        for tracked in live:
            print(
                f"[handles] Handle[{tracked.marker.__name__}] "
                f"key={tracked.key!r} references={tracked.strength}"
            )
        print(f"[handles] {len(live)} live of {len(self._entries)} tracked")
        return len(live)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
