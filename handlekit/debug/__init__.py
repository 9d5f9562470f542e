from handlekit.debug.tracker import HandleTracker, TrackedHandle

__all__ = [
    "HandleTracker",
    "TrackedHandle",
]
