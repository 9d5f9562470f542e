from handlekit.counter import SharedCounter
from handlekit.handle import Handle
from handlekit.key import (
    INDEX_MAX,
    Index,
    Key,
    KeyLike,
    OwnedLabel,
    StaticLabel,
    to_key,
)

__all__ = [
    "Handle",
    "Key",
    "KeyLike",
    "StaticLabel",
    "OwnedLabel",
    "Index",
    "INDEX_MAX",
    "to_key",
    "SharedCounter",
]
