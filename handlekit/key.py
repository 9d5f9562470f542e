# handlekit/key.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

import numpy as np

INDEX_MAX = 2**64 - 1  # widest unsigned index a key may carry


class Key:
    """
    Identity value a handle is compared and hashed by.

    Closed set of variants: StaticLabel, OwnedLabel and Index.
    Equality is variant-sensitive, so StaticLabel("x") != OwnedLabel("x").
    """

    __slots__ = ()

    tag: ClassVar[str]

    @staticmethod
    def of(value: KeyLike) -> Key:
        """Convert a str, unsigned int or existing Key into a Key."""
        return to_key(value)


@dataclass(frozen=True, slots=True)
class StaticLabel(Key):
    """Label known at import time. Interned, never copied."""

    tag: ClassVar[str] = "static"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"static label must be str, not {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", sys.intern(self.value))

    def __hash__(self) -> int:
        return hash((self.tag, self.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OwnedLabel(Key):
    """Label built at runtime."""

    tag: ClassVar[str] = "owned"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"owned label must be str, not {type(self.value).__name__}"
            )
        # str subclasses are flattened to a plain str copy
        object.__setattr__(self, "value", str(self.value))

    def __hash__(self) -> int:
        return hash((self.tag, self.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Index(Key):
    """Dense unsigned numeric identifier."""

    tag: ClassVar[str] = "index"

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, (bool, np.bool_)) or not isinstance(
            self.value, (int, np.integer)
        ):
            raise TypeError(
                f"index must be an unsigned int, not {type(self.value).__name__}"
            )
        value = int(self.value)
        if value < 0 or value > INDEX_MAX:
            raise ValueError(value)
        object.__setattr__(self, "value", value)

    def __hash__(self) -> int:
        return hash((self.tag, self.value))

    def __str__(self) -> str:
        return str(self.value)


KeyLike: TypeAlias = Key | str | int | np.integer[Any]


def to_key(value: KeyLike) -> Key:
    """
    Convert a value into a Key.

    - Key: returned unchanged.
    - str: OwnedLabel. Static labels are only made explicitly.
    - int / NumPy integer scalar: Index.
    """
    if isinstance(value, Key):
        return value

    if isinstance(value, str):
        return OwnedLabel(value)

    if isinstance(value, (int, np.integer)) and not isinstance(
        value, (bool, np.bool_)
    ):
        return Index(int(value))

    raise TypeError(
        f"key must be str, unsigned int or Key, not {type(value).__name__}"
    )
