# handlekit/handle.py
from __future__ import annotations

from typing import Any, ClassVar, Dict, Generic, Self, Tuple, Type, TypeVar

from handlekit.counter import SharedCounter
from handlekit.key import Key, KeyLike, StaticLabel, to_key

T = TypeVar("T")  # Marker naming the resource category (MeshData, TextureData)


class Handle(Generic[T]):
    """
    Lightweight, typed reference to an externally stored object.
    Holding this does not guarantee that the object exists.

    Handles compare and hash by key only. Subscripting with a marker class
    (``Handle[MeshData]``) returns a cached subclass for that category, so
    handles of different categories never compare equal.

    Dynamic handles (``new``) carry a SharedCounter that every clone shares.
    Static handles (``from_static``) are never counted.
    """

    __slots__ = ("_key", "_count")

    marker: ClassVar[type | None] = None
    _specialized: ClassVar[Dict[Tuple[type, type], Type[Handle[Any]]]] = {}

    def __class_getitem__(cls, item: Any) -> Any:
        if isinstance(item, TypeVar):
            return super().__class_getitem__(item)  # type: ignore[misc]

        if cls.marker is not None:
            raise TypeError(f"{cls.__name__} is already specialized")

        if not isinstance(item, type):
            raise TypeError(
                f"handle marker must be a class, not {type(item).__name__}"
            )

        specialized = cls._specialized.get((cls, item))
        if specialized is None:
            name = f"{cls.__name__}[{item.__name__}]"
            specialized = type(
                name,
                (cls,),
                {"__slots__": (), "__module__": cls.__module__, "marker": item},
            )
            specialized.__qualname__ = name
            specialized = cls._specialized.setdefault((cls, item), specialized)
        return specialized

    def __init__(self, key: Key, *, count: SharedCounter | None = None) -> None:
        """
        Adopt ``key`` and, when given, one existing stake in ``count``.

        Prefer ``new``, ``from_static`` and ``clone``.
        """
        if type(self).marker is None:
            raise TypeError(
                "Handle needs a marker type, e.g. Handle[MeshData].new(...)"
            )
        if not isinstance(key, Key):
            raise TypeError(f"key must be Key, not {type(key).__name__}")

        self._key = key
        self._count = count

    @classmethod
    def new(cls, k: KeyLike) -> Self:
        """Counted handle for anything convertible to a Key."""
        return cls(to_key(k), count=SharedCounter())

    @classmethod
    def from_static(cls, key: str) -> Self:
        """Uncounted handle for a label fixed at import time."""
        return cls(StaticLabel(key))

    @property
    def key(self) -> Key:
        return self._key

    @property
    def count(self) -> SharedCounter | None:
        return self._count

    @property
    def tracked(self) -> bool:
        return self._count is not None

    @property
    def strength(self) -> int | None:
        """Live clones sharing this handle's counter, None if untracked."""
        if self._count is None:
            return None
        return self._count.strength

    def clone(self) -> Self:
        count = self._count
        if count is not None:
            count.acquire()
        return type(self)(self._key, count=count)

    def release(self) -> None:
        """Give back this handle's stake in the counter. Idempotent."""
        count = self._count
        if count is None:
            return
        self._count = None
        count.release()

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> Self:
        return self.clone()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_count", None) is not None:
            self.release()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Handle) or other.marker is not self.marker:
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        marker = self.marker
        name = "?" if marker is None else marker.__name__
        references: Any = "untracked" if self._count is None else self.strength
        return f"Handle[{name}](key={self._key!r}, references={references})"
