"""Value types produced by the dump codec."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class _Null:
    """Singleton for the ``NULL`` / ``N;`` value."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False


Null = _Null()


@dataclass(slots=True)
class DBool:
    value: bool


@dataclass(slots=True)
class DInt:
    value: int


@dataclass(slots=True)
class DFloat:
    value: float


@dataclass(slots=True)
class DString:
    value: str

    @property
    def length(self) -> int:
        """Byte length of the UTF-8 encoded value."""
        return len(self.value.encode("utf-8"))


@dataclass(slots=True)
class DEntry:
    key: str  # integer keys are kept as their decimal text
    value: "DumpValue"


@dataclass(slots=True)
class DArray:
    entries: list[DEntry] = field(default_factory=list)

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]


@dataclass(slots=True)
class DObject:
    class_name: str
    entries: list[DEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


DumpValue = Union[_Null, DBool, DInt, DFloat, DString, DArray, DObject]


def to_native(value: DumpValue):
    """Convert a DumpValue tree into plain Python objects.

    Arrays become dicts (later duplicate keys win). Objects become dicts
    with the class name stored under ``"__class__"``.
    """
    if isinstance(value, _Null):
        return None
    if isinstance(value, (DBool, DInt, DFloat, DString)):
        return value.value
    if isinstance(value, DArray):
        return {e.key: to_native(e.value) for e in value.entries}
    if isinstance(value, DObject):
        members = {"__class__": value.class_name}
        members.update((e.key, to_native(e.value)) for e in value.entries)
        return members
    raise TypeError(f"not a dump value: {value!r}")
