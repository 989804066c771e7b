"""Type-safe wrappers around ints.

Every entity on the board is referred to by a typed handle instead of a bare int,
so a ``RelationTable[RoadID, ...]`` can't be indexed with a ``SettlePlaceID`` by
accident. Handles of different kinds never compare equal.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

from hexboard.engine.errors import IDOverflowError

IdT = TypeVar("IdT", bound="EntityID")


@dataclass(frozen=True, order=True)
class EntityID:
    value: int

    BITS: ClassVar[int] = 8

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{type(self).__name__} needs an int, got {self.value!r}")
        if self.value < 0 or self.value > self.max_value():
            raise IDOverflowError(
                f"{type(self).__name__} out of range",
                {"value": self.value, "max": self.max_value()},
            )

    @classmethod
    def max_value(cls) -> int:
        return (1 << cls.BITS) - 1

    @classmethod
    def from_index(cls: Type[IdT], index: int) -> IdT:
        return cls(index)

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class TileID(EntityID):
    BITS = 8


class RoadID(EntityID):
    BITS = 16


class SettlePlaceID(EntityID):
    BITS = 16


class PlayerID(EntityID):
    BITS = 8


class DiceMarkerID(EntityID):
    BITS = 8
