from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

from hexboard.engine.ids import EntityID

K = TypeVar("K", bound=EntityID)
V = TypeVar("V")


class RelationTable(Generic[K, V]):
    """Dense arena mapping every ID of one kind to a value.

    IDs are handed out by ``push`` and equal the table length at insertion, so
    insertion order is ID order. There is no removal.
    """

    __slots__ = ("key_type", "_values")

    def __init__(self, key_type: Type[K], values: Optional[Iterable[V]] = None):
        self.key_type = key_type
        self._values: List[V] = []
        for v in values or ():
            self.push(v)

    def push(self, value: V) -> K:
        key = self.key_type.from_index(len(self._values))
        self._values.append(value)
        return key

    def _slot(self, key: K) -> int:
        if type(key) is not self.key_type:
            raise TypeError(f"{self.key_type.__name__} table indexed with {key!r}")
        idx = key.value
        if idx >= len(self._values):
            raise IndexError(f"{key!r} out of range for table of {len(self._values)}")
        return idx

    def __getitem__(self, key: K) -> V:
        return self._values[self._slot(key)]

    def __setitem__(self, key: K, value: V) -> None:
        self._values[self._slot(key)] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelationTable):
            return NotImplemented
        return self.key_type is other.key_type and self._values == other._values

    def __repr__(self) -> str:
        return f"RelationTable[{self.key_type.__name__}]({self._values!r})"

    def ids(self) -> Iterator[K]:
        for i in range(len(self._values)):
            yield self.key_type.from_index(i)

    def values(self) -> List[V]:
        return list(self._values)

    def items(self) -> Iterator[Tuple[K, V]]:
        for i, v in enumerate(self._values):
            yield self.key_type.from_index(i), v
