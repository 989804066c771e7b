from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, overload

from hexboard.engine.errors import CapacityError

T = TypeVar("T")


class ArrayVec(Generic[T]):
    """Growable sequence backed by a fixed number of preallocated slots.

    Used where a relationship count is small and capped by board geometry
    (a settle place touches at most three roads). Going past the cap means the
    geometry is broken, so ``push`` raises instead of growing.
    """

    __slots__ = ("capacity", "_slots", "_size")

    def __init__(self, capacity: int, items: Optional[Iterable[T]] = None):
        if capacity < 0 or capacity > 255:
            raise ValueError(f"capacity must be in [0, 255], got {capacity}")
        self.capacity = capacity
        self._slots: List[Any] = [None] * capacity
        self._size = 0
        for item in items or ():
            self.push(item)

    def push(self, item: T) -> None:
        if self._size >= self.capacity:
            raise CapacityError(
                "inline collection is full",
                {"capacity": self.capacity, "item": item},
            )
        self._slots[self._size] = item
        self._size += 1

    def clear(self) -> None:
        # only the initialised prefix holds references
        for i in range(self._size):
            self._slots[i] = None
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def as_tuple(self) -> Tuple[T, ...]:
        return tuple(self._slots[: self._size])

    def __len__(self) -> int:
        return self._size

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[T, ...]: ...

    def __getitem__(self, index):
        return self.as_tuple()[index]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[i]

    def __contains__(self, item: object) -> bool:
        return item in self.as_tuple()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayVec):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, (tuple, list)):
            return self.as_tuple() == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ArrayVec({self.capacity}, {list(self)!r})"
