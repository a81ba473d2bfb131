"""Variable-length arrays of plain values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class VarLenArray(Generic[T]):
    """An immutable, variable-length sequence of values.

    The items are copied on construction, so later changes to the source
    iterable are not reflected in the array.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)

    @classmethod
    def from_slice(cls, items: Iterable[T]) -> "VarLenArray[T]":
        """Build an array holding a copy of ``items``."""
        return cls(items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True if the array holds no items."""
        return not self._items

    def as_slice(self) -> tuple[T, ...]:
        """Return the items as a tuple."""
        return self._items

    def to_list(self) -> list[T]:
        """Return a new list with the items."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "VarLenArray[T]": ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VarLenArray):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return repr(list(self._items))