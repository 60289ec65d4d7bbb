"""
Ordered, immutable collection with explicit transitions.

Used for both the palette (color literals) and the shade list (levels).
Every mutator returns a new collection and leaves the receiver untouched,
so anything derived from an old value stays consistent with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, Union, overload

from ..errors import IndexOutOfRange

T = TypeVar('T')


@dataclass(frozen=True)
class Append(Generic[T]):
    value: T


@dataclass(frozen=True)
class ReplaceAt(Generic[T]):
    index: int
    value: T


@dataclass(frozen=True)
class RemoveAt:
    index: int


Action = Union[Append, ReplaceAt, RemoveAt]


class OrderedCollection(Generic[T]):
    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    # ------------------ TRANSITIONS ------------------
    def append(self, value: T) -> OrderedCollection[T]:
        return OrderedCollection(self._items + (value,))

    def replace_at(self, index: int, value: T) -> OrderedCollection[T]:
        """
        Return a copy with the item at ``index`` replaced.

        Raises:
            IndexOutOfRange: If ``index`` is not in [0, len)
        """
        self._check_index(index)
        return OrderedCollection(self._items[:index] + (value,) + self._items[index + 1:])

    def remove_at(self, index: int) -> OrderedCollection[T]:
        """
        Return a copy without the item at ``index``.

        Raises:
            IndexOutOfRange: If ``index`` is not in [0, len)
        """
        self._check_index(index)
        return OrderedCollection(self._items[:index] + self._items[index + 1:])

    def apply(self, action: Action) -> OrderedCollection[T]:
        """``(state, action) -> state`` form of the three transitions."""
        if isinstance(action, Append):
            return self.append(action.value)
        if isinstance(action, ReplaceAt):
            return self.replace_at(action.index, action.value)
        if isinstance(action, RemoveAt):
            return self.remove_at(action.index)
        raise TypeError(f"Unknown collection action: {action!r}")

    # ------------------ READ ACCESS ------------------
    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def at(self, index: int) -> T:
        """Like indexing, but only accepts [0, len) and raises IndexOutOfRange."""
        self._check_index(index)
        return self._items[index]

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedCollection):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"OrderedCollection({list(self._items)!r})"
