from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar('T')


class CyclicSelector(Generic[T]):
    """
    A fixed, non-empty set of candidates with one active entry.

    ``advance`` moves to the next candidate and wraps from the last back to
    the first. Instances are immutable; ``advance`` returns a new selector.
    """

    __slots__ = ('_values', '_index')

    def __init__(self, values: Iterable[T], index: int = 0) -> None:
        values = tuple(values)
        if not values:
            raise ValueError("CyclicSelector needs at least one value")
        if not 0 <= index < len(values):
            raise ValueError(f"Initial index {index} out of range for {len(values)} values")
        self._values = values
        self._index = index

    @classmethod
    def restore(cls, values: Iterable[T], value: T | None = None) -> CyclicSelector[T]:
        """Start at ``value`` if it is one of ``values``, else at the first entry."""
        values = tuple(values)
        index = values.index(value) if value is not None and value in values else 0
        return cls(values, index)

    @property
    def values(self) -> tuple[T, ...]:
        return self._values

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> T:
        return self._values[self._index]

    def advance(self) -> CyclicSelector[T]:
        return CyclicSelector(self._values, (self._index + 1) % len(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, CyclicSelector):
            return self._values == other._values and self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._values, self._index))

    def __repr__(self) -> str:
        return f"CyclicSelector({list(self._values)!r}, index={self._index})"
