"""A fixed-capacity sequence that refuses to grow past its maximum size."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Collection(Generic[T]):
    """An ordered container of at most ``max_size`` elements.

    Appending needs a free slot. Extending or assigning needs the resulting
    size to stay strictly below ``max_size``.
    """

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._max_size = max_size
        self._items: list[T] = []

    @property
    def max_size(self) -> int:
        return self._max_size

    def __getitem__(self, index: int) -> T:
        size = len(self._items)
        if not -size <= index < size:
            raise IndexError(f"collection index out of range (size {size})")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def append(self, element: T) -> None:
        """Add one element at the end."""
        if len(self._items) >= self._max_size:
            raise OverflowError(f"collection is full (max size {self._max_size})")
        self._items.append(element)

    def extend(self, other: Iterable[T]) -> None:
        """Add every element of ``other`` at the end."""
        items = list(other)
        if len(self._items) + len(items) >= self._max_size:
            raise OverflowError(
                f"cannot add {len(items)} elements to {len(self._items)} "
                f"(max size {self._max_size})"
            )
        self._items.extend(items)

    def assign(self, other: Iterable[T]) -> None:
        """Replace the contents with the elements of ``other``."""
        items = list(other)
        if len(items) >= self._max_size:
            raise OverflowError(
                f"cannot hold {len(items)} elements (max size {self._max_size})"
            )
        self._items = items

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def __repr__(self) -> str:
        return f"Collection(max_size={self._max_size}, items={self._items!r})"