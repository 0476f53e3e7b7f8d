"""Insertion-ordered set used for participant and service collection."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """Sequence of unique items kept in first-seen order."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: list[T] = []
        self._seen: set[T] = set()
        if items is not None:
            self.update(items)

    def add(self, item: T) -> bool:
        """Append ``item`` unless already present. Returns ``True`` if added."""
        if item in self._seen:
            return False
        self._seen.add(item)
        self._items.append(item)
        return True

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def index(self, item: T) -> int:
        return self._items.index(item)

    def __contains__(self, item: object) -> bool:
        return item in self._seen

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> T:
        return self._items[position]

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"OrderedSet({self._items!r})"


def unique_preserve_order(values: Iterable[Optional[str]]) -> list[str]:
    """Return the non-empty values of ``values`` without duplicates."""

    return list(OrderedSet(value for value in values if value))
