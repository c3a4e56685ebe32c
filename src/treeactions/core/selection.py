"""
Identity-based selection set.

Items handed to actions are opaque user values; many of them (pydantic
models, dicts) are not hashable, so membership is tracked by `id()`.
"""

from collections.abc import Iterable, Iterator
from typing import Any


def uniq(items: Iterable[Any]) -> list[Any]:
    """
    Remove duplicate items by identity, keeping the first occurrence.

    Params:
        items: Items in the order they should appear

    Returns:
        A new list with each distinct object present once
    """
    seen: dict[int, Any] = {}
    for item in items:
        seen.setdefault(id(item), item)
    return list(seen.values())


class SelectionSet:
    """Mutable set of selected items compared by identity."""

    def __init__(self, items: Iterable[Any] = ()):
        self._items: dict[int, Any] = {}
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        self._items[id(item)] = item

    def discard(self, item: Any) -> None:
        self._items.pop(id(item), None)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: Any) -> bool:
        return id(item) in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self._items.values())!r})"
