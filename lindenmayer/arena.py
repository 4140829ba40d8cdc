"""An append-only arena handing out stable integer handles.

Tokens, rule tables and axioms all refer to each other through
:class:`ArenaId` values instead of object references, so there is never any
question of who owns what.

    >>> arena = Arena()
    >>> u = arena.push(1)
    >>> v = arena.push(2)
    >>> len(arena)
    2
    >>> arena.get(u)
    1
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class ArenaId:
    """Opaque handle for one entry of an :class:`Arena`."""

    index: int

    def __repr__(self) -> str:
        return f"ArenaId({self.index})"


class Arena(Generic[T]):
    """A thin wrapper around a list that never removes or reorders entries."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Arena({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: T) -> ArenaId:
        """Append ``value`` and return the id that now refers to it."""
        self._items.append(value)
        return ArenaId(len(self._items) - 1)

    def is_valid(self, id: ArenaId) -> bool:
        """True if ``id`` refers to an entry of this arena."""
        return isinstance(id, ArenaId) and 0 <= id.index < len(self._items)

    def is_valid_slice(self, ids: Iterable[ArenaId]) -> bool:
        return all(self.is_valid(id) for id in ids)

    def get(self, id: ArenaId) -> T | None:
        """Return the entry for ``id``, or ``None`` if the id is out of range."""
        if not self.is_valid(id):
            return None
        return self._items[id.index]

    def set(self, id: ArenaId, value: T) -> bool:
        """Replace the entry for ``id``.

        Returns ``False`` (and changes nothing) if the id is out of range.
        """
        if not self.is_valid(id):
            return False
        self._items[id.index] = value
        return True

    def enumerate(self) -> Iterator[tuple[ArenaId, T]]:
        """Yield ``(id, entry)`` pairs in insertion order."""
        for index, item in enumerate(self._items):
            yield ArenaId(index), item
