from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTokenError


@dataclass(frozen=True)
class Token:
    """A grammar symbol.

    The arena owning a token is the only holder of it; everyone else refers to
    it through an :class:`~lindenmayer.arena.ArenaId`. Names must be non-empty
    and free of whitespace, since the textual rule syntax splits on whitespace.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidTokenError(str(self.name))
        if any(ch.isspace() for ch in self.name):
            raise InvalidTokenError(self.name)

    def __str__(self) -> str:
        return self.name
