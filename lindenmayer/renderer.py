"""Replay an L-system state against a turtle.

A :class:`TurtleRenderer` owns an interpretation state (any object exposing a
``turtle`` attribute) and a table of mutators keyed by token id. Running it
over a system's state applies the mutators in order; tokens with no mutator
are skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, Protocol, TypeVar

from .arena import ArenaId
from .system import LSystem
from .turtle import Bounds, Line, MovingTurtle


class TurtleContainer(Protocol):
    @property
    def turtle(self) -> MovingTurtle: ...


Q = TypeVar("Q", bound=TurtleContainer)


class TurtleRenderer(Generic[Q]):
    def __init__(self, state: Q) -> None:
        self.state = state
        self._actions: dict[ArenaId, Callable[[Q], None]] = {}
        self._aliases: dict[ArenaId, ArenaId] = {}
        self._rendered = False

    def register(self, id: ArenaId, mutator: Callable[[Q], None]) -> None:
        """Bind ``mutator`` to the token ``id``."""
        self._aliases[id] = id
        self._actions[id] = mutator

    def register_multiple(
        self, ids: Sequence[ArenaId], mutator: Callable[[Q], None]
    ) -> None:
        """Bind one mutator to several tokens.

        The mutator is registered against the first id, and every id in
        ``ids`` is aliased to it.
        """
        if not ids:
            return

        first = ids[0]
        for id in ids:
            self._aliases[id] = first

        self.register(first, mutator)

    def compute(self, ids: Iterable[ArenaId]) -> None:
        for id in ids:
            alias = self._aliases.get(id)
            if alias is None:
                continue
            mutator = self._actions.get(alias)
            if mutator is not None:
                mutator(self.state)

    def render(self, system: LSystem) -> list[Line]:
        """Run the system's current state and return the recorded lines.

        A renderer draws once: its turtle keeps the lines and position of the
        first run, so a second call raises ``RuntimeError``. Build a fresh
        renderer for each frame.
        """
        if self._rendered:
            raise RuntimeError("renderer has already been used to render")
        self._rendered = True
        self.compute(system.get_state())
        return self.lines()

    def lines(self) -> list[Line]:
        return self.state.turtle.lines()

    def bounds(self) -> Bounds:
        return self.state.turtle.bounds()
