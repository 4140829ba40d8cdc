"""The compiled rewriting system.

An :class:`LSystem` is obtained from
:class:`~lindenmayer.builder.LSystemBuilder`. Its rule table and axiom never
change; only the current state and the step counter do.

    >>> from lindenmayer.builder import LSystemBuilder
    >>> builder = LSystemBuilder()
    >>> a = builder.token("A")
    >>> b = builder.token("B")
    >>> builder.axiom([a])
    >>> builder.transformation_rule(a, [a, b])
    >>> builder.transformation_rule(b, [a])
    >>> system = builder.finish()
    >>> system.render()
    'A'
    >>> system.step()
    >>> system.render()
    'AB'
    >>> system.step_by(6)
    >>> system.render()
    'ABAABABAABAABABAABABAABAABABAABAAB'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from .arena import Arena, ArenaId
from .token import Token

logger = logging.getLogger(__name__)


class LSystem:
    def __init__(
        self,
        arena: Arena[Token],
        axiom: Sequence[ArenaId],
        rules: Mapping[ArenaId, Sequence[ArenaId]],
    ) -> None:
        self._arena = arena
        self._axiom: tuple[ArenaId, ...] = tuple(axiom)
        self._rules: dict[ArenaId, tuple[ArenaId, ...]] = {
            id: tuple(successor) for id, successor in rules.items()
        }
        self._state: list[ArenaId] = list(self._axiom)
        self._steps = 0

    @property
    def axiom(self) -> tuple[ArenaId, ...]:
        return self._axiom

    def token(self, id: ArenaId) -> Token | None:
        return self._arena.get(id)

    def rules(self) -> dict[ArenaId, tuple[ArenaId, ...]]:
        return dict(self._rules)

    def reset(self) -> None:
        """Return to the axiom and zero the step counter."""
        self._state = list(self._axiom)
        self._steps = 0

    def step(self) -> None:
        """Rewrite every token of the current state once, in parallel."""
        next_state: list[ArenaId] = []

        for id in self._state:
            try:
                successor = self._rules[id]
            except KeyError:
                raise AssertionError(f"no rule for token {id!r}") from None
            next_state.extend(successor)

        self._state = next_state
        self._steps += 1

    def step_by(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"step count must be >= 0, got {n}")
        for _ in range(n):
            self.step()
        logger.debug("stepped to %d, state length %d", self._steps, len(self._state))

    def steps(self) -> int:
        """Number of steps taken since construction or the last reset."""
        return self._steps

    def get_state(self) -> tuple[ArenaId, ...]:
        return tuple(self._state)

    def render_tokens(self, ids: Iterable[ArenaId]) -> str:
        names = []
        for id in ids:
            token = self._arena.get(id)
            if token is None:
                raise AssertionError(f"token {id!r} is not part of this system")
            names.append(token.name)
        return "".join(names)

    def render(self) -> str:
        """The current state as the concatenation of token names."""
        return self.render_tokens(self._state)

    def __repr__(self) -> str:
        return f"LSystem(steps={self._steps}, state_len={len(self._state)})"
