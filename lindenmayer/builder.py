"""Collect tokens, rules and an axiom, then compile them into an LSystem.

    >>> builder = LSystemBuilder()
    >>> a = builder.token("a")
    >>> b = builder.token("b")
    >>> builder.transformation_rule(a, [a, b])
    >>> builder.axiom([a])
    >>> system = builder.finish()
    >>> system.step_by(2)
    >>> system.render()
    'abb'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .arena import Arena, ArenaId
from .errors import DuplicateRuleError, InvalidArenaIdError, MissingAxiomError
from .system import LSystem
from .token import Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformationRule:
    predecessor: ArenaId
    successor: tuple[ArenaId, ...]


class LSystemBuilder:
    def __init__(self) -> None:
        self._arena: Arena[Token] = Arena()
        self._axiom: tuple[ArenaId, ...] | None = None
        self._rules: list[TransformationRule] = []
        self._finished = False

    def token(self, name: str) -> ArenaId:
        """Register a new token and return the id used to refer to it.

        Ids are only meaningful for the builder (and later the system) that
        issued them.
        """
        self._check_open()
        return self._arena.push(Token(name))

    def _validate_ids(self, ids: Iterable[ArenaId]) -> None:
        for id in ids:
            if not self._arena.is_valid(id):
                raise InvalidArenaIdError(id)

    def transformation_rule(
        self, predecessor: ArenaId, successor: Sequence[ArenaId]
    ) -> None:
        """Register ``predecessor -> successor``.

        Every id is checked against this builder's arena. A second rule for the
        same predecessor raises :class:`DuplicateRuleError`.
        """
        self._check_open()
        successor = tuple(successor)
        self._validate_ids([predecessor])
        self._validate_ids(successor)

        if any(rule.predecessor == predecessor for rule in self._rules):
            raise DuplicateRuleError(self._render([predecessor]))

        self._rules.append(TransformationRule(predecessor, successor))

    def axiom(self, axiom: Sequence[ArenaId]) -> None:
        self._check_open()
        axiom = tuple(axiom)
        self._validate_ids(axiom)
        self._axiom = axiom

    def finish(self) -> LSystem:
        """Consume the builder and return the compiled :class:`LSystem`.

        Tokens without an explicit rule get the identity rule ``P -> P``.
        """
        self._check_open()
        if self._axiom is None:
            raise MissingAxiomError()

        rules: dict[ArenaId, tuple[ArenaId, ...]] = {}
        for rule in self._rules:
            rules[rule.predecessor] = rule.successor

        for id, _token in self._arena.enumerate():
            rules.setdefault(id, (id,))

        if len(rules) != len(self._arena):
            raise AssertionError(
                f"rule table has {len(rules)} entries for {len(self._arena)} tokens"
            )

        self._finished = True
        logger.debug(
            "built L-system with %d tokens, %d explicit rules, axiom length %d",
            len(self._arena),
            len(self._rules),
            len(self._axiom),
        )
        return LSystem(self._arena, self._axiom, rules)

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("builder has already been finished")

    def _render(self, ids: Iterable[ArenaId]) -> str:
        return "".join(self._arena.get(id).name for id in ids)  # type: ignore[union-attr]

    def __repr__(self) -> str:
        rules = ",".join(
            f"{self._render([rule.predecessor])} => {self._render(rule.successor)}"
            for rule in self._rules
        )
        return (
            f"LSystemBuilder(arena={self._arena!r}, axiom={self._axiom!r}, "
            f"rules={rules!r})"
        )
