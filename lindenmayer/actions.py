"""Turtle actions and a builder that wires them to a textual grammar.

    >>> builder = TurtleLSystemBuilder()
    >>> _ = (
    ...     builder.token("F", Forward(10))
    ...     .token("+", Rotate(60))
    ...     .token("-", Rotate(-60))
    ...     .axiom("F")
    ...     .rule("F => F + F - - F + F")
    ... )
    >>> system, renderer = builder.finish()
    >>> system.step_by(2)
    >>> lines = renderer.render(system)
"""

from __future__ import annotations

import math
import random
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, Union

from .arena import ArenaId
from .builder import LSystemBuilder
from .errors import (
    EmptyStackError,
    InvalidRuleError,
    InvalidTokenError,
    MissingAxiomError,
    UnknownTokenError,
)
from .renderer import TurtleRenderer
from .system import LSystem
from .turtle import SimpleTurtle

# -------------------------
# Distributions
# -------------------------


class Distribution(Protocol):
    def sample(self) -> int: ...


@dataclass(frozen=True)
class Constant:
    value: int

    def sample(self) -> int:
        return self.value


class Uniform:
    """Uniform distribution on the closed interval ``[lower, upper]``.

    Draws from ``rng`` if given, otherwise from a private generator seeded
    with ``seed``.
    """

    def __init__(
        self,
        lower: int,
        upper: int,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if lower > upper:
            raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
        self.lower = lower
        self.upper = upper
        self._rng = rng if rng is not None else random.Random(seed)

    def sample(self) -> int:
        return self._rng.randint(self.lower, self.upper)

    def __repr__(self) -> str:
        return f"Uniform({self.lower}, {self.upper})"


# -------------------------
# Action model
# -------------------------


@dataclass
class TurtleLSystemState:
    """Interpretation state: accumulated angle in degrees plus the turtle."""

    angle: float = 0.0
    angle_stack: list[float] = field(default_factory=list)
    turtle: SimpleTurtle = field(default_factory=SimpleTurtle)


@dataclass(frozen=True)
class Nothing:
    pass


@dataclass(frozen=True)
class Forward:
    distance: float


@dataclass(frozen=True)
class Rotate:
    angle: float


@dataclass(frozen=True)
class Push:
    pass


@dataclass(frozen=True)
class Pop:
    pass


@dataclass(frozen=True)
class StochasticForward:
    distribution: Distribution


@dataclass(frozen=True)
class StochasticRotate:
    distribution: Distribution


@dataclass(frozen=True)
class Custom:
    callback: Callable[[TurtleLSystemState], None]


TurtleAction = Union[
    Nothing, Forward, Rotate, Push, Pop, StochasticForward, StochasticRotate, Custom
]


def _push(state: TurtleLSystemState) -> None:
    state.turtle.push()
    state.angle_stack.append(state.angle)


def _pop(state: TurtleLSystemState) -> None:
    state.turtle.pop()
    if not state.angle_stack:
        raise EmptyStackError("pop called with no saved angle")
    state.angle = state.angle_stack.pop()


def _mutator_for(
    action: TurtleAction, global_rotate: float
) -> Callable[[TurtleLSystemState], None] | None:
    if isinstance(action, Nothing):
        return None

    if isinstance(action, Push):
        return _push

    if isinstance(action, Pop):
        return _pop

    if isinstance(action, Rotate):
        angle = action.angle

        def rotate(state: TurtleLSystemState) -> None:
            state.angle = (state.angle + angle) % 360

        return rotate

    if isinstance(action, StochasticRotate):
        rotate_dist = action.distribution

        def stochastic_rotate(state: TurtleLSystemState) -> None:
            state.angle = (state.angle + rotate_dist.sample()) % 360

        return stochastic_rotate

    if isinstance(action, Forward):
        distance = action.distance

        def forward(state: TurtleLSystemState) -> None:
            state.turtle.set_heading(math.radians(global_rotate + state.angle))
            state.turtle.forward(distance)

        return forward

    if isinstance(action, StochasticForward):
        forward_dist = action.distribution

        def stochastic_forward(state: TurtleLSystemState) -> None:
            state.turtle.set_heading(math.radians(global_rotate + state.angle))
            state.turtle.forward(forward_dist.sample())

        return stochastic_forward

    if isinstance(action, Custom):
        return action.callback

    raise TypeError(f"unknown turtle action {action!r}")


# -------------------------
# Textual builder
# -------------------------

_RULE_RE = re.compile(r"\s*(\S+)\s*=>(.*)", re.DOTALL)


class TurtleLSystemBuilder:
    """Builds an :class:`LSystem` together with a renderer for it.

    Tokens are referred to by name. Axioms and rule right-hand sides are
    whitespace-separated names, and rules are written ``LHS => RHS``.
    """

    def __init__(self) -> None:
        self._builder = LSystemBuilder()
        self._actions: dict[ArenaId, TurtleAction] = {}
        self._tokens: dict[str, ArenaId] = {}
        self._global_rotate = 0.0

    def rotate(self, angle: float) -> TurtleLSystemBuilder:
        """Rotate every heading by ``angle`` degrees."""
        self._global_rotate = angle
        return self

    def token(
        self, name: str, action: TurtleAction | None = None
    ) -> TurtleLSystemBuilder:
        if name in self._tokens:
            raise InvalidTokenError(name)

        id = self._builder.token(name)
        self._tokens[name] = id
        self._actions[id] = action if action is not None else Nothing()
        return self

    def _get_token(self, name: str) -> ArenaId:
        try:
            return self._tokens[name]
        except KeyError:
            raise UnknownTokenError(name) from None

    def axiom(self, axiom: str) -> TurtleLSystemBuilder:
        ids = [self._get_token(part) for part in axiom.split()]
        if not ids:
            raise MissingAxiomError()

        self._builder.axiom(ids)
        return self

    def rule(self, rule: str) -> TurtleLSystemBuilder:
        match = _RULE_RE.fullmatch(rule)
        if match is None:
            raise InvalidRuleError(rule)

        lhs = self._get_token(match.group(1))
        rhs = [self._get_token(part) for part in match.group(2).split()]

        self._builder.transformation_rule(lhs, rhs)
        return self

    def finish(self) -> tuple[LSystem, TurtleRenderer[TurtleLSystemState]]:
        """Consume the builder, returning the system and its renderer."""
        system = self._builder.finish()
        renderer: TurtleRenderer[TurtleLSystemState] = TurtleRenderer(
            TurtleLSystemState()
        )

        for id, action in self._actions.items():
            mutator = _mutator_for(action, self._global_rotate)
            if mutator is not None:
                renderer.register(id, mutator)

        return system, renderer
