"""Lindenmayer systems and turtle interpretation.

An L-system is an alphabet of tokens, an axiom to start from, and production
rules rewriting each token into a sequence of tokens. Algae, for example, has
tokens ``A`` and ``B``, axiom ``A`` and rules ``A -> AB``, ``B -> A``:

    >>> builder = LSystemBuilder()
    >>> a = builder.token("A")
    >>> b = builder.token("B")
    >>> builder.axiom([a])
    >>> builder.transformation_rule(a, [a, b])
    >>> builder.transformation_rule(b, [a])
    >>> system = builder.finish()
    >>> system.step_by(3)
    >>> system.render()
    'ABAAB'
"""

from .actions import (
    Constant,
    Custom,
    Forward,
    Nothing,
    Pop,
    Push,
    Rotate,
    StochasticForward,
    StochasticRotate,
    TurtleAction,
    TurtleLSystemBuilder,
    TurtleLSystemState,
    Uniform,
)
from .arena import Arena, ArenaId
from .builder import LSystemBuilder, TransformationRule
from .errors import (
    ConfigError,
    DuplicateRuleError,
    EmptyStackError,
    InvalidArenaIdError,
    InvalidRuleError,
    InvalidTokenError,
    LSystemError,
    MissingAxiomError,
    UnknownTokenError,
)
from .lattice import Lattice, LatticeTurtle
from .renderer import TurtleContainer, TurtleRenderer
from .system import LSystem
from .token import Token
from .turtle import BaseTurtle, Heading, MovingTurtle, SimpleTurtle, StackTurtle

__all__ = [
    "Arena",
    "ArenaId",
    "BaseTurtle",
    "ConfigError",
    "Constant",
    "Custom",
    "DuplicateRuleError",
    "EmptyStackError",
    "Forward",
    "Heading",
    "InvalidArenaIdError",
    "InvalidRuleError",
    "InvalidTokenError",
    "LSystem",
    "LSystemBuilder",
    "LSystemError",
    "Lattice",
    "LatticeTurtle",
    "MissingAxiomError",
    "MovingTurtle",
    "Nothing",
    "Pop",
    "Push",
    "Rotate",
    "SimpleTurtle",
    "StackTurtle",
    "StochasticForward",
    "StochasticRotate",
    "Token",
    "TransformationRule",
    "TurtleAction",
    "TurtleContainer",
    "TurtleLSystemBuilder",
    "TurtleLSystemState",
    "TurtleRenderer",
    "Uniform",
    "UnknownTokenError",
]
