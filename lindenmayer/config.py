"""Build a turtle L-system from a JSON grammar description.

Example document (Koch curve)::

    {
      "name": "Koch curve",
      "axiom": "F",
      "iterations": 3,
      "tokens": {
        "F": {"type": "forward", "distance": 10},
        "+": {"type": "rotate", "angle": 60},
        "-": {"type": "rotate", "angle": -60}
      },
      "rules": {"F": "F + F - - F + F"}
    }

``rules`` may also be a list of ``"LHS => RHS"`` strings. ``distance`` and
``angle`` accept ``{"uniform": [lo, hi]}`` for stochastic actions; all of them
share one generator seeded from ``seed``.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from typing import Any, cast

from .actions import (
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
from .errors import ConfigError, _require
from .renderer import TurtleRenderer
from .system import LSystem

logger = logging.getLogger(__name__)


# -------------------------
# Validation helpers
# -------------------------


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    return float(x)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


# -------------------------
# Config model
# -------------------------


@dataclass(frozen=True)
class GrammarConfig:
    name: str
    axiom: str
    iterations: int
    rotate: float
    seed: int | None

    # token name -> action dict, in registration order
    tokens: dict[str, dict[str, Any]]

    # "LHS => RHS" strings
    rules: list[str]


def parse_config(obj: dict[str, Any]) -> GrammarConfig:
    obj = _as_dict(obj, "root")

    name = _as_str(obj.get("name", "L-System"), "name")
    axiom = _as_str(obj.get("axiom", ""), "axiom")
    _require(len(axiom.split()) > 0, "axiom must be non-empty")

    iterations = _as_int(obj.get("iterations", 0), "iterations")
    _require(iterations >= 0, "iterations must be >= 0")

    rotate = _as_float(obj.get("rotate", 0), "rotate")

    seed = obj.get("seed")
    if seed is not None:
        seed = _as_int(seed, "seed")

    tokens_obj = _as_dict(obj.get("tokens", {}), "tokens")
    _require(len(tokens_obj) > 0, "tokens must declare at least one token")
    tokens: dict[str, dict[str, Any]] = {}
    for token_name, action in tokens_obj.items():
        tokens[token_name] = _as_dict(action, f"tokens['{token_name}']")

    rules_obj = obj.get("rules", {})
    rules: list[str] = []
    if isinstance(rules_obj, dict):
        for lhs, rhs in rules_obj.items():
            rules.append(f"{lhs} => {_as_str(rhs, f'rules[{lhs!r}]')}")
    elif isinstance(rules_obj, list):
        for i, rule in enumerate(rules_obj):
            rules.append(_as_str(rule, f"rules[{i}]"))
    else:
        raise ConfigError("rules must be an object or a list of strings")

    return GrammarConfig(
        name=name,
        axiom=axiom,
        iterations=iterations,
        rotate=rotate,
        seed=seed,
        tokens=tokens,
        rules=rules,
    )


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        try:
            return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


# -------------------------
# Building
# -------------------------


def _uniform_bounds(x: Any, path: str) -> tuple[int, int] | None:
    if not isinstance(x, dict):
        return None
    bounds = x.get("uniform")
    _require(
        isinstance(bounds, list) and len(bounds) == 2,
        f"{path} must be a number or {{'uniform': [lo, hi]}}",
    )
    lower = _as_int(bounds[0], f"{path}.uniform[0]")
    upper = _as_int(bounds[1], f"{path}.uniform[1]")
    _require(lower <= upper, f"{path}.uniform lower bound exceeds upper bound")
    return lower, upper


def parse_action(
    action: dict[str, Any], path: str, rng: random.Random
) -> TurtleAction:
    atype = action.get("type")
    _require(isinstance(atype, str), f"{path} must have string field 'type'")

    if atype == "nothing":
        return Nothing()

    if atype == "push":
        return Push()

    if atype == "pop":
        return Pop()

    if atype == "forward":
        distance = action.get("distance")
        bounds = _uniform_bounds(distance, f"{path}.distance")
        if bounds is not None:
            return StochasticForward(Uniform(*bounds, rng=rng))
        return Forward(_as_float(distance, f"{path}.distance"))

    if atype == "rotate":
        angle = action.get("angle")
        bounds = _uniform_bounds(angle, f"{path}.angle")
        if bounds is not None:
            return StochasticRotate(Uniform(*bounds, rng=rng))
        return Rotate(_as_float(angle, f"{path}.angle"))

    raise ConfigError(f"Unknown action type '{atype}' at {path}")


def build(
    cfg: GrammarConfig,
) -> tuple[LSystem, TurtleRenderer[TurtleLSystemState]]:
    """Build the system and renderer described by ``cfg``.

    The returned system has already been stepped ``cfg.iterations`` times.
    """
    rng = random.Random(cfg.seed)
    builder = TurtleLSystemBuilder().rotate(cfg.rotate)

    for name, action in cfg.tokens.items():
        builder.token(name, parse_action(action, f"tokens['{name}']", rng))

    builder.axiom(cfg.axiom)
    for rule in cfg.rules:
        builder.rule(rule)

    system, renderer = builder.finish()
    system.step_by(cfg.iterations)
    logger.debug("built %r: %d symbols", cfg.name, len(system.get_state()))
    return system, renderer
