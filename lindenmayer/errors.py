"""Exceptions raised while building and interpreting L-systems."""

from __future__ import annotations

from typing import Any


class LSystemError(ValueError):
    """Base class for every recoverable grammar or configuration error."""


class InvalidTokenError(LSystemError):
    def __init__(self, name: str) -> None:
        super().__init__(f"attempted to construct invalid token {name!r}")
        self.name = name


class InvalidArenaIdError(LSystemError):
    def __init__(self, id: Any) -> None:
        super().__init__(f"invalid arena id {id!r}")
        self.id = id


class MissingAxiomError(LSystemError):
    def __init__(self) -> None:
        super().__init__("axiom has not been defined")


class UnknownTokenError(LSystemError):
    def __init__(self, name: str) -> None:
        super().__init__(f"attempted to use unknown token {name!r}")
        self.name = name


class InvalidRuleError(LSystemError):
    def __init__(self, rule: str) -> None:
        super().__init__(f"invalid rule {rule!r}")
        self.rule = rule


class DuplicateRuleError(LSystemError):
    def __init__(self, predecessor: Any) -> None:
        super().__init__(f"a rule for {predecessor!r} has already been registered")
        self.predecessor = predecessor


class ConfigError(LSystemError):
    pass


class EmptyStackError(RuntimeError):
    """Raised when a turtle is popped with no saved state.

    This points at mismatched push/pop bindings in the grammar, so it is
    deliberately not an :class:`LSystemError`.
    """


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)
