"""A turtle that walks on a lattice spanned by two basis vectors."""

from __future__ import annotations

import math

from .errors import EmptyStackError
from .turtle import BaseTurtle, StackTurtle

Vector = tuple[float, float]


class Lattice:
    def __init__(self, x_direction: Vector, y_direction: Vector) -> None:
        self.x_direction = x_direction
        self.y_direction = y_direction

    def point(self, x: int, y: int) -> Vector:
        """Real coordinates of the lattice point ``(x, y)``."""
        return (
            self.x_direction[0] * x + self.y_direction[0] * y,
            self.x_direction[1] * x + self.y_direction[1] * y,
        )


class LatticeTurtle(StackTurtle):
    """Moves in integer lattice steps.

    The turtle's lattice coordinate is tracked separately from the base
    turtle's real position, and the real position is recomputed from it before
    every move so that floating point error never accumulates.
    """

    def __init__(self, lattice: Lattice) -> None:
        self._inner = BaseTurtle()
        self.lattice = lattice
        self._x = 0
        self._y = 0
        self._stack: list[tuple[int, int]] = []

    @classmethod
    def grid(cls) -> LatticeTurtle:
        return cls(Lattice((1.0, 0.0), (0.0, 1.0)))

    @classmethod
    def equiangular(cls) -> LatticeTurtle:
        return cls.by_angle(math.pi / 3)

    @classmethod
    def by_angle(cls, angle: float) -> LatticeTurtle:
        """A lattice whose basis vectors are ``angle`` radians apart."""
        return cls(Lattice((1.0, 0.0), (math.cos(angle), math.sin(angle))))

    @property
    def inner(self) -> BaseTurtle:
        return self._inner

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    def forward(self, distance: tuple[int, int]) -> None:
        rx, ry = self.lattice.point(self._x, self._y)
        self._inner.set_position(rx, ry)

        dx, dy = distance
        rdx, rdy = self.lattice.point(dx, dy)
        self._inner.delta_move(rdx, rdy)

        self._x += dx
        self._y += dy

    def push(self) -> None:
        self._stack.append((self._x, self._y))

    def pop(self) -> None:
        if not self._stack:
            raise EmptyStackError("pop called on a lattice turtle with an empty stack")
        self._x, self._y = self._stack.pop()
