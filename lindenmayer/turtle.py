"""Turtles that turn a stream of movement commands into line segments.

Every turtle wraps a :class:`BaseTurtle`, which knows where it is, where it has
been and whether its pen is down. Subclasses of :class:`MovingTurtle` decide
what "forward" means (a heading, a lattice, ...) and forward the resulting
deltas to the base turtle.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from .errors import EmptyStackError

Line = tuple[float, float, float, float]
Bounds = tuple[float, float, float, float]


class BaseTurtle:
    """The work-horse turtle.

    Starts at the origin with its pen down. Moving with the pen down records a
    segment ``(x1, y1, x2, y2)``; every change of position, drawn or not,
    updates the running bounds.

        >>> turtle = BaseTurtle()
        >>> turtle.delta_move(1.0, 1.0)
        >>> turtle.lines()
        [(0.0, 0.0, 1.0, 1.0)]
    """

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._lines: list[Line] = []
        self._min_x = 0.0
        self._min_y = 0.0
        self._max_x = 0.0
        self._max_y = 0.0
        self._pen_down = True

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def is_pen_down(self) -> bool:
        return self._pen_down

    def lines(self) -> list[Line]:
        return list(self._lines)

    def set_position(self, x: float, y: float) -> None:
        """Teleport to ``(x, y)`` without drawing."""
        self._x = float(x)
        self._y = float(y)
        self._update_bounds()

    def _update_bounds(self) -> None:
        self._min_x = min(self._min_x, self._x)
        self._min_y = min(self._min_y, self._y)
        self._max_x = max(self._max_x, self._x)
        self._max_y = max(self._max_y, self._y)

    def delta_move(self, dx: float, dy: float) -> None:
        x2 = self._x + dx
        y2 = self._y + dy

        if self._pen_down:
            self._lines.append((self._x, self._y, x2, y2))

        self._x = x2
        self._y = y2
        self._update_bounds()

    def bounds(self) -> Bounds:
        """Return ``(width, height, min_x, min_y)``.

        The running extremes start at the origin, so ``min_x <= 0 <= max_x``
        always holds and the width equals ``max_x + abs(min_x)``.
        """
        return (
            self._max_x - self._min_x,
            self._max_y - self._min_y,
            self._min_x,
            self._min_y,
        )

    def pen_down(self) -> None:
        self._pen_down = True

    def pen_up(self) -> None:
        self._pen_down = False


class MovingTurtle(ABC):
    """A turtle that knows how to move forward.

    Implementations keep a :class:`BaseTurtle` (exposed as :attr:`inner`) and
    translate :meth:`forward` into ``self.inner.delta_move(dx, dy)``.
    """

    @property
    @abstractmethod
    def inner(self) -> BaseTurtle: ...

    @abstractmethod
    def forward(self, distance: Any) -> None: ...

    def lines(self) -> list[Line]:
        return self.inner.lines()

    def bounds(self) -> Bounds:
        return self.inner.bounds()


class StackTurtle(MovingTurtle):
    @abstractmethod
    def push(self) -> None:
        """Save the current state of the turtle."""

    @abstractmethod
    def pop(self) -> None:
        """Restore the most recently saved state.

        Raises :class:`~lindenmayer.errors.EmptyStackError` if nothing is saved.
        """


class Heading(Enum):
    """The four cardinal directions, as unit steps on a grid."""

    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def left(self) -> Heading:
        """The heading 90 degrees anticlockwise of this one."""
        return _LEFT_OF[self]

    def right(self) -> Heading:
        return self.left().left().left()


_LEFT_OF = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}


class SimpleTurtle(StackTurtle):
    """A turtle with a continuous heading, in radians.

    The heading starts pointing up (``pi / 2``). ``left`` turns anticlockwise,
    ``right`` clockwise. With the turtle's pen up, ``forward`` does not move at
    all.
    """

    def __init__(self, heading: float = math.pi / 2) -> None:
        self._turtle = BaseTurtle()
        self._heading = heading
        self._stack: list[tuple[float, float, float]] = []
        self._pen_down = True

    @property
    def inner(self) -> BaseTurtle:
        return self._turtle

    @property
    def heading(self) -> float:
        return self._heading

    def left(self, angle: float) -> None:
        self._heading += angle

    def right(self, angle: float) -> None:
        self._heading -= angle

    def set_heading(self, heading: float) -> None:
        self._heading = heading

    def pen_up(self) -> None:
        self._pen_down = False

    def pen_down(self) -> None:
        self._pen_down = True

    def forward(self, distance: float) -> None:
        dx = math.cos(self._heading) * distance
        dy = math.sin(self._heading) * distance

        if self._pen_down:
            self._turtle.delta_move(dx, dy)

    def push(self) -> None:
        self._stack.append((self._turtle.x, self._turtle.y, self._heading))

    def pop(self) -> None:
        if not self._stack:
            raise EmptyStackError("pop called on a turtle with an empty stack")
        x, y, heading = self._stack.pop()
        self._turtle.set_position(x, y)
        self._heading = heading
