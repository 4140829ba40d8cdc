#!/usr/bin/env python3
import math

import pytest

from lindenmayer import (
    BaseTurtle,
    EmptyStackError,
    Heading,
    Lattice,
    LatticeTurtle,
    SimpleTurtle,
)
from lindenmayer.canvas import fit


class TestBaseTurtle:
    def test_starts_at_origin(self) -> None:
        turtle = BaseTurtle()
        assert (turtle.x, turtle.y) == (0.0, 0.0)
        assert turtle.lines() == []
        assert turtle.bounds() == (0.0, 0.0, 0.0, 0.0)

    def test_delta_move_records_segments(self) -> None:
        turtle = BaseTurtle()
        turtle.delta_move(5.0, -5.0)
        turtle.delta_move(1.0, 1.0)

        assert turtle.lines() == [(0.0, 0.0, 5.0, -5.0), (5.0, -5.0, 6.0, -4.0)]
        assert (turtle.x, turtle.y) == (6.0, -4.0)

    def test_pen_up_suppresses_recording(self) -> None:
        turtle = BaseTurtle()
        turtle.pen_up()
        turtle.delta_move(3.0, -4.0)

        assert turtle.lines() == []
        assert (turtle.x, turtle.y) == (3.0, -4.0)
        assert turtle.bounds() == (3.0, 4.0, 0.0, -4.0)

        turtle.pen_down()
        turtle.delta_move(1.0, 0.0)
        assert turtle.lines() == [(3.0, -4.0, 4.0, -4.0)]

    def test_set_position_updates_bounds_without_drawing(self) -> None:
        turtle = BaseTurtle()
        turtle.set_position(5.0, 5.0)
        turtle.set_position(-4.0, -3.0)

        assert turtle.lines() == []
        assert turtle.bounds() == (9.0, 8.0, -4.0, -3.0)

    def test_bounds_include_origin(self) -> None:
        turtle = BaseTurtle()
        turtle.set_position(2.0, 3.0)
        turtle.delta_move(4.0, 1.0)

        width, height, min_x, min_y = turtle.bounds()
        assert (min_x, min_y) == (0.0, 0.0)
        assert (width, height) == (6.0, 4.0)

    def test_lines_is_a_copy(self) -> None:
        turtle = BaseTurtle()
        turtle.delta_move(1.0, 0.0)
        turtle.lines().clear()
        assert len(turtle.lines()) == 1


class TestSimpleTurtle:
    def test_straight_line_east(self) -> None:
        turtle = SimpleTurtle(heading=0.0)
        turtle.forward(7.5)

        assert turtle.lines() == [(0.0, 0.0, 7.5, 0.0)]
        assert turtle.bounds() == (7.5, 0.0, 0.0, 0.0)

    def test_default_heading_is_north(self) -> None:
        turtle = SimpleTurtle()
        turtle.forward(10)

        (x1, y1, x2, y2), = turtle.lines()
        assert x2 == pytest.approx(0.0, abs=1e-9)
        assert y2 == pytest.approx(10.0)

    def test_left_and_right(self) -> None:
        turtle = SimpleTurtle(heading=0.0)
        turtle.left(math.pi / 2)
        assert turtle.heading == pytest.approx(math.pi / 2)
        turtle.right(math.pi)
        assert turtle.heading == pytest.approx(-math.pi / 2)

        turtle.forward(2)
        assert turtle.inner.y == pytest.approx(-2.0)

    def test_pen_up_does_not_move(self) -> None:
        turtle = SimpleTurtle(heading=0.0)
        turtle.pen_up()
        turtle.forward(10)
        assert turtle.lines() == []
        assert turtle.inner.x == 0.0

        turtle.pen_down()
        turtle.forward(10)
        assert turtle.lines() == [(0.0, 0.0, 10.0, 0.0)]

    def test_push_pop_restores_state(self) -> None:
        turtle = SimpleTurtle(heading=0.3)
        turtle.forward(4)
        x, y, heading = turtle.inner.x, turtle.inner.y, turtle.heading

        turtle.push()
        turtle.left(1.2)
        turtle.forward(9)
        turtle.pop()

        assert (turtle.inner.x, turtle.inner.y, turtle.heading) == (x, y, heading)
        # restoring the position does not draw
        assert len(turtle.lines()) == 2

    def test_pop_empty_stack(self) -> None:
        turtle = SimpleTurtle()
        with pytest.raises(EmptyStackError):
            turtle.pop()

        turtle.push()
        turtle.pop()
        with pytest.raises(EmptyStackError):
            turtle.pop()


class TestHeading:
    def test_left_right(self) -> None:
        assert Heading.NORTH.left() is Heading.WEST
        assert Heading.NORTH.right() is Heading.EAST
        assert Heading.EAST.left().left() is Heading.WEST

    def test_deltas(self) -> None:
        assert (Heading.EAST.dx, Heading.EAST.dy) == (1, 0)
        assert (Heading.WEST.dx, Heading.WEST.dy) == (-1, 0)
        assert (Heading.NORTH.dx, Heading.NORTH.dy) == (0, 1)
        assert (Heading.SOUTH.dx, Heading.SOUTH.dy) == (0, -1)


class TestLatticeTurtle:
    def test_lattice_point(self) -> None:
        lattice = Lattice((2.0, 0.0), (1.0, 1.0))
        assert lattice.point(1, 2) == (4.0, 2.0)

    def test_grid_moves(self) -> None:
        turtle = LatticeTurtle.grid()
        turtle.forward((1, 0))
        turtle.forward((0, 2))

        assert turtle.lines() == [(0.0, 0.0, 1.0, 0.0), (1.0, 0.0, 1.0, 2.0)]
        assert turtle.position == (1, 2)
        assert turtle.bounds() == (1.0, 2.0, 0.0, 0.0)

    def test_equiangular(self) -> None:
        turtle = LatticeTurtle.equiangular()
        turtle.forward((0, 1))

        (_, _, x2, y2), = turtle.lines()
        assert x2 == pytest.approx(0.5)
        assert y2 == pytest.approx(math.sqrt(3) / 2)

    def test_push_pop_restores_lattice_position(self) -> None:
        turtle = LatticeTurtle.grid()
        turtle.forward((1, 2))
        turtle.push()
        turtle.forward((3, 3))
        turtle.pop()

        assert turtle.position == (1, 2)
        turtle.forward((1, 0))
        assert turtle.lines()[-1] == (1.0, 2.0, 2.0, 2.0)

    def test_pop_empty_stack(self) -> None:
        with pytest.raises(EmptyStackError):
            LatticeTurtle.grid().pop()

    def test_no_drift_over_many_moves(self) -> None:
        turtle = LatticeTurtle.by_angle(1.0)
        for _ in range(1000):
            turtle.forward((1, 1))
        for _ in range(1000):
            turtle.forward((-1, -1))

        assert turtle.position == (0, 0)
        x1, y1, _, _ = turtle.lines()[-1]
        expected = turtle.lattice.point(1, 1)
        assert (x1, y1) == expected


class TestCanvas:
    def test_fit_flips_and_pads(self) -> None:
        canvas = fit([(0.0, 0.0, 10.0, 0.0)], (10.0, 0.0, 0.0, 0.0), padding=5)

        assert canvas.width == 20
        assert canvas.height == 10
        assert canvas.lines == [(5.0, 5.0, 15.0, 5.0)]

    def test_fit_offsets_negative_coordinates(self) -> None:
        turtle = BaseTurtle()
        turtle.delta_move(-4.0, -2.0)

        canvas = fit(turtle.lines(), turtle.bounds())
        assert (canvas.width, canvas.height) == (4.0, 2.0)
        # origin ends up in the top-right corner, the end point bottom-left
        assert canvas.lines == [(4.0, 0.0, 0.0, 2.0)]

    def test_negative_padding(self) -> None:
        with pytest.raises(ValueError):
            fit([], (0.0, 0.0, 0.0, 0.0), padding=-1)
