"""Map turtle geometry onto a canvas whose origin is the top-left corner."""

from __future__ import annotations

from dataclasses import dataclass

from .turtle import Bounds, Line


@dataclass(frozen=True)
class Canvas:
    width: float
    height: float
    lines: list[Line]


def fit(lines: list[Line], bounds: Bounds, padding: float = 0.0) -> Canvas:
    """Translate turtle lines into canvas coordinates.

    ``bounds`` is the ``(width, height, min_x, min_y)`` tuple reported by a
    turtle. The y axis is flipped and every point is shifted so the drawing
    sits ``padding`` units away from each edge.
    """
    if padding < 0:
        raise ValueError(f"padding must be >= 0, got {padding}")

    turtle_width, turtle_height, min_x, min_y = bounds
    width = 2 * padding + turtle_width
    height = 2 * padding + turtle_height

    def xp(x: float) -> float:
        return x - min_x + padding

    def yp(y: float) -> float:
        return height - (y - min_y + padding)

    return Canvas(
        width=width,
        height=height,
        lines=[(xp(x1), yp(y1), xp(x2), yp(y2)) for x1, y1, x2, y2 in lines],
    )
