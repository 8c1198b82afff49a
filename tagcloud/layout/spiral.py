"""Archimedean spiral of candidate positions around a center."""

from __future__ import annotations

import math
from typing import Iterator

from .models import Point


def spiral_points(
    center: Point,
    *,
    angle_step: float,
    radius_step: float,
    start: int = 0,
) -> Iterator[tuple[int, Point]]:
    """Yield ``(step, point)`` pairs walking outward from *center*, forever.

    The angle advances by *angle_step* per step and the radius grows by
    *radius_step* per radian, so every revolution moves outward by
    ``2π * radius_step``.  Points are rounded to the integer grid.

    Steps that round to the same integer point as the previous one are
    skipped (this happens a lot near the center where the spiral is
    tighter than the grid).  *start* begins the walk at that step.
    """
    if angle_step <= 0 or radius_step <= 0:
        raise ValueError(
            f"Spiral needs positive steps (angle_step={angle_step}, radius_step={radius_step})"
        )
    cx, cy = center.x, center.y
    cos, sin = math.cos, math.sin
    step = start
    last: tuple[int, int] | None = None
    while True:
        theta = step * angle_step
        r = radius_step * theta
        x = cx + int(round(r * cos(theta)))
        y = cy + int(round(r * sin(theta)))
        if (x, y) != last:
            last = (x, y)
            yield step, Point(x, y)
        step += 1
