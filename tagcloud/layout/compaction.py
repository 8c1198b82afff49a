"""Compaction — pull a freshly placed rectangle toward the cloud center.

The spiral search only guarantees *a* free position.  Sliding the
rectangle toward the center afterwards closes the gaps the spiral left
behind and is what keeps the cloud dense.

Rule: slide horizontally, then vertically, and repeat the pair until
neither axis moves.  Each slide goes as far as the nearest obstacle
allows, but never carries the rectangle's center past the center line
on that axis.
"""

from __future__ import annotations

from .index import SpatialIndex
from .models import Point, Rectangle

_AXES = (0, 1)


def _coord(point: Point, axis: int) -> int:
    return point.x if axis == 0 else point.y


def slide_toward(
    rect: Rectangle,
    center: Point,
    axis: int,
    obstacles: SpatialIndex,
    *,
    non_negative: bool = False,
) -> Rectangle:
    """Slide *rect* along one axis toward *center* as far as it can go."""
    gap = _coord(center, axis) - _coord(rect.center, axis)
    if gap == 0:
        return rect
    direction = 1 if gap > 0 else -1
    limit = abs(gap)
    if non_negative and direction < 0:
        limit = min(limit, rect.span(axis)[0])
    distance = obstacles.free_distance(rect, axis, direction, limit)
    if distance == 0:
        return rect
    shift = direction * distance
    return rect.offset(shift, 0) if axis == 0 else rect.offset(0, shift)


def compact(
    rect: Rectangle,
    center: Point,
    obstacles: SpatialIndex,
    *,
    non_negative: bool = False,
) -> Rectangle:
    """Move *rect* as close to *center* as possible without overlapping.

    Pure: neither *rect* nor *obstacles* is modified.  Every slide
    strictly shrinks the distance to the center line, so the loop ends.
    """
    while True:
        moved = False
        for axis in _AXES:
            slid = slide_toward(rect, center, axis, obstacles, non_negative=non_negative)
            if slid is not rect:
                rect = slid
                moved = True
        if not moved:
            return rect
