"""Low-level geometry helpers for the layouter."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Point, Rectangle, Size


def as_point(value: Point | tuple[int, int]) -> Point:
    """Accept a Point or a plain (x, y) tuple."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def as_size(value: Size | tuple[int, int]) -> Size:
    """Accept a Size or a plain (width, height) tuple."""
    if isinstance(value, Size):
        return value
    w, h = value
    return Size(w, h)


def rect_around(center: Point, size: Size) -> Rectangle:
    """Rectangle of *size* centered on *center*."""
    return Rectangle.from_center(center, size)


def is_non_negative(rect: Rectangle) -> bool:
    return rect.x >= 0 and rect.y >= 0


def intersects_any(candidate: Rectangle, rectangles: Iterable[Rectangle]) -> bool:
    """Return True if *candidate* overlaps any of *rectangles*.

    Brute force over the whole sequence.  The layouter asks the same
    question through ``SpatialIndex.blocker`` which only looks at nearby
    rectangles.
    """
    return any(candidate.intersects(r) for r in rectangles)


def intersecting_pairs(
    rectangles: Sequence[Rectangle],
) -> list[tuple[int, int]]:
    """Index pairs (i, j), i < j, of rectangles that overlap."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(rectangles)):
        ri = rectangles[i]
        for j in range(i + 1, len(rectangles)):
            if ri.intersects(rectangles[j]):
                pairs.append((i, j))
    return pairs


def center_distance_sq(rect: Rectangle, center: Point) -> int:
    """Squared distance from *center* to the rectangle's center."""
    c = rect.center
    dx, dy = c.x - center.x, c.y - center.y
    return dx * dx + dy * dy
