"""Cloud quality metrics — how dense a finished layout is."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.ops import unary_union

from .geometry import center_distance_sq
from .models import Point, Rectangle


def max_center_distance(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Largest distance from *center* to a rectangle's center (0 if empty)."""
    if not rectangles:
        return 0.0
    return math.sqrt(max(center_distance_sq(r, center) for r in rectangles))


def total_area(rectangles: Sequence[Rectangle]) -> int:
    return sum(r.area for r in rectangles)


def tightness_ratio(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Bounding-circle area divided by total rectangle area.

    The circle is centered on *center* and reaches the farthest
    rectangle center.  Lower is tighter; a perfectly packed disc of
    small squares approaches 1.
    """
    area = total_area(rectangles)
    if area == 0:
        return 0.0
    radius = max_center_distance(rectangles, center)
    return math.pi * radius * radius / area


def covered_area(rectangles: Sequence[Rectangle]) -> float:
    """Area of the union of all rectangles.

    Equals ``total_area`` exactly when no two rectangles overlap.
    """
    if not rectangles:
        return 0.0
    return unary_union([r.as_box() for r in rectangles]).area


def hull_density(rectangles: Sequence[Rectangle]) -> float:
    """Fraction of the cloud's convex hull covered by rectangles."""
    if not rectangles:
        return 0.0
    union = unary_union([r.as_box() for r in rectangles])
    hull_area = union.convex_hull.area
    if hull_area <= 0:
        return 0.0
    return union.area / hull_area
