"""Circular cloud layouter: spiral search followed by compaction."""

from __future__ import annotations

import logging

from tagcloud.config import LAYOUT_RULES, LayoutRules

from .compaction import compact
from .geometry import as_point, as_size, is_non_negative, rect_around
from .index import SpatialIndex
from .models import (
    InvalidCenterError, InvalidSizeError, Point, Rectangle, Size,
)
from .spiral import spiral_points


log = logging.getLogger(__name__)


class CircularCloudLayouter:
    """Places rectangles one by one in a tight cluster around a fixed center.

    The first rectangle sits exactly on the center.  Every later one is
    put on the first free spot of an outward spiral and then compacted
    toward the center.  Placed rectangles are never moved or removed.

    Parameters
    ----------
    center : Point or (x, y)
        Fixed center of the cloud.  Both coordinates must be >= 0.
    rules : LayoutRules
        Spiral and index tuning (default ``LAYOUT_RULES``).
    non_negative : bool
        Reject positions with a negative coordinate, keeping the cloud
        inside the canvas quadrant (default).  The first rectangle is
        always centered exactly and is exempt.  Pass False to let the
        cloud spread around a center near the origin.

    Raises
    ------
    InvalidCenterError
        If either center coordinate is negative.
    """

    def __init__(
        self,
        center: Point | tuple[int, int],
        *,
        rules: LayoutRules = LAYOUT_RULES,
        non_negative: bool = True,
    ) -> None:
        center = as_point(center)
        if center.x < 0 or center.y < 0:
            raise InvalidCenterError(center)
        self.center = center
        self.rules = rules
        self.non_negative = non_negative
        self._rectangles: list[Rectangle] = []
        self._index = SpatialIndex(rules.index_cell_size)
        # Spiral step where the last search for each size stopped.  Placed
        # rectangles are never removed, so every earlier step stays blocked.
        self._resume: dict[Size, int] = {}
        log.info("Layouter centered at (%d, %d) non_negative=%s",
                 center.x, center.y, non_negative)

    def __len__(self) -> int:
        return len(self._rectangles)

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        return self.all_rectangles()

    def all_rectangles(self) -> tuple[Rectangle, ...]:
        """Every placed rectangle, in placement order."""
        return tuple(self._rectangles)

    def place_next(self, size: Size | tuple[int, int]) -> Rectangle:
        """Place a rectangle of *size* and return where it went.

        Raises
        ------
        InvalidSizeError
            If width or height is zero or negative.  Nothing is placed.
        """
        size = as_size(size)
        if not size.is_positive:
            raise InvalidSizeError(size)

        if not self._rectangles:
            rect = rect_around(self.center, size)
        else:
            rect = self._search(size)
            rect = compact(rect, self.center, self._index,
                           non_negative=self.non_negative)

        self._rectangles.append(rect)
        self._index.insert(rect)
        log.debug("Placed #%d %dx%d at (%d, %d)",
                  len(self._rectangles), rect.width, rect.height, rect.x, rect.y)
        return rect

    # ── Internals ──────────────────────────────────────────────────

    def _search(self, size: Size) -> Rectangle:
        """First free rectangle of *size* along a fresh outward spiral."""
        index = self._index
        non_negative = self.non_negative
        start = self._resume.get(size, 0)
        last_blocker: Rectangle | None = None

        for step, point in spiral_points(
            self.center,
            angle_step=self.rules.angle_step,
            radius_step=self.rules.radius_step(size.width, size.height),
            start=start,
        ):
            candidate = rect_around(point, size)
            if non_negative and not is_non_negative(candidate):
                continue
            # Neighbouring spiral steps usually hit the same rectangle.
            if last_blocker is not None and candidate.intersects(last_blocker):
                continue
            last_blocker = index.blocker(candidate)
            if last_blocker is None:
                self._resume[size] = step
                return candidate
        raise AssertionError("unreachable: spiral_points is infinite")
