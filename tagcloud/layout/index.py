"""Multi-level bucket-grid spatial index over placed rectangles.

Each level cuts the plane into square cells of one size, and a rectangle
is registered in every cell it covers on its level.  Level sizes are the
base cell size times a power of two; a rectangle goes to the finest level
on which it spans at most ``MAX_CELLS_PER_SIDE`` cells per axis, so
neither a large rectangle nor a cloud of tiny ones makes any single level
expensive.  Cells are created lazily, the plane is unbounded and negative
coordinates are fine.
"""

from __future__ import annotations

from typing import Iterable

from .models import Rectangle


MAX_CELLS_PER_SIDE = 8


def _nearest_along(
    others: Iterable[Rectangle],
    rect: Rectangle, axis: int, direction: int, limit: int,
) -> int:
    """Distance *rect* can slide before touching one of *others*, capped at *limit*."""
    lo, hi = rect.span(axis)
    plo, phi = rect.span(1 - axis)
    best = limit
    for other in others:
        qlo, qhi = other.span(1 - axis)
        if qlo >= phi or qhi <= plo:
            continue
        olo, ohi = other.span(axis)
        if direction < 0:
            if ohi <= lo and lo - ohi < best:
                best = lo - ohi
        elif olo >= hi and olo - hi < best:
            best = olo - hi
    return best


class _Grid:
    """One level of the index: square cells of a fixed size."""

    def __init__(self, cell_size: int) -> None:
        self.cell_size = cell_size
        self.rects: list[Rectangle] = []
        self._cells: dict[tuple[int, int], list[Rectangle]] = {}

    def _cell_range(self, rect: Rectangle) -> tuple[int, int, int, int]:
        """Inclusive (gx0, gy0, gx1, gy1) of the cells *rect* covers."""
        c = self.cell_size
        return (
            rect.x // c,
            rect.y // c,
            (rect.x + rect.width - 1) // c,
            (rect.y + rect.height - 1) // c,
        )

    def insert(self, rect: Rectangle) -> None:
        gx0, gy0, gx1, gy1 = self._cell_range(rect)
        cells = self._cells
        for gx in range(gx0, gx1 + 1):
            for gy in range(gy0, gy1 + 1):
                bucket = cells.get((gx, gy))
                if bucket is None:
                    cells[(gx, gy)] = [rect]
                else:
                    bucket.append(rect)
        self.rects.append(rect)

    def blocker(self, rect: Rectangle) -> Rectangle | None:
        gx0, gy0, gx1, gy1 = self._cell_range(rect)
        # A query box much coarser than this level: scanning is cheaper.
        if (gx1 - gx0 + 1) * (gy1 - gy0 + 1) > len(self.rects):
            for other in self.rects:
                if rect.intersects(other):
                    return other
            return None
        cells = self._cells
        for gx in range(gx0, gx1 + 1):
            for gy in range(gy0, gy1 + 1):
                for other in cells.get((gx, gy), ()):
                    if rect.intersects(other):
                        return other
        return None

    def free_distance(
        self, rect: Rectangle, axis: int, direction: int, limit: int,
    ) -> int:
        c = self.cell_size
        lo, hi = rect.span(axis)
        plo, phi = rect.span(1 - axis)
        p0, p1 = plo // c, (phi - 1) // c

        if direction < 0:
            lanes = range((lo - 1) // c, (lo - limit) // c - 1, -1)
        else:
            lanes = range(hi // c, (hi - 1 + limit) // c + 1)

        if len(lanes) * (p1 - p0 + 1) > len(self.rects):
            return _nearest_along(self.rects, rect, axis, direction, limit)

        best = limit
        cells = self._cells
        for g in lanes:
            for p in range(p0, p1 + 1):
                key = (g, p) if axis == 0 else (p, g)
                bucket = cells.get(key)
                if bucket:
                    best = _nearest_along(bucket, rect, axis, direction, best)
            # Obstacles registered only in farther lanes are at least this far away.
            reach = lo - g * c if direction < 0 else (g + 1) * c - hi
            if best <= reach:
                break
        return best


class SpatialIndex:
    """Answers overlap and free-slide queries against placed rectangles.

    ``cell_size`` is the cell size of the finest level.
    """

    def __init__(self, cell_size: int = 1) -> None:
        if cell_size < 1:
            raise ValueError(f"cell_size must be >= 1, got {cell_size}")
        self.cell_size = cell_size
        self._levels: dict[int, _Grid] = {}
        self._count = 0

    @classmethod
    def from_rectangles(
        cls, rectangles: Iterable[Rectangle], cell_size: int = 1,
    ) -> SpatialIndex:
        index = cls(cell_size)
        for rect in rectangles:
            index.insert(rect)
        return index

    def __len__(self) -> int:
        return self._count

    def level_for(self, rect: Rectangle) -> int:
        """Cell size of the level *rect* is registered on."""
        c = self.cell_size
        longest = max(rect.width, rect.height)
        while longest > MAX_CELLS_PER_SIDE * c:
            c *= 2
        return c

    # ── Mutation ───────────────────────────────────────────────────

    def insert(self, rect: Rectangle) -> None:
        c = self.level_for(rect)
        grid = self._levels.get(c)
        if grid is None:
            grid = self._levels[c] = _Grid(c)
        grid.insert(rect)
        self._count += 1

    # ── Queries ────────────────────────────────────────────────────

    def blocker(self, rect: Rectangle) -> Rectangle | None:
        """First indexed rectangle that overlaps *rect*, or None if it is free."""
        for grid in self._levels.values():
            other = grid.blocker(rect)
            if other is not None:
                return other
        return None

    def free_distance(
        self, rect: Rectangle, axis: int, direction: int, limit: int,
    ) -> int:
        """How far *rect* can slide before touching an indexed rectangle.

        *axis* is 0 for horizontal and 1 for vertical, *direction* is -1
        or +1 along that axis.  The answer is capped at *limit*.  *rect*
        itself must not overlap anything in the index.

        Within a level, cells are scanned in order of distance from
        *rect*, and the scan stops as soon as no farther lane of cells
        could hold a closer obstacle.
        """
        best = max(limit, 0)
        for grid in self._levels.values():
            if best == 0:
                break
            best = grid.free_distance(rect, axis, direction, best)
        return best
