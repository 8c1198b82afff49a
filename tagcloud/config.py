"""Shared tuning constants for the cloud layouter.

The spiral search, the compaction step and the spatial index all read
their parameters from a single ``LayoutRules`` instance.  A finer spiral
packs tighter but tries more candidates per placement.

Change a value here and every layouter built with the default rules
picks it up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Tuning knobs for the circular cloud layouter.

    Lengths are in layout units (the integer grid rectangles live on).
    """

    angle_step: float = 0.05
    """Fixed angular increment between two spiral candidates (radians)."""

    spiral_pitch: float = 0.5
    """Outward growth per full spiral revolution, measured in short sides
    of the rectangle being placed.  0.5 means every turn moves half a
    rectangle further out."""

    index_cell_size: int = 1
    """Cell size of the finest spatial-index level.  Larger rectangles go
    to coarser levels (this size times a power of two), so placing a tiny
    rectangle first never makes later large ones expensive."""

    # ── Derived helpers ────────────────────────────────────────────

    def radius_step(self, width: int, height: int) -> float:
        """Radius growth per radian of spiral for a rectangle of this size.

        Scaling by the short side keeps the number of spiral steps needed
        to clear a cloud roughly independent of absolute rectangle size.
        """
        return self.spiral_pitch * min(width, height) / (2 * math.pi)


# Default rules used when a layouter is built without explicit ones.
LAYOUT_RULES = LayoutRules()
