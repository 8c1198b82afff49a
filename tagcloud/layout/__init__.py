"""Layout — packs rectangles into a tight circular cloud around a center.

Submodules:
  models        Point / Size / Rectangle value types and error classes.
  geometry      Pure helpers (overlap test, centering, pair finder).
  spiral        Outward Archimedean spiral of candidate positions.
  index         Multi-level bucket-grid spatial index over placed rectangles.
  compaction    Pull a placed rectangle toward the center.
  engine        CircularCloudLayouter (spiral search + compaction).
  metrics       Tightness ratio and density of a finished cloud.
  serialization JSON conversion (layout_to_dict).
"""

from .models import (
    Point, Size, Rectangle,
    InvalidArgumentError, InvalidCenterError, InvalidSizeError,
)
from .engine import CircularCloudLayouter
from .geometry import intersects_any, intersecting_pairs
from .spiral import spiral_points
from .index import SpatialIndex
from .compaction import compact
from .metrics import tightness_ratio, covered_area, hull_density
from .serialization import layout_to_dict

__all__ = [
    # Models
    "Point", "Size", "Rectangle",
    "InvalidArgumentError", "InvalidCenterError", "InvalidSizeError",
    # Engine
    "CircularCloudLayouter",
    # Building blocks (used by tests)
    "intersects_any", "intersecting_pairs", "spiral_points",
    "SpatialIndex", "compact",
    # Metrics and serialization
    "tightness_ratio", "covered_area", "hull_density", "layout_to_dict",
]
