"""Layout serialization — JSON-safe dicts for external renderers."""

from __future__ import annotations

from .engine import CircularCloudLayouter
from .metrics import hull_density, tightness_ratio
from .models import Rectangle


def rectangle_to_dict(rect: Rectangle) -> dict:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def layout_to_dict(layouter: CircularCloudLayouter, *, with_metrics: bool = False) -> dict:
    """Serialize a layouter's center and placed rectangles (placement order)."""
    rects = layouter.all_rectangles()
    data = {
        "center": {"x": layouter.center.x, "y": layouter.center.y},
        "rectangles": [rectangle_to_dict(r) for r in rects],
    }
    if with_metrics:
        data["metrics"] = {
            "count": len(rects),
            "tightness_ratio": round(tightness_ratio(rects, layouter.center), 4),
            "hull_density": round(hull_density(rects), 4),
        }
    return data
