"""tagcloud — circular tag-cloud rectangle layouter.

The ``layout`` package places caller-sized rectangles around a center
without overlap.  Rendering, font sizing and word counting belong to the
caller.
"""

from tagcloud.layout import CircularCloudLayouter, Point, Rectangle, Size

__all__ = ["CircularCloudLayouter", "Point", "Rectangle", "Size"]
