"""Layout value types and error classes."""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import box as shapely_box


# ── Value types ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """An integer position on the layout grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width and height of a requested rectangle.

    Not validated on construction: the layouter rejects non-positive
    sizes when they are placed.
    """

    width: int
    height: int

    @property
    def is_positive(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned box with origin (x, y) and the given size.

    Edges are half-open: the box covers ``[x, x + width)`` horizontally
    and ``[y, y + height)`` vertically, so two boxes that share an edge
    do not intersect.
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_center(cls, center: Point, size: Size) -> Rectangle:
        """Box of *size* whose center lies on *center* (origin = center - size // 2)."""
        return cls(
            center.x - size.width // 2,
            center.y - size.height // 2,
            size.width,
            size.height,
        )

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        """Inverse of ``from_center``."""
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height

    def span(self, axis: int) -> tuple[int, int]:
        """Half-open extent along *axis* (0 = horizontal, 1 = vertical)."""
        if axis == 0:
            return (self.x, self.x + self.width)
        return (self.y, self.y + self.height)

    def intersects(self, other: Rectangle) -> bool:
        """True if the two boxes share interior area.  Touching is not overlap."""
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    def offset(self, dx: int, dy: int) -> Rectangle:
        return Rectangle(self.x + dx, self.y + dy, self.width, self.height)

    def as_box(self):
        """Shapely polygon covering the same area."""
        return shapely_box(self.x, self.y, self.right, self.bottom)


# ── Errors ─────────────────────────────────────────────────────────


class InvalidArgumentError(ValueError):
    """Base class for rejected layouter inputs."""


class InvalidCenterError(InvalidArgumentError):
    """Raised when a layouter is built around a center with a negative coordinate."""

    def __init__(self, center: Point) -> None:
        self.center = center
        super().__init__(f"Invalid center ({center.x}, {center.y}): coordinates must be >= 0")


class InvalidSizeError(InvalidArgumentError):
    """Raised when a rectangle with a non-positive width or height is requested."""

    def __init__(self, size: Size) -> None:
        self.size = size
        super().__init__(f"Invalid size {size.width}x{size.height}: width and height must be > 0")
