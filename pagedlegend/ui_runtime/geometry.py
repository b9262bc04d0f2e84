"""Legend geometry primitives and orientation axis helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Orient = Literal["horizontal", "vertical"]
Axis = Literal[0, 1]

ORIENTS: tuple[Orient, ...] = ("horizontal", "vertical")


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h

    def origin(self, axis: int) -> float:
        """Return x for axis 0 and y for axis 1."""
        return self.x if axis == 0 else self.y

    def extent(self, axis: int) -> float:
        """Return width for axis 0 and height for axis 1."""
        return self.w if axis == 0 else self.h

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def union(self, other: Rect) -> Rect:
        """Return smallest rectangle covering both rectangles."""
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.x + self.w, other.x + other.w)
        bottom = max(self.y + self.h, other.y + other.h)
        return Rect(left, top, right - left, bottom - top)


EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


def orient_axis(orient: str) -> Axis:
    """Return primary axis index for an orientation."""
    return 1 if orient == "vertical" else 0


def rect_on_axes(
    axis: int,
    *,
    primary_origin: float,
    primary_extent: float,
    cross_origin: float,
    cross_extent: float,
) -> Rect:
    """Build a rectangle from primary/cross axis components."""
    if axis == 0:
        return Rect(primary_origin, cross_origin, primary_extent, cross_extent)
    return Rect(cross_origin, primary_origin, cross_extent, primary_extent)
