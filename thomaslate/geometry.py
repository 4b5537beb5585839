"""Plain 2D vector and axis-aligned rectangle types used throughout the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)


@dataclass(frozen=True)
class Rect:
    """An immutable axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span_x(self) -> tuple[float, float]:
        edges = (self.left, self.left + self.width)
        return min(edges), max(edges)

    def _span_y(self) -> tuple[float, float]:
        edges = (self.top, self.top + self.height)
        return min(edges), max(edges)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap by a non-zero area.

        Rectangles that only share an edge do not intersect. Negative widths
        and heights are allowed and describe the same area mirrored.
        """
        min_x1, max_x1 = self._span_x()
        min_y1, max_y1 = self._span_y()
        min_x2, max_x2 = other._span_x()
        min_y2, max_y2 = other._span_y()
        inter_left = max(min_x1, min_x2)
        inter_right = min(max_x1, max_x2)
        inter_top = max(min_y1, min_y2)
        inter_bottom = min(max_y1, max_y2)
        return inter_left < inter_right and inter_top < inter_bottom