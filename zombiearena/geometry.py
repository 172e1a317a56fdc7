"""Plane geometry used by the game: points and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point or displacement in world or screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span(self) -> tuple[float, float, float, float]:
        xs = (self.left, self.left + self.width)
        ys = (self.top, self.top + self.height)
        return min(xs), max(xs), min(ys), max(ys)

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap with a non-empty area."""
        min_x1, max_x1, min_y1, max_y1 = self._span()
        min_x2, max_x2, min_y2, max_y2 = other._span()
        inter_left = max(min_x1, min_x2)
        inter_right = min(max_x1, max_x2)
        inter_top = max(min_y1, min_y2)
        inter_bottom = min(max_y1, max_y2)
        return inter_left < inter_right and inter_top < inter_bottom

    def inset(self, margin: float) -> Rect:
        """Shift the corner in by ``margin`` and shrink each side by ``margin``."""
        return Rect(
            self.left + margin,
            self.top + margin,
            self.width - margin,
            self.height - margin,
        )

    @classmethod
    def around(cls, center: Vector, size: float, rotation: float = 0.0) -> Rect:
        """Bounding box of a square of ``size`` centred on ``center``, rotated by degrees."""
        half = size / 2
        radians = math.radians(rotation)
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        corners = [(-half, -half), (half, -half), (half, half), (-half, half)]
        xs = [center.x + cx * cos_a - cy * sin_a for cx, cy in corners]
        ys = [center.y + cx * sin_a + cy * cos_a for cx, cy in corners]
        left, top = min(xs), min(ys)
        return cls(left, top, max(xs) - left, max(ys) - top)