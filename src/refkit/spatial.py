"""Axis-aligned rectangular cells with Euclidean distance queries."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidDimensionError


@dataclass(frozen=True, slots=True)
class SpatialCell:
    """Rectangle described by its centroid and its size.

    Width and height must be strictly positive. Anything else, including NaN,
    is rejected at construction.
    """

    center_x: float
    center_y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if not self.width > 0:
            raise InvalidDimensionError(f"width must be positive, got {self.width!r}")
        if not self.height > 0:
            raise InvalidDimensionError(f"height must be positive, got {self.height!r}")

    def area(self) -> float:
        return self.width * self.height

    def distance_to(self, point_x: float, point_y: float) -> float:
        """Euclidean distance from the centroid to ``(point_x, point_y)``."""
        dx = float(point_x) - float(self.center_x)
        dy = float(point_y) - float(self.center_y)
        return math.sqrt(dx * dx + dy * dy)

    def distance_to_origin(self) -> float:
        return self.distance_to(0.0, 0.0)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)``."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.center_x - half_w,
            self.center_y - half_h,
            self.center_x + half_w,
            self.center_y + half_h,
        )

    def contains(self, point_x: float, point_y: float) -> bool:
        min_x, min_y, max_x, max_y = self.bounds()
        return min_x <= point_x <= max_x and min_y <= point_y <= max_y
