"""Geometry primitives shared by layout and rendering code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Size:
    """Width/height pair in device-independent pixels."""

    w: float
    h: float

    @property
    def is_measurable(self) -> bool:
        """Return whether both dimensions are strictly positive."""
        return self.w > 0 and self.h > 0


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def size(self) -> Size:
        return Size(self.w, self.h)

    @property
    def is_measurable(self) -> bool:
        return self.w > 0 and self.h > 0

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h

    def centered(self, w: float, h: float) -> Rect:
        """Return a `w` x `h` rectangle centred inside this one."""
        return Rect(self.x + (self.w - w) / 2, self.y + (self.h - h) / 2, w, h)


@dataclass(frozen=True, slots=True)
class CellCoord:
    """Grid cell coordinate in row/column space."""

    row: int
    col: int
