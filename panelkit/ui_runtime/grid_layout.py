"""Uniform grid layout and hit-testing helpers."""

from __future__ import annotations

from dataclasses import dataclass

from panelkit.ui_runtime.geometry import CellCoord, Rect


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Splits a rectangle into `columns` x `rows` equal cells, row-major."""

    rect: Rect
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"grid needs positive tracks, got {self.columns}x{self.rows}")

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @property
    def cell_width(self) -> float:
        return self.rect.w / self.columns

    @property
    def cell_height(self) -> float:
        return self.rect.h / self.rows

    def coord_for_index(self, index: int) -> CellCoord:
        """Return row/column for a row-major cell index."""
        if not 0 <= index < self.cell_count:
            raise IndexError(f"cell index out of range: {index}")
        return CellCoord(row=index // self.columns, col=index % self.columns)

    def cell_rect(self, index: int) -> Rect:
        """Return pixel rectangle for a row-major cell index."""
        coord = self.coord_for_index(index)
        return Rect(
            x=self.rect.x + coord.col * self.cell_width,
            y=self.rect.y + coord.row * self.cell_height,
            w=self.cell_width,
            h=self.cell_height,
        )

    def index_at(self, px: float, py: float) -> int | None:
        """Convert a point to a row-major cell index, or None when outside."""
        if not self.rect.is_measurable or not self.rect.contains(px, py):
            return None
        col = min(int((px - self.rect.x) // self.cell_width), self.columns - 1)
        row = min(int((py - self.rect.y) // self.cell_height), self.rows - 1)
        return row * self.columns + col
