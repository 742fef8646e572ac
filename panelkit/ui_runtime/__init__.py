"""Panelkit UI geometry helpers."""

from panelkit.ui_runtime.geometry import CellCoord, Rect, Size
from panelkit.ui_runtime.grid_layout import GridLayout
from panelkit.ui_runtime.sprite_atlas import (
    SpriteAtlas,
    SpriteElement,
    SpritePlacement,
    place_sprite,
    source_region,
)

__all__ = [
    "CellCoord",
    "GridLayout",
    "Rect",
    "Size",
    "SpriteAtlas",
    "SpriteElement",
    "SpritePlacement",
    "place_sprite",
    "source_region",
]
