"""Sprite placement inside a shared image atlas.

A sprite is a `sprite_size` x `sprite_size` region of the atlas addressed by
its top-left pixel. Rendering a sprite into an element of arbitrary size is
done the CSS-background way: the whole atlas is scaled so the sprite region
matches the element, then shifted so the region's corner sits on the
element's corner. X and Y scale independently, so the region always fills
the element exactly even when the element is not square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SpritePlacement:
    """Scaled atlas size and offset, relative to the element's top-left."""

    background_width: float
    background_height: float
    offset_x: float
    offset_y: float


class SpriteElement(Protocol):
    """Anything with a measured size that can carry a sprite background."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    background: SpritePlacement | None


@dataclass(frozen=True, slots=True)
class SpriteAtlas:
    """Atlas dimensions and the fixed per-sprite size, in atlas pixels."""

    width: int
    height: int
    sprite_size: int

    def placement(
        self,
        frame_x: float,
        frame_y: float,
        element_width: float,
        element_height: float,
    ) -> SpritePlacement:
        return compute_placement(
            frame_x,
            frame_y,
            element_width,
            element_height,
            atlas_width=self.width,
            atlas_height=self.height,
            sprite_size=self.sprite_size,
        )

    def place(self, element: SpriteElement, frame_x: float, frame_y: float) -> SpritePlacement:
        return place_sprite(element, frame_x, frame_y, self.width, self.height, self.sprite_size)


def compute_placement(
    frame_x: float,
    frame_y: float,
    element_width: float,
    element_height: float,
    *,
    atlas_width: float,
    atlas_height: float,
    sprite_size: float,
) -> SpritePlacement:
    """Return the background placement that maps one sprite onto an element."""
    scale_x = element_width / sprite_size
    scale_y = element_height / sprite_size
    return SpritePlacement(
        background_width=atlas_width * scale_x,
        background_height=atlas_height * scale_y,
        offset_x=-frame_x * scale_x,
        offset_y=-frame_y * scale_y,
    )


def place_sprite(
    element: SpriteElement,
    frame_x: float,
    frame_y: float,
    atlas_width: float,
    atlas_height: float,
    sprite_size: float,
) -> SpritePlacement:
    """Set `element.background` so the sprite at `(frame_x, frame_y)` fills it.

    A zero-sized element gets a zero-scaled background; the next render pass
    after the element is measured corrects it.
    """
    placement = compute_placement(
        frame_x,
        frame_y,
        max(0.0, float(element.width)),
        max(0.0, float(element.height)),
        atlas_width=atlas_width,
        atlas_height=atlas_height,
        sprite_size=sprite_size,
    )
    element.background = placement
    return placement


def source_region(
    placement: SpritePlacement,
    element_width: float,
    element_height: float,
    *,
    atlas_width: float,
    atlas_height: float,
) -> tuple[float, float, float, float] | None:
    """Invert a placement into the atlas region `(x, y, w, h)` it shows.

    Painters that blit from the atlas instead of scaling a background use this.
    Returns None for a zero-scaled placement.
    """
    if placement.background_width <= 0 or placement.background_height <= 0:
        return None
    scale_x = placement.background_width / atlas_width
    scale_y = placement.background_height / atlas_height
    return (
        -placement.offset_x / scale_x,
        -placement.offset_y / scale_y,
        element_width / scale_x,
        element_height / scale_y,
    )
