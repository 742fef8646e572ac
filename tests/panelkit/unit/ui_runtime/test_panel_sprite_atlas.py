from __future__ import annotations

from dataclasses import dataclass

import pytest

from panelkit.ui_runtime.sprite_atlas import (
    SpriteAtlas,
    SpritePlacement,
    compute_placement,
    place_sprite,
    source_region,
)


@dataclass
class Element:
    width: float
    height: float
    background: SpritePlacement | None = None


def test_place_sprite_square_element_scales_by_two() -> None:
    element = Element(52.0, 52.0)
    placement = place_sprite(element, 28.0, 55.0, 190.0, 190.0, 26.0)
    assert element.background == placement
    assert placement.background_width == pytest.approx(380.0)
    assert placement.background_height == pytest.approx(380.0)
    assert placement.offset_x == pytest.approx(-56.0)
    assert placement.offset_y == pytest.approx(-110.0)


def test_place_sprite_scales_axes_independently() -> None:
    placement = compute_placement(
        1.0, 28.0, 52.0, 13.0, atlas_width=190.0, atlas_height=190.0, sprite_size=26.0
    )
    assert placement.background_width == pytest.approx(380.0)
    assert placement.background_height == pytest.approx(95.0)
    assert placement.offset_x == pytest.approx(-2.0)
    assert placement.offset_y == pytest.approx(-14.0)


def test_place_sprite_zero_sized_element_yields_zero_scale() -> None:
    element = Element(0.0, 0.0)
    placement = SpriteAtlas(190, 190, 26).place(element, 109.0, 1.0)
    assert placement == SpritePlacement(0.0, 0.0, -0.0, -0.0)
    assert source_region(placement, 0.0, 0.0, atlas_width=190, atlas_height=190) is None


def test_source_region_recovers_sprite_rect() -> None:
    atlas = SpriteAtlas(190, 190, 26)
    placement = atlas.placement(136.0, 28.0, 150.0, 80.0)
    region = source_region(placement, 150.0, 80.0, atlas_width=190, atlas_height=190)
    assert region == pytest.approx((136.0, 28.0, 26.0, 26.0))
