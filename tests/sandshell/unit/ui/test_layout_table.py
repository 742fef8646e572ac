from __future__ import annotations

from dataclasses import replace

import pytest

from sandshell.game.core.models import ButtonId
from sandshell.game.ui.layout_table import (
    LAYOUT_TABLE,
    LayoutTableError,
    LayoutVariant,
    PanelSpec,
    Region,
    validate_layout_table,
)

ALL_BUTTONS = tuple(ButtonId)


def test_shipped_table_is_valid() -> None:
    validate_layout_table(LAYOUT_TABLE, ALL_BUTTONS)


def test_every_variant_places_every_button_once() -> None:
    for variant, spec in LAYOUT_TABLE.items():
        placed = [button for _, panel in spec.panels() for button in panel.button_ids()]
        assert sorted(placed) == sorted(ALL_BUTTONS), variant


def test_full_horizontal_has_two_panels_around_the_game() -> None:
    spec = LAYOUT_TABLE[LayoutVariant.FULL_HORIZONTAL]
    assert spec.panel_b is not None
    assert spec.element_order == (Region.PANEL_A, Region.GAME_WINDOW, Region.PANEL_B)
    assert LAYOUT_TABLE[LayoutVariant.SMALL_VERTICAL].panel_b is None


def test_validation_rejects_missing_variant() -> None:
    table = dict(LAYOUT_TABLE)
    del table[LayoutVariant.SMALL_VERTICAL]
    with pytest.raises(LayoutTableError, match="missing variants"):
        validate_layout_table(table, ALL_BUTTONS)


def test_validation_rejects_unknown_button() -> None:
    known = tuple(button for button in ALL_BUTTONS if button is not ButtonId.WASP)
    with pytest.raises(LayoutTableError, match="unknown button id"):
        validate_layout_table(LAYOUT_TABLE, known)


def test_validation_rejects_bad_slot_count() -> None:
    table = dict(LAYOUT_TABLE)
    spec = table[LayoutVariant.FULL_VERTICAL]
    table[LayoutVariant.FULL_VERTICAL] = replace(
        spec, panel_a=PanelSpec(columns=4, rows=4, button_slots=spec.panel_a.button_slots[:-1])
    )
    with pytest.raises(LayoutTableError, match="slots for a 4x4 grid"):
        validate_layout_table(table, ALL_BUTTONS)


def test_validation_rejects_duplicate_button() -> None:
    table = dict(LAYOUT_TABLE)
    spec = table[LayoutVariant.FULL_HORIZONTAL]
    assert spec.panel_b is not None
    slots = list(spec.panel_b.button_slots)
    slots[4] = ButtonId.SAND
    table[LayoutVariant.FULL_HORIZONTAL] = replace(spec, panel_b=replace(spec.panel_b, button_slots=tuple(slots)))
    with pytest.raises(LayoutTableError, match="placed twice"):
        validate_layout_table(table, ALL_BUTTONS)


def test_validation_rejects_region_order_mismatch() -> None:
    table = dict(LAYOUT_TABLE)
    spec = table[LayoutVariant.SMALL_HORIZONTAL]
    table[LayoutVariant.SMALL_HORIZONTAL] = replace(
        spec, element_order=(Region.PANEL_A, Region.GAME_WINDOW, Region.PANEL_B)
    )
    with pytest.raises(LayoutTableError, match="does not match its panels"):
        validate_layout_table(table, ALL_BUTTONS)
