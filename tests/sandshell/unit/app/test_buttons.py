from __future__ import annotations

import pytest

from sandshell.game.app.buttons import ButtonRegistry
from sandshell.game.core.models import BRUSH_IDS, ButtonId


def test_registry_roster_order_and_brushes() -> None:
    registry = ButtonRegistry()
    roster = tuple(button.id for button in registry)
    assert roster[:10] == BRUSH_IDS
    assert roster[10:] == (ButtonId.PLAY, ButtonId.SIZE, ButtonId.ERASE, ButtonId.GEN, ButtonId.MENU)
    assert [button.id for button in registry.brushes()] == list(BRUSH_IDS)
    assert registry.get(ButtonId.MENU).id is ButtonId.MENU
    assert not registry.is_brush(ButtonId.MENU)


def test_activate_brush_is_exclusive() -> None:
    registry = ButtonRegistry()
    for brush_id in BRUSH_IDS:
        registry.activate_brush(brush_id)
        assert registry.active_brushes() == (brush_id,)


def test_activate_brush_rejects_action_buttons() -> None:
    with pytest.raises(ValueError):
        ButtonRegistry().activate_brush(ButtonId.PLAY)
