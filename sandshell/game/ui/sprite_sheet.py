"""Static coordinate table for the shared icon atlas."""

from __future__ import annotations

from panelkit.ui_runtime.sprite_atlas import SpriteAtlas
from sandshell.game.core.models import SpriteFrame

ATLAS = SpriteAtlas(width=190, height=190, sprite_size=26)


def _frame(inactive_x: int, inactive_y: int, active_x: int, active_y: int) -> SpriteFrame:
    return SpriteFrame(inactive=(inactive_x, inactive_y), active=(active_x, active_y))


SPRITE_SHEET: dict[str, SpriteFrame] = {
    "Empty": _frame(1, 1, 28, 1),
    "Stone": _frame(55, 1, 82, 1),
    "Sand": _frame(109, 1, 136, 1),
    "Water": _frame(163, 1, 1, 28),
    "Seed": _frame(28, 28, 55, 28),
    "Ant": _frame(82, 28, 109, 28),
    "Wasp": _frame(136, 28, 163, 28),
    "Acid": _frame(1, 55, 28, 55),
    "Fire": _frame(55, 55, 82, 55),
    "Ice": _frame(109, 55, 136, 55),
    "Start": _frame(163, 55, 1, 82),
    "Stop": _frame(28, 82, 55, 82),
    "Erase": _frame(82, 82, 109, 82),
    "Gen": _frame(136, 82, 163, 82),
    "Size1": _frame(1, 109, 28, 109),
    "Size2": _frame(55, 109, 82, 109),
    "Size3": _frame(109, 109, 136, 109),
    "Size4": _frame(163, 109, 1, 136),
    "Size5": _frame(28, 136, 55, 136),
    "Menu": _frame(82, 136, 109, 136),
    "Info": _frame(109, 136, 136, 136),
    "Options": _frame(163, 136, 1, 163),
}


def frames(*names: str) -> tuple[SpriteFrame, ...]:
    """Return frames for sprite names, in order."""
    return tuple(SPRITE_SHEET[name] for name in names)
