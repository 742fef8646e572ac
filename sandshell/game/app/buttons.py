"""Button roster and activation flags."""

from __future__ import annotations

from collections.abc import Iterator

from sandshell.game.core.models import BRUSH_IDS, ButtonId, ButtonKind, ButtonSpec
from sandshell.game.ui.sprite_sheet import frames


def default_buttons() -> tuple[ButtonSpec, ...]:
    """Canonical roster: ten brushes plus run, size, generate, erase and menu."""
    brushes = tuple(
        ButtonSpec(id=brush_id, kind=ButtonKind.BRUSH, sprite_frames=frames(brush_id.value))
        for brush_id in BRUSH_IDS
    )
    actions = (
        ButtonSpec(id=ButtonId.PLAY, kind=ButtonKind.ACTION, sprite_frames=frames("Start", "Stop")),
        ButtonSpec(
            id=ButtonId.SIZE,
            kind=ButtonKind.ACTION,
            sprite_frames=frames("Size1", "Size2", "Size3", "Size4", "Size5"),
        ),
        ButtonSpec(id=ButtonId.ERASE, kind=ButtonKind.ACTION, sprite_frames=frames("Erase")),
        ButtonSpec(id=ButtonId.GEN, kind=ButtonKind.ACTION, sprite_frames=frames("Gen")),
        ButtonSpec(id=ButtonId.MENU, kind=ButtonKind.ACTION, sprite_frames=frames("Menu")),
    )
    return brushes + actions


class ButtonRegistry:
    """Ordered roster of button specs keyed by id."""

    def __init__(self, buttons: tuple[ButtonSpec, ...] | None = None) -> None:
        roster = buttons if buttons is not None else default_buttons()
        self._buttons: dict[ButtonId, ButtonSpec] = {button.id: button for button in roster}

    def __iter__(self) -> Iterator[ButtonSpec]:
        return iter(self._buttons.values())

    def get(self, button_id: ButtonId) -> ButtonSpec:
        return self._buttons[button_id]

    def brushes(self) -> tuple[ButtonSpec, ...]:
        return tuple(button for button in self._buttons.values() if button.is_brush)

    def is_brush(self, button_id: ButtonId) -> bool:
        button = self._buttons.get(button_id)
        return button is not None and button.is_brush

    def active_brushes(self) -> tuple[ButtonId, ...]:
        return tuple(button.id for button in self.brushes() if button.is_active)

    def activate_brush(self, brush_id: ButtonId) -> None:
        """Make `brush_id` the only active brush."""
        if not self.is_brush(brush_id):
            raise ValueError(f"not a brush button: {brush_id!r}")
        for button in self.brushes():
            button.is_active = button.id is brush_id

    def set_active(self, button_id: ButtonId, is_active: bool) -> None:
        self._buttons[button_id].is_active = is_active
