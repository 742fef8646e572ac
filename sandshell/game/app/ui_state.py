"""Typed view state exposed by the shell controller."""

from __future__ import annotations

from dataclasses import dataclass

from panelkit.ui_runtime.geometry import Rect
from panelkit.ui_runtime.sprite_atlas import SpritePlacement
from sandshell.game.app.modals import ModalView
from sandshell.game.app.state import InteractionState
from sandshell.game.core.models import ButtonId
from sandshell.game.ui.layout_table import LayoutVariant


@dataclass(frozen=True, slots=True)
class SlotView:
    """One visible panel cell and the sprite it shows."""

    button_id: ButtonId | None
    rect: Rect
    placement: SpritePlacement | None


@dataclass(frozen=True, slots=True)
class PopupView:
    """Open modal with resolved window and option rectangles."""

    modal: ModalView
    window: Rect | None
    option_rects: tuple[Rect, ...]


@dataclass(frozen=True, slots=True)
class ShellUIState:
    """View-ready state snapshot."""

    variant: LayoutVariant | None
    border_class: str | None
    panel_rects: tuple[Rect, ...]
    game_frame: Rect | None
    slots: tuple[SlotView, ...]
    popup: PopupView | None
    interaction: InteractionState
