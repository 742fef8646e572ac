"""Confirmation dialog data, menu items and modal view-models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from sandshell.game.app.state import ConfirmTopic, InteractionState, ModalDescriptor, ModalKind
from sandshell.game.bridge.protocol import WORLD_ERASE, WORLD_GEN

MODAL_ACCEPT = "modal:accept"
MODAL_CANCEL = "modal:cancel"
MENU_ITEM_PREFIX = "menu_item:"


@dataclass(frozen=True, slots=True)
class ConfirmDialogSpec:
    color: str
    message: str
    yes_label: str
    no_label: str
    action: str


CONFIRM_DIALOGS: dict[ConfirmTopic, ConfirmDialogSpec] = {
    ConfirmTopic.ERASE: ConfirmDialogSpec(
        color="red",
        message="do you really want to erase the world?",
        yes_label="erase",
        no_label="cancel",
        action=WORLD_ERASE,
    ),
    ConfirmTopic.GEN: ConfirmDialogSpec(
        color="green",
        message="do you really want to generate a new world?",
        yes_label="gen",
        no_label="cancel",
        action=WORLD_GEN,
    ),
}


class MenuItemId(StrEnum):
    FULLSCREEN = "fullscreen"
    DEBUG = "debug"
    AUTO_ROTATE = "auto_rotate"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    FLIP = "flip"


MENU_ITEMS: tuple[MenuItemId, ...] = tuple(MenuItemId)


def _on_off(flag: bool) -> str:
    return "on" if flag else "off"


def menu_item_label(item: MenuItemId, state: InteractionState) -> str:
    """Menu text, reflecting live toggle state."""
    if item is MenuItemId.FULLSCREEN:
        return f"full screen: {_on_off(state.fullscreen)}"
    if item is MenuItemId.DEBUG:
        return state.debug_label
    if item is MenuItemId.AUTO_ROTATE:
        return f"auto rotate world: {_on_off(state.auto_rotate)}"
    if item is MenuItemId.ROTATE_CW:
        return "rotate the world CW"
    if item is MenuItemId.ROTATE_CCW:
        return "rotate the world CCW"
    return "flip the world"


def menu_action_id(index: int) -> str:
    return f"{MENU_ITEM_PREFIX}{index}"


@dataclass(frozen=True, slots=True)
class ModalOption:
    action_id: str
    label: str
    color: str


@dataclass(frozen=True, slots=True)
class ModalView:
    """Everything a frontend needs to draw the open modal."""

    kind: ModalKind
    border_color: str
    message: str | None
    options: tuple[ModalOption, ...]

    @property
    def stacked(self) -> bool:
        return self.kind is ModalKind.MENU


def build_modal_view(modal: ModalDescriptor, state: InteractionState) -> ModalView:
    if modal.kind is ModalKind.CONFIRM and modal.topic is not None:
        dialog = CONFIRM_DIALOGS[modal.topic]
        return ModalView(
            kind=modal.kind,
            border_color=dialog.color,
            message=dialog.message,
            options=(
                ModalOption(MODAL_ACCEPT, dialog.yes_label, dialog.color),
                ModalOption(MODAL_CANCEL, dialog.no_label, "white"),
            ),
        )
    return ModalView(
        kind=ModalKind.MENU,
        border_color="white",
        message=None,
        options=tuple(
            ModalOption(menu_action_id(index), menu_item_label(item, state), "white")
            for index, item in enumerate(MENU_ITEMS)
        ),
    )
