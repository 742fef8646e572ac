"""Interaction state owned by the interaction machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from sandshell.game.core.models import DEFAULT_BRUSH, DEFAULT_BRUSH_SIZE, ButtonId


class ModalKind(StrEnum):
    CONFIRM = "confirm"
    MENU = "menu"


class ConfirmTopic(StrEnum):
    """World actions that ask before running."""

    ERASE = "Erase"
    GEN = "Gen"


@dataclass(frozen=True, slots=True)
class ModalDescriptor:
    """The single open modal and the button that opened it."""

    kind: ModalKind
    owner_button_id: ButtonId
    topic: ConfirmTopic | None = None

    @classmethod
    def confirm(cls, topic: ConfirmTopic) -> ModalDescriptor:
        return cls(kind=ModalKind.CONFIRM, owner_button_id=ButtonId(topic.value), topic=topic)

    @classmethod
    def menu(cls) -> ModalDescriptor:
        return cls(kind=ModalKind.MENU, owner_button_id=ButtonId.MENU)


@dataclass(slots=True)
class InteractionState:
    """Process-wide UI state; mutated only by `InteractionMachine`."""

    active_brush: ButtonId = DEFAULT_BRUSH
    brush_size: int = DEFAULT_BRUSH_SIZE
    is_running: bool = True
    active_modal: ModalDescriptor | None = None
    last_orientation_angle: float = 0.0
    debug_mode: bool = False
    fullscreen: bool = False
    auto_rotate: bool = True

    @property
    def debug_label(self) -> str:
        return f"debug mode: {'on' if self.debug_mode else 'off'}"
