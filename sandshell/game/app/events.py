"""Typed shell events and the bus that carries them to views."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias, TypeVar

from sandshell.game.app.state import ModalDescriptor
from sandshell.game.ui.layout_table import LayoutVariant


@dataclass(frozen=True, slots=True)
class PanelInvalidated:
    """Button visuals changed and need repainting."""

    reason: str


@dataclass(frozen=True, slots=True)
class ModalChanged:
    """A modal opened, closed, or its content changed."""

    modal: ModalDescriptor | None


@dataclass(frozen=True, slots=True)
class LayoutApplied:
    """A layout pass finished."""

    variant: LayoutVariant
    rebuilt: bool


ShellEvent: TypeAlias = PanelInvalidated | ModalChanged | LayoutApplied
SHELL_EVENT_TYPES: tuple[type[ShellEvent], ...] = (PanelInvalidated, ModalChanged, LayoutApplied)

TShellEvent = TypeVar("TShellEvent", PanelInvalidated, ModalChanged, LayoutApplied)
Unsubscribe = Callable[[], None]


class ShellEventBus:
    """Synchronous fan-out of shell events to handlers registered per event class.

    Handlers run in subscription order on the caller's thread.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[type[ShellEvent], list[Callable[[ShellEvent], None]]] = defaultdict(
            list
        )

    def subscribe(
        self,
        event_type: type[TShellEvent],
        handler: Callable[[TShellEvent], None],
    ) -> Unsubscribe:
        """Register `handler`; the returned callable detaches it again."""
        if event_type not in SHELL_EVENT_TYPES:
            raise TypeError(f"not a shell event type: {event_type!r}")
        handlers = self._handlers[event_type]
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event: ShellEvent) -> int:
        """Deliver `event` and return how many handlers saw it."""
        handlers = tuple(self._handlers.get(type(event), ()))
        for handler in handlers:
            handler(event)
        return len(handlers)
