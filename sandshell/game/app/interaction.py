"""Interaction state machine: tool exclusivity, run toggle, brush size, modals."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from functools import partial
from typing import Protocol

from panelkit.api.timers import TimerPort
from sandshell.game.app.buttons import ButtonRegistry
from sandshell.game.app.events import ModalChanged, PanelInvalidated, ShellEventBus
from sandshell.game.app.modals import (
    CONFIRM_DIALOGS,
    MENU_ITEM_PREFIX,
    MENU_ITEMS,
    MODAL_ACCEPT,
    MODAL_CANCEL,
    MenuItemId,
    ModalView,
    build_modal_view,
)
from sandshell.game.app.state import ConfirmTopic, InteractionState, ModalDescriptor, ModalKind
from sandshell.game.bridge import protocol
from sandshell.game.bridge.event_bridge import EventBridge
from sandshell.game.bridge.orientation import OrientationTracker, RotationOutcome
from sandshell.game.bridge.protocol import ProtocolMessage
from sandshell.game.core.models import (
    MAX_BRUSH_SIZE,
    MIN_BRUSH_SIZE,
    PULSE_SECONDS,
    ButtonId,
    ButtonSpec,
    brush_id_from_name,
    brush_pixels,
    brush_size_from_pixels,
    next_brush_size,
    parse_brush_pixels,
)

logger = logging.getLogger(__name__)


class PanelRenderer(Protocol):
    def render(self, buttons: Iterable[ButtonSpec], *, brush_size: int, is_running: bool) -> int: ...


class FullscreenPort(Protocol):
    def toggle_fullscreen(self) -> bool:
        """Toggle fullscreen and return whether it is now on."""


class InteractionMachine:
    """Sole owner of `InteractionState`.

    Local actions mutate state, re-render and emit one protocol message.
    Inbound simulation messages mutate state and re-render without emitting,
    so nothing echoes back to the simulation.
    """

    def __init__(
        self,
        *,
        bridge: EventBridge,
        panel: PanelRenderer,
        timers: TimerPort,
        events: ShellEventBus | None = None,
        fullscreen: FullscreenPort | None = None,
        orientation: OrientationTracker | None = None,
        buttons: ButtonRegistry | None = None,
        state: InteractionState | None = None,
        pulse_seconds: float = PULSE_SECONDS,
    ) -> None:
        self._bridge = bridge
        self._panel = panel
        self._timers = timers
        self._events = events if events is not None else ShellEventBus()
        self._fullscreen = fullscreen
        self._orientation = orientation if orientation is not None else OrientationTracker(bridge)
        self._buttons = buttons if buttons is not None else ButtonRegistry()
        self._state = state if state is not None else InteractionState()
        self._pulse_seconds = pulse_seconds
        self._pulse_tokens: dict[ButtonId, int] = {}
        if not MIN_BRUSH_SIZE <= self._state.brush_size <= MAX_BRUSH_SIZE:
            raise ValueError(f"brush size out of range: {self._state.brush_size}")
        self._buttons.activate_brush(self._state.active_brush)

        self._actions: dict[str, Callable[[], bool]] = {
            brush.id.value: partial(self.select_brush, brush.id) for brush in self._buttons.brushes()
        }
        self._actions.update(
            {
                ButtonId.PLAY.value: self.toggle_run,
                ButtonId.SIZE.value: self.cycle_brush_size,
                ButtonId.ERASE.value: partial(self.open_confirm, ConfirmTopic.ERASE),
                ButtonId.GEN.value: partial(self.open_confirm, ConfirmTopic.GEN),
                ButtonId.MENU.value: self.open_menu,
                MODAL_ACCEPT: partial(self.answer_modal, True),
                MODAL_CANCEL: self.close_modal,
            }
        )
        # Keyed by `ProtocolMessage.verb`; handlers receive its argument.
        self._inbound: dict[str, Callable[[str], bool]] = {
            protocol.GAME_FULLSCREEN: lambda _argument: self.toggle_fullscreen(),
            protocol.WORLD_START: lambda _argument: self._apply_run_state(True),
            protocol.WORLD_STOP: lambda _argument: self._apply_run_state(False),
            protocol.WORLD_DEBUG_PREFIX: self._on_inbound_debug,
            protocol.BRUSH_SELECT_PREFIX: self._on_inbound_brush_select,
            protocol.BRUSH_SIZE_PREFIX: self._on_inbound_brush_size,
        }
        self._menu_actions: dict[MenuItemId, Callable[[], bool]] = {
            MenuItemId.FULLSCREEN: self.toggle_fullscreen,
            MenuItemId.DEBUG: self.toggle_debug,
            MenuItemId.AUTO_ROTATE: self.toggle_auto_rotate,
            MenuItemId.ROTATE_CW: partial(self._send_all, protocol.WORLD_ROTATE_CW),
            MenuItemId.ROTATE_CCW: partial(self._send_all, protocol.WORLD_ROTATE_CCW),
            MenuItemId.FLIP: partial(self._send_all, protocol.WORLD_ROTATE_CW, protocol.WORLD_ROTATE_CW),
        }

    @property
    def state(self) -> InteractionState:
        """Copy of the current state; mutate only through operations."""
        return replace(self._state)

    @property
    def buttons(self) -> ButtonRegistry:
        return self._buttons

    @property
    def events(self) -> ShellEventBus:
        return self._events

    def modal_view(self) -> ModalView | None:
        if self._state.active_modal is None:
            return None
        return build_modal_view(self._state.active_modal, self._state)

    def press(self, action_id: str) -> bool:
        """Dispatch a button or modal action id. Returns whether state changed."""
        handler = self._actions.get(action_id)
        if handler is not None:
            return handler()
        if action_id.startswith(MENU_ITEM_PREFIX):
            return self._on_menu_item(action_id.removeprefix(MENU_ITEM_PREFIX))
        logger.debug("action_ignored id=%s", action_id)
        return False

    def render(self, reason: str = "render") -> None:
        self._panel.render(
            self._buttons,
            brush_size=self._state.brush_size,
            is_running=self._state.is_running,
        )
        self._events.publish(PanelInvalidated(reason))

    # Local transitions

    def select_brush(self, brush_id: ButtonId) -> bool:
        if brush_id is self._state.active_brush:
            return False
        self._apply_brush(brush_id)
        self._bridge.send(protocol.brush_select(brush_id.value))
        return True

    def toggle_run(self) -> bool:
        self._state.is_running = not self._state.is_running
        self._pulse(ButtonId.PLAY)
        self._bridge.send(protocol.world_run(self._state.is_running))
        return True

    def cycle_brush_size(self) -> bool:
        self._state.brush_size = next_brush_size(self._state.brush_size)
        self._pulse(ButtonId.SIZE)
        self._bridge.send(protocol.brush_size(brush_pixels(self._state.brush_size)))
        return True

    def open_confirm(self, topic: ConfirmTopic) -> bool:
        return self.open_modal(ModalDescriptor.confirm(topic))

    def open_menu(self) -> bool:
        return self.open_modal(ModalDescriptor.menu())

    def open_modal(self, descriptor: ModalDescriptor) -> bool:
        """Open a modal unless one is already open; the first opener wins."""
        current = self._state.active_modal
        if current is not None:
            logger.debug(
                "modal_open_refused requested=%s active=%s",
                descriptor.owner_button_id.value,
                current.owner_button_id.value,
            )
            return False
        self._state.active_modal = descriptor
        self._buttons.set_active(descriptor.owner_button_id, True)
        self.render("modal_opened")
        self._events.publish(ModalChanged(descriptor))
        return True

    def answer_modal(self, accept: bool, *, menu_item: int | None = None) -> bool:
        """Resolve the open modal, running its action when accepted, then close it."""
        modal = self._state.active_modal
        if modal is None:
            return False
        if accept:
            if modal.kind is ModalKind.CONFIRM and modal.topic is not None:
                self._bridge.send(protocol.outbound(CONFIRM_DIALOGS[modal.topic].action))
            elif modal.kind is ModalKind.MENU and menu_item is not None:
                self._run_menu_item(menu_item)
        self._dismiss(modal)
        return True

    def close_modal(self) -> bool:
        """Outside click or explicit cancel."""
        modal = self._state.active_modal
        if modal is None:
            return False
        self._dismiss(modal)
        return True

    def activate_menu_item(self, index: int) -> bool:
        """Run one menu item and keep the menu open."""
        modal = self._state.active_modal
        if modal is None or modal.kind is not ModalKind.MENU:
            return False
        return self._run_menu_item(index)

    def toggle_fullscreen(self) -> bool:
        if self._fullscreen is not None:
            self._state.fullscreen = self._fullscreen.toggle_fullscreen()
        else:
            self._state.fullscreen = not self._state.fullscreen
        logger.info("fullscreen=%s", self._state.fullscreen)
        self._refresh_modal()
        return True

    def toggle_debug(self) -> bool:
        self._state.debug_mode = not self._state.debug_mode
        self._bridge.send(protocol.world_debug(self._state.debug_mode))
        self._refresh_modal()
        return True

    def toggle_auto_rotate(self) -> bool:
        self._state.auto_rotate = not self._state.auto_rotate
        logger.info("auto_rotate=%s", self._state.auto_rotate)
        self._refresh_modal()
        return True

    def on_orientation(self, angle: float) -> RotationOutcome:
        outcome = self._orientation.track(
            self._state.last_orientation_angle,
            angle,
            auto_rotate=self._state.auto_rotate,
        )
        self._state.last_orientation_angle = outcome.angle
        return outcome

    # Inbound messages: never emit.

    def apply_inbound(self, message: ProtocolMessage) -> bool:
        handler = self._inbound.get(message.verb)
        if handler is None:
            logger.debug("inbound_ignored payload=%s", message.payload)
            return False
        return handler(message.argument)

    def _apply_run_state(self, is_running: bool) -> bool:
        self._state.is_running = is_running
        self.render("run_state")
        return True

    def _on_inbound_debug(self, value: str) -> bool:
        self._state.debug_mode = value == "on"
        self._refresh_modal()
        return True

    def _on_inbound_brush_select(self, name: str) -> bool:
        brush_id = brush_id_from_name(name)
        if brush_id is None or not self._buttons.is_brush(brush_id):
            logger.debug("brush_select_ignored name=%s", name)
            return False
        if brush_id is self._state.active_brush:
            return False
        self._apply_brush(brush_id)
        return True

    def _on_inbound_brush_size(self, raw: str) -> bool:
        pixels = parse_brush_pixels(raw)
        if pixels is None:
            logger.debug("brush_size_ignored raw=%s", raw)
            return False
        size = brush_size_from_pixels(pixels)
        if size == self._state.brush_size:
            return False
        self._state.brush_size = size
        self.render("brush_size")
        return True

    # Helpers

    def _apply_brush(self, brush_id: ButtonId) -> None:
        self._buttons.activate_brush(brush_id)
        logger.info(
            "active_brush from=%s to=%s",
            self._state.active_brush.value,
            brush_id.value,
        )
        self._state.active_brush = brush_id
        self.render("brush")

    def _pulse(self, button_id: ButtonId) -> None:
        token = self._pulse_tokens.get(button_id, 0) + 1
        self._pulse_tokens[button_id] = token
        self._set_button_activity(button_id, True)
        self._timers.call_later(self._pulse_seconds, partial(self._end_pulse, button_id, token))

    def _end_pulse(self, button_id: ButtonId, token: int) -> None:
        # A newer pulse owns the flag until its own reset fires.
        if self._pulse_tokens.get(button_id) != token:
            return
        self._set_button_activity(button_id, False)

    def _set_button_activity(self, button_id: ButtonId, is_active: bool) -> None:
        self._buttons.set_active(button_id, is_active)
        self.render("activity")

    def _dismiss(self, modal: ModalDescriptor) -> None:
        self._state.active_modal = None
        self._buttons.set_active(modal.owner_button_id, False)
        self.render("modal_closed")
        self._events.publish(ModalChanged(None))

    def _on_menu_item(self, suffix: str) -> bool:
        try:
            index = int(suffix)
        except ValueError:
            return False
        return self.activate_menu_item(index)

    def _run_menu_item(self, index: int) -> bool:
        if not 0 <= index < len(MENU_ITEMS):
            return False
        return self._menu_actions[MENU_ITEMS[index]]()

    def _send_all(self, *payloads: str) -> bool:
        for payload in payloads:
            self._bridge.send(protocol.outbound(payload))
        return True

    def _refresh_modal(self) -> None:
        if self._state.active_modal is not None:
            self._events.publish(ModalChanged(self._state.active_modal))
