"""Shell controller: layout passes, click routing and inbound messages."""

from __future__ import annotations

import logging

from panelkit.api.timers import TimerPort
from panelkit.runtime.debug_config import enabled_layout_trace
from panelkit.ui_runtime.geometry import Size
from sandshell.game.app.buttons import ButtonRegistry
from sandshell.game.app.events import LayoutApplied, ModalChanged, ShellEventBus
from sandshell.game.app.interaction import FullscreenPort, InteractionMachine
from sandshell.game.app.state import InteractionState
from sandshell.game.app.ui_state import PopupView, ShellUIState, SlotView
from sandshell.game.bridge.event_bridge import EventBridge, MessageChannel
from sandshell.game.core.models import PULSE_SECONDS, RELAYOUT_SETTLE_SECONDS
from sandshell.game.ui.layout_resolver import LayoutResolver, LayoutTransition
from sandshell.game.ui.panel_builder import ControlPanelBuilder
from sandshell.game.ui.regions import popup_option_rects

logger = logging.getLogger(__name__)


class ShellController:
    """Drives the panel from viewport, pointer and simulation events."""

    def __init__(
        self,
        *,
        channel: MessageChannel,
        timers: TimerPort,
        fullscreen: FullscreenPort | None = None,
        events: ShellEventBus | None = None,
        state: InteractionState | None = None,
        buttons: ButtonRegistry | None = None,
        panel: ControlPanelBuilder | None = None,
        pulse_seconds: float = PULSE_SECONDS,
        settle_seconds: float = RELAYOUT_SETTLE_SECONDS,
        message_trace: bool | None = None,
    ) -> None:
        self._timers = timers
        self._events = events if events is not None else ShellEventBus()
        self._bridge = EventBridge(channel, trace=message_trace)
        self._panel = panel if panel is not None else ControlPanelBuilder()
        self._resolver = LayoutResolver()
        self._machine = InteractionMachine(
            bridge=self._bridge,
            panel=self._panel,
            timers=timers,
            events=self._events,
            fullscreen=fullscreen,
            buttons=buttons,
            state=state,
            pulse_seconds=pulse_seconds,
        )
        self._settle_seconds = settle_seconds
        self._settle_pending = False
        self._container: Size | None = None
        self._events.subscribe(ModalChanged, self._on_modal_changed)

    @property
    def machine(self) -> InteractionMachine:
        return self._machine

    @property
    def panel(self) -> ControlPanelBuilder:
        return self._panel

    @property
    def events(self) -> ShellEventBus:
        return self._events

    @property
    def bridge(self) -> EventBridge:
        return self._bridge

    def auto_layout(
        self,
        width: float,
        height: float,
        orientation_angle: float | None = None,
    ) -> LayoutTransition:
        """Run one layout pass for a viewport size and device angle.

        Grids are rebuilt only when the variant changes; geometry, sprites,
        rotation and any open popup are refreshed on every pass.
        """
        self._container = Size(width, height)
        transition = self._resolver.update(width, height)
        if transition.changed:
            self._panel.rebuild(transition.current)
            self._schedule_settle()
        self._apply_geometry()
        if orientation_angle is not None:
            self._machine.on_orientation(orientation_angle)
        if enabled_layout_trace():
            frame = self._panel.game_frame
            logger.info(
                "layout_pass variant=%s size=%sx%s game_frame=%s",
                transition.current.value,
                width,
                height,
                frame,
            )
        self._events.publish(LayoutApplied(variant=transition.current, rebuilt=transition.changed))
        return transition

    def press(self, action_id: str) -> bool:
        return self._machine.press(action_id)

    def click(self, x: float, y: float) -> bool:
        """Route a pointer click by position. Returns whether state changed."""
        view = self._machine.modal_view()
        if view is not None:
            popup = self._panel.popup
            if popup is None or not popup.contains(x, y):
                return self._machine.close_modal()
            rects = popup_option_rects(popup, len(view.options), stacked=view.stacked)
            for option, rect in zip(view.options, rects):
                if rect.contains(x, y):
                    return self._machine.press(option.action_id)
            return False
        button_id = self._panel.button_at(x, y)
        if button_id is None:
            return False
        return self._machine.press(button_id.value)

    def receive(self, raw_event: object) -> bool:
        """Apply one inbound envelope. Malformed or foreign events are dropped."""
        message = self._bridge.receive(raw_event)
        if message is None:
            return False
        return self._machine.apply_inbound(message)

    def ui_state(self) -> ShellUIState:
        """Return current view-ready state."""
        spec = self._panel.spec()
        grids = self._panel.grids()
        slots = tuple(
            SlotView(button_id=slot.button_id, rect=slot.rect, placement=slot.background)
            for grid in grids
            for slot in grid.slots
        )
        return ShellUIState(
            variant=self._panel.variant,
            border_class=spec.border_class if spec is not None else None,
            panel_rects=tuple(grid.rect for grid in grids),
            game_frame=self._panel.game_frame,
            slots=slots,
            popup=self._popup_view(),
            interaction=self._machine.state,
        )

    def _popup_view(self) -> PopupView | None:
        view = self._machine.modal_view()
        if view is None:
            return None
        window = self._panel.popup
        rects = popup_option_rects(window, len(view.options), stacked=view.stacked) if window is not None else ()
        return PopupView(modal=view, window=window, option_rects=rects)

    def _apply_geometry(self) -> None:
        if self._container is None:
            return
        if self._panel.apply_geometry_constraints(self._container) is not None:
            self._panel.apply_game_square()
        self._machine.render("layout")
        if self._machine.state.active_modal is not None:
            self._panel.position_popup()

    def _schedule_settle(self) -> None:
        if self._settle_pending:
            return
        self._settle_pending = True
        self._timers.call_later(self._settle_seconds, self._settle)

    def _settle(self) -> None:
        self._settle_pending = False
        self._apply_geometry()
        logger.debug("layout_settled variant=%s", self._panel.variant)

    def _on_modal_changed(self, event: ModalChanged) -> None:
        if event.modal is None:
            self._panel.clear_popup()
        else:
            self._panel.position_popup()
