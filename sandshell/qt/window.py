"""Main Qt window: viewport and orientation tracking, fullscreen port."""

from __future__ import annotations

import logging

from sandshell.game.app.controller import ShellController
from sandshell.game.app.state import InteractionState
from sandshell.game.infra.config import ShellConfig
from sandshell.qt.canvas import ShellCanvas
from sandshell.qt.channel import QtMessageChannel
from sandshell.qt.timers import QtTimerPort

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QScreen
    from PyQt6.QtWidgets import QMainWindow
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)


def screen_angle(screen: QScreen | None) -> float:
    """Device rotation relative to the screen's native orientation, in degrees."""
    if screen is None:
        return 0.0
    return float(screen.angleBetween(screen.nativeOrientation(), screen.orientation()))


class ShellWindow(QMainWindow):
    def __init__(self, config: ShellConfig, channel: QtMessageChannel) -> None:
        super().__init__()
        self._channel = channel
        state = InteractionState(
            active_brush=config.initial_brush,
            brush_size=config.initial_brush_size,
            last_orientation_angle=screen_angle(self.screen()),
            auto_rotate=config.auto_rotate,
        )
        self._controller = ShellController(
            channel=channel,
            timers=QtTimerPort(),
            fullscreen=self,
            state=state,
            pulse_seconds=config.pulse_seconds,
            settle_seconds=config.relayout_settle_seconds,
        )
        self._canvas = ShellCanvas(
            self._controller,
            config.atlas_path,
            orientation_angle=lambda: screen_angle(self.screen()),
        )
        self.setCentralWidget(self._canvas)
        self.setWindowTitle("Sandshell")
        self.resize(config.window_width, config.window_height)
        channel.received.connect(self._on_inbound)
        self._watch_screen(self.screen())

    @property
    def controller(self) -> ShellController:
        return self._controller

    def toggle_fullscreen(self) -> bool:
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()
        return self.isFullScreen()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape and self._controller.machine.close_modal():
            self._canvas.update()
            return
        super().keyPressEvent(event)

    def _watch_screen(self, screen: QScreen | None) -> None:
        if screen is None:
            return
        screen.orientationChanged.connect(self._on_orientation_changed)

    def _on_orientation_changed(self, orientation) -> None:
        logger.debug("screen_orientation_changed orientation=%s", orientation)
        self._canvas.relayout()

    def _on_inbound(self, raw_event: object) -> None:
        if self._controller.receive(raw_event):
            self._canvas.update()
