"""Qt canvas painting the control panels, game frame and modal popup."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from panelkit.ui_runtime.geometry import Rect
from panelkit.ui_runtime.sprite_atlas import source_region
from sandshell.game.app.controller import ShellController
from sandshell.game.app.events import LayoutApplied, ModalChanged, PanelInvalidated
from sandshell.game.app.ui_state import PopupView, SlotView
from sandshell.qt.common import (
    BACKGROUND,
    GAME_PLACEHOLDER,
    OVERLAY,
    PANEL_BACKGROUND,
    POPUP_BACKGROUND,
    TEXT,
    modal_color,
)

try:
    from PyQt6.QtCore import QRectF, Qt
    from PyQt6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPen, QPixmap
    from PyQt6.QtWidgets import QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.w, rect.h)


class ShellCanvas(QWidget):
    def __init__(
        self,
        controller: ShellController,
        atlas_path: Path,
        orientation_angle: Callable[[], float] = lambda: 0.0,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._orientation_angle = orientation_angle
        self._atlas = QPixmap(str(atlas_path))
        if self._atlas.isNull():
            logger.warning("atlas_missing path=%s", atlas_path)
        for event_type in (PanelInvalidated, ModalChanged, LayoutApplied):
            controller.events.subscribe(event_type, self._on_invalidated)

    def _on_invalidated(self, event: object) -> None:
        del event
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        ui = self._controller.ui_state()
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(BACKGROUND))
        for panel_rect in ui.panel_rects:
            painter.fillRect(_qrect(panel_rect), QColor(PANEL_BACKGROUND))
        if ui.game_frame is not None:
            painter.fillRect(_qrect(ui.game_frame), QColor(GAME_PLACEHOLDER))
        for slot in ui.slots:
            self._draw_slot(painter, slot)
        if ui.popup is not None:
            self._draw_popup(painter, ui.popup)
        painter.end()

    def _draw_slot(self, painter: QPainter, slot: SlotView) -> None:
        if slot.button_id is None or slot.placement is None:
            return
        target = _qrect(slot.rect)
        if self._atlas.isNull():
            painter.setPen(QPen(QColor(TEXT), 1))
            painter.drawRect(target)
            painter.drawText(target, Qt.AlignmentFlag.AlignCenter, slot.button_id.value[:4])
            return
        region = source_region(
            slot.placement,
            slot.rect.w,
            slot.rect.h,
            atlas_width=self._atlas.width(),
            atlas_height=self._atlas.height(),
        )
        if region is None:
            return
        painter.drawPixmap(target, self._atlas, QRectF(*region))

    def _draw_popup(self, painter: QPainter, popup: PopupView) -> None:
        if popup.window is None:
            return
        painter.fillRect(self.rect(), QColor(OVERLAY))
        window = _qrect(popup.window)
        painter.fillRect(window, QColor(POPUP_BACKGROUND))
        painter.setPen(QPen(QColor(modal_color(popup.modal.border_color)), 3))
        painter.drawRect(window)
        painter.setFont(QFont("Monospace", max(8, int(popup.window.h / 24))))
        if popup.modal.message is not None:
            message_rect = QRectF(window.x(), window.y(), window.width(), window.height() * 0.6)
            painter.setPen(QColor(TEXT))
            painter.drawText(
                message_rect,
                Qt.AlignmentFlag.AlignCenter.value | Qt.TextFlag.TextWordWrap.value,
                popup.modal.message,
            )
        for option, rect in zip(popup.modal.options, popup.option_rects):
            color = QColor(modal_color(option.color))
            painter.setPen(QPen(color, 2))
            painter.drawRect(_qrect(rect))
            painter.drawText(_qrect(rect), Qt.AlignmentFlag.AlignCenter, option.label)

    def relayout(self) -> None:
        self._controller.auto_layout(self.width(), self.height(), self._orientation_angle())
        self.update()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.relayout()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        if self._controller.click(event.position().x(), event.position().y()):
            self.update()
