"""Fire-once timers on the Qt event loop."""

from __future__ import annotations

from panelkit.api.timers import TimerCallback

try:
    from PyQt6.QtCore import QTimer
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class QtTimerPort:
    """`TimerPort` backed by `QTimer.singleShot`."""

    def __init__(self) -> None:
        self._next_id = 1

    def call_later(self, delay_seconds: float, callback: TimerCallback) -> int:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        timer_id = self._next_id
        self._next_id += 1
        QTimer.singleShot(int(round(delay_seconds * 1000.0)), callback)
        return timer_id
