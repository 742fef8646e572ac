"""Public fire-once timer contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

TimerCallback = Callable[[], None]


class TimerPort(Protocol):
    """Schedules one-shot callbacks on the single UI event queue.

    Scheduled callbacks are not cancelable by callers; they must be safe to run
    after the state they were scheduled for has changed.
    """

    def call_later(self, delay_seconds: float, callback: TimerCallback) -> int:
        """Schedule `callback` once after `delay_seconds`."""
