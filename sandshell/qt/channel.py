"""Qt signal transport between the shell and an embedded simulation."""

from __future__ import annotations

from collections.abc import Mapping

try:
    from PyQt6.QtCore import QObject, pyqtSignal
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class QtMessageChannel(QObject):
    """Outbound envelopes leave through `posted`; hosts push inbound ones via `deliver`."""

    posted = pyqtSignal(dict)
    received = pyqtSignal(object)

    def post_message(self, envelope: Mapping[str, str]) -> None:
        self.posted.emit(dict(envelope))

    def deliver(self, raw_event: object) -> None:
        self.received.emit(raw_event)
