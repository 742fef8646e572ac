"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

import sys

from sandshell.game.infra.config import ShellConfig
from sandshell.qt.channel import QtMessageChannel
from sandshell.qt.window import ShellWindow

try:
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


def create_shell_window(config: ShellConfig, channel: QtMessageChannel | None = None) -> ShellWindow:
    """Build the shell window; embedding hosts pass their own channel."""
    QApplication.instance() or QApplication(sys.argv)
    return ShellWindow(config, channel if channel is not None else QtMessageChannel())


def run_qt_app(config: ShellConfig) -> int:
    """Show the shell window and run the Qt event loop."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = create_shell_window(config)
    window.show()
    return app.exec()
