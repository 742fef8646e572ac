from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtWidgets")


@pytest.fixture
def qt_app(monkeypatch):
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


def test_shell_window_wires_channel_and_controller(qt_app, tmp_path) -> None:
    from sandshell.game.infra.config import load_shell_config
    from sandshell.qt.channel import QtMessageChannel
    from sandshell.qt.window import ShellWindow

    config = load_shell_config({"SANDSHELL_ATLAS_PATH": str(tmp_path / "missing.png")})
    channel = QtMessageChannel()
    posted: list[dict] = []
    channel.posted.connect(posted.append)
    window = ShellWindow(config, channel)
    try:
        window.controller.auto_layout(1000, 400)
        window.controller.press("Water")
        channel.deliver({"type": "game-event", "payload": "world:stop"})
        assert posted == [{"type": "site-event", "payload": "brush_select:water"}]
        assert window.controller.machine.state.is_running is False
    finally:
        window.close()
