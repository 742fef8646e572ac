from __future__ import annotations

from panelkit.runtime.debug_config import (
    enabled_layout_trace,
    enabled_message_trace,
    load_debug_config,
    resolve_log_level_name,
)


def test_load_debug_config_parses_flags(monkeypatch) -> None:
    monkeypatch.setenv("PANELKIT_DEBUG_LAYOUT_TRACE", "yes")
    monkeypatch.setenv("PANELKIT_DEBUG_MESSAGE_TRACE", "1")

    cfg = load_debug_config()
    assert cfg.layout_trace_enabled is True
    assert cfg.message_trace_enabled is True


def test_load_debug_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("PANELKIT_DEBUG_LAYOUT_TRACE", raising=False)
    monkeypatch.delenv("PANELKIT_DEBUG_MESSAGE_TRACE", raising=False)

    cfg = load_debug_config()
    assert cfg.layout_trace_enabled is False
    assert cfg.message_trace_enabled is False


def test_resolve_log_level_checks_names_in_order() -> None:
    env = {"LOG_LEVEL": "warning", "PANELKIT_LOG_LEVEL": "error", "SANDSHELL_LOG_LEVEL": " "}
    assert resolve_log_level_name("SANDSHELL_LOG_LEVEL", "PANELKIT_LOG_LEVEL", env=env) == "ERROR"
    assert resolve_log_level_name(env=env) == "WARNING"
    assert resolve_log_level_name(env={}, default="debug") == "DEBUG"


def test_enabled_helpers_read_current_env(monkeypatch) -> None:
    monkeypatch.setenv("PANELKIT_DEBUG_LAYOUT_TRACE", "1")
    monkeypatch.setenv("PANELKIT_DEBUG_MESSAGE_TRACE", "off")
    assert enabled_layout_trace() is True
    assert enabled_message_trace() is False
