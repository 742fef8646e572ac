"""Panelkit debug configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    layout_trace_enabled: bool
    message_trace_enabled: bool


def resolve_log_level_name(
    *env_names: str, default: str = "INFO", env: Mapping[str, str] | None = None
) -> str:
    """Return the first non-empty level among `env_names`, then `LOG_LEVEL`."""
    source = os.environ if env is None else env
    for name in (*env_names, "LOG_LEVEL"):
        value = source.get(name, "").strip()
        if value:
            return value.upper()
    return default.upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        layout_trace_enabled=_flag("PANELKIT_DEBUG_LAYOUT_TRACE", False),
        message_trace_enabled=_flag("PANELKIT_DEBUG_MESSAGE_TRACE", False),
    )


def enabled_layout_trace() -> bool:
    return load_debug_config().layout_trace_enabled


def enabled_message_trace() -> bool:
    return load_debug_config().message_trace_enabled
