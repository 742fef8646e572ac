"""Panelkit runtime modules."""

from panelkit.runtime.debug_config import DebugConfig, load_debug_config, resolve_log_level_name
from panelkit.runtime.logging import JsonFormatter, configure_logging, shutdown_logging
from panelkit.runtime.scheduler import Scheduler

__all__ = [
    "DebugConfig",
    "JsonFormatter",
    "Scheduler",
    "configure_logging",
    "load_debug_config",
    "resolve_log_level_name",
    "shutdown_logging",
]
