"""Public panelkit API contracts."""

from panelkit.api.logging import LoggingConfig, configure_logging, get_logger
from panelkit.api.timers import TimerCallback, TimerPort

__all__ = [
    "LoggingConfig",
    "TimerCallback",
    "TimerPort",
    "configure_logging",
    "get_logger",
]
