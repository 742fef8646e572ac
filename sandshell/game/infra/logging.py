"""Shell logging: one JSON-lines file per run plus a console stream."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from panelkit.api.logging import LoggingConfig, configure_logging
from panelkit.runtime.debug_config import resolve_log_level_name
from sandshell.game.infra.app_data import resolve_logs_dir

__all__ = ["RunLogSettings", "run_log_settings", "setup_logging"]

RUN_LOG_PREFIX = "sandshell_run_"


@dataclass(frozen=True, slots=True)
class RunLogSettings:
    level_name: str
    console_format: str
    log_dir: Path

    def run_file(self, started_at: datetime) -> Path:
        return self.log_dir / f"{RUN_LOG_PREFIX}{started_at:%Y%m%dT%H%M%S}.jsonl"


def run_log_settings(env: Mapping[str, str] | None = None) -> RunLogSettings:
    """Read level, console format and log directory for this run."""
    source = os.environ if env is None else env
    configured_dir = source.get("SANDSHELL_LOG_DIR", "").strip()
    console_format = source.get("LOG_FORMAT", "text").strip().lower()
    return RunLogSettings(
        level_name=resolve_log_level_name("SANDSHELL_LOG_LEVEL", "PANELKIT_LOG_LEVEL", env=source),
        console_format=console_format if console_format in {"text", "json"} else "text",
        log_dir=Path(configured_dir) if configured_dir else resolve_logs_dir(),
    )


def setup_logging(settings: RunLogSettings | None = None) -> Path:
    """Route root logging to the console and this run's JSONL file; return that file."""
    settings = settings if settings is not None else run_log_settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    run_file = settings.run_file(datetime.now(UTC))
    configure_logging(
        LoggingConfig(
            level_name=settings.level_name,
            console_format=settings.console_format,
            file_path=str(run_file),
            file_format="json",
        )
    )
    logging.getLogger(__name__).info("logging_file=%s level=%s", run_file, settings.level_name)
    return run_file
