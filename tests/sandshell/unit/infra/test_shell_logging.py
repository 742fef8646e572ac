from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from panelkit.runtime.logging import shutdown_logging
from sandshell.game.infra.logging import RunLogSettings, run_log_settings, setup_logging


def test_run_log_settings_reads_env(tmp_path) -> None:
    settings = run_log_settings(
        {
            "SANDSHELL_LOG_DIR": str(tmp_path),
            "SANDSHELL_LOG_LEVEL": "debug",
            "LOG_LEVEL": "error",
            "LOG_FORMAT": "JSON",
        }
    )
    assert settings == RunLogSettings(level_name="DEBUG", console_format="json", log_dir=tmp_path)


def test_run_log_settings_falls_back_to_text_and_shared_level(tmp_path) -> None:
    settings = run_log_settings({"SANDSHELL_LOG_DIR": str(tmp_path), "LOG_LEVEL": "warning", "LOG_FORMAT": "xml"})
    assert settings.level_name == "WARNING"
    assert settings.console_format == "text"


def test_run_file_name_is_stamped() -> None:
    settings = RunLogSettings(level_name="INFO", console_format="text", log_dir=Path("/var/log/shell"))
    started = datetime(2026, 3, 4, 5, 6, 7, tzinfo=UTC)
    assert settings.run_file(started) == Path("/var/log/shell/sandshell_run_20260304T050607.jsonl")


def test_setup_logging_writes_per_run_jsonl(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    settings = RunLogSettings(level_name="DEBUG", console_format="text", log_dir=tmp_path / "logs")
    try:
        file_path = setup_logging(settings)
        assert file_path.parent == tmp_path / "logs"
        assert file_path.name.startswith("sandshell_run_")
        assert file_path.suffix == ".jsonl"
        assert root.level == logging.DEBUG
        shutdown_logging()
        first = json.loads(file_path.read_text(encoding="utf-8").splitlines()[0])
        assert first["msg"].startswith("logging_file=")
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
