from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

from panelkit.api.logging import LoggingConfig
from panelkit.runtime.logging import JsonFormatter, configure_logging, shutdown_logging

REPO_ROOT = Path(__file__).resolve().parents[4]


def _restore(root: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord("sandshell.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.variant = "FullHorizontal"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "sandshell.test"
    assert payload["msg"] == "hello world"
    assert payload["fields"] == {"variant": "FullHorizontal"}


def test_configure_logging_console_only_installs_single_handler() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_logging(LoggingConfig(level_name="warning"))
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING
    finally:
        _restore(root, original_handlers, original_level)


def test_configure_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))
        logging.getLogger("panelkit.test").info("layout_changed", extra={"to": "SmallVertical"})
        shutdown_logging()
        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        entry = next(item for item in entries if item["msg"] == "layout_changed")
        assert entry["fields"]["to"] == "SmallVertical"
    finally:
        _restore(root, original_handlers, original_level)


def test_queued_records_reach_file_when_process_exits(tmp_path) -> None:
    log_file = tmp_path / "exit.jsonl"
    script = textwrap.dedent(
        f"""
        import logging
        from panelkit.api.logging import LoggingConfig, configure_logging

        configure_logging(LoggingConfig(level_name="INFO", file_path={str(log_file)!r}))
        logger = logging.getLogger("panelkit.exit")
        for index in range(20000):
            logger.info("line %d", index)
        """
    )
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, (str(REPO_ROOT), env.get("PYTHONPATH"))))
    completed = subprocess.run(
        [sys.executable, "-c", script],
        env=env,
        capture_output=True,
        timeout=120,
        check=False,
    )
    assert completed.returncode == 0, completed.stderr.decode(errors="replace")[-2000:]
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 20000
    assert json.loads(lines[-1])["msg"] == "line 19999"
