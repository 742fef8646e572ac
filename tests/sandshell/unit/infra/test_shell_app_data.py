from __future__ import annotations

import os

from sandshell.game.infra.app_data import (
    apply_runtime_path_defaults,
    ensure_app_data_dirs,
    resolve_app_data_root,
    resolve_logs_dir,
)


def test_app_data_root_honors_absolute_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SANDSHELL_APP_DATA_DIR", str(tmp_path))
    assert resolve_app_data_root() == tmp_path
    assert resolve_logs_dir() == tmp_path / "logs"


def test_ensure_app_data_dirs_creates_tree(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SANDSHELL_APP_DATA_DIR", str(tmp_path / "data"))
    paths = ensure_app_data_dirs()
    assert paths["logs"].is_dir()
    assert paths["config"].is_dir()


def test_apply_runtime_path_defaults_sets_log_dir_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SANDSHELL_APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("SANDSHELL_LOG_DIR", raising=False)
    paths = apply_runtime_path_defaults()
    assert os.environ["SANDSHELL_LOG_DIR"] == str(tmp_path / "logs")
    assert paths["logs"] == tmp_path / "logs"


def test_relative_log_dir_is_resolved_under_app_data(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SANDSHELL_APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SANDSHELL_LOG_DIR", "custom_logs")
    paths = apply_runtime_path_defaults()
    assert paths["logs"] == tmp_path / "custom_logs"
    assert paths["logs"].is_dir()
