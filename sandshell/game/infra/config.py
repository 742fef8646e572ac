"""Shell configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from sandshell.game.core.models import (
    DEFAULT_BRUSH,
    DEFAULT_BRUSH_SIZE,
    MAX_BRUSH_SIZE,
    MIN_BRUSH_SIZE,
    PULSE_SECONDS,
    RELAYOUT_SETTLE_SECONDS,
    ButtonId,
    brush_id_from_name,
)
from sandshell.game.infra.app_data import resolve_app_data_root, resolve_config_dir, resolve_shell_root

logger = logging.getLogger(__name__)

ENV_FILE_NAMES = (".env.shell", ".env.shell.local")


def env_file_candidates() -> tuple[Path, ...]:
    """App-data config files first, then the working directory; later files win."""
    config_dir = resolve_config_dir()
    return (
        *(config_dir / name for name in ENV_FILE_NAMES),
        *(Path(name) for name in ENV_FILE_NAMES),
    )


def read_env_file(path: Path) -> dict[str, str]:
    """Parse `KEY=VALUE` lines; `export ` prefixes and matching quotes are stripped."""
    values: dict[str, str] = {}
    for number, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.removeprefix("export ").partition("=")
        key = key.strip()
        if not sep or not key:
            logger.warning("env_line_skipped path=%s line=%d", path, number)
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str | Path, *, override_existing: bool = True) -> int:
    """Apply one env file to `os.environ` and return how many keys were set.

    Relative paths missing from the working directory are retried against the
    shell root. A file that exists nowhere is skipped.
    """
    env_path = Path(path)
    if not env_path.is_absolute() and not env_path.exists():
        env_path = resolve_shell_root() / env_path
    if not env_path.is_file():
        return 0
    applied = 0
    for key, value in read_env_file(env_path).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied += 1
    logger.debug("env_file_loaded path=%s keys=%d", env_path, applied)
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] | None = None
) -> None:
    """Load split env files with optional local overrides."""
    for path in tuple(paths) if paths is not None else env_file_candidates():
        load_env_file(path, override_existing=override_existing)


@dataclass(frozen=True, slots=True)
class ShellConfig:
    """Immutable shell settings resolved from the environment."""

    atlas_path: Path
    auto_rotate: bool = True
    initial_brush: ButtonId = DEFAULT_BRUSH
    initial_brush_size: int = DEFAULT_BRUSH_SIZE
    pulse_seconds: float = PULSE_SECONDS
    relayout_settle_seconds: float = RELAYOUT_SETTLE_SECONDS
    window_width: int = 960
    window_height: int = 640


def default_atlas_path() -> Path:
    return resolve_app_data_root() / "assets" / "sprites.png"


def load_shell_config(env: Mapping[str, str] | None = None) -> ShellConfig:
    """Build `ShellConfig` from env vars; invalid values fall back to defaults."""
    source = os.environ if env is None else env
    atlas_raw = source.get("SANDSHELL_ATLAS_PATH", "").strip()
    return ShellConfig(
        atlas_path=Path(atlas_raw) if atlas_raw else default_atlas_path(),
        auto_rotate=_bool(source, "SANDSHELL_AUTO_ROTATE", True),
        initial_brush=_brush(source, "SANDSHELL_INITIAL_BRUSH", DEFAULT_BRUSH),
        initial_brush_size=_int_in_range(
            source,
            "SANDSHELL_INITIAL_BRUSH_SIZE",
            DEFAULT_BRUSH_SIZE,
            low=MIN_BRUSH_SIZE,
            high=MAX_BRUSH_SIZE,
        ),
        pulse_seconds=_millis(source, "SANDSHELL_PULSE_MS", PULSE_SECONDS),
        relayout_settle_seconds=_millis(source, "SANDSHELL_RELAYOUT_SETTLE_MS", RELAYOUT_SETTLE_SECONDS),
        window_width=_int_in_range(source, "SANDSHELL_WINDOW_WIDTH", 960, low=1),
        window_height=_int_in_range(source, "SANDSHELL_WINDOW_HEIGHT", 640, low=1),
    )


def _bool(source: Mapping[str, str], name: str, default: bool) -> bool:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    logger.warning("config_invalid name=%s value=%r", name, raw)
    return default


def _int_in_range(
    source: Mapping[str, str],
    name: str,
    default: int,
    *,
    low: int | None = None,
    high: int | None = None,
) -> int:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("config_invalid name=%s value=%r", name, raw)
        return default
    if (low is not None and value < low) or (high is not None and value > high):
        logger.warning("config_out_of_range name=%s value=%d", name, value)
        return default
    return value


def _millis(source: Mapping[str, str], name: str, default_seconds: float) -> float:
    millis = _int_in_range(source, name, -1, low=0)
    if millis < 0:
        return default_seconds
    return millis / 1000.0


def _brush(source: Mapping[str, str], name: str, default: ButtonId) -> ButtonId:
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    brush_id = brush_id_from_name(raw)
    if brush_id is None:
        logger.warning("config_invalid name=%s value=%r", name, raw)
        return default
    return brush_id
