"""Application entry point."""

import sys

from panelkit.api.logging import get_logger
from panelkit.runtime.logging import shutdown_logging
from sandshell.game.infra.app_data import apply_runtime_path_defaults
from sandshell.game.infra.config import load_default_env_files, load_shell_config
from sandshell.game.infra.logging import setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the sandshell control panel."""
    load_default_env_files()
    paths = apply_runtime_path_defaults()
    setup_logging()
    try:
        logger.info(
            "app_data_paths root=%s logs=%s config=%s",
            paths["root"],
            paths["logs"],
            paths["config"],
        )
        config = load_shell_config()
        logger.info(
            "shell_config",
            extra={
                "atlas_path": str(config.atlas_path),
                "auto_rotate": config.auto_rotate,
                "initial_brush": config.initial_brush.value,
                "initial_brush_size": config.initial_brush_size,
            },
        )
        from sandshell.qt.bootstrap import run_qt_app

        exit_code = run_qt_app(config)
        logger.info("shell_exit code=%d", exit_code)
    finally:
        shutdown_logging()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
