"""Application bootstrap for the Android setup GUI."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger
from PySide6.QtWidgets import QApplication, QMessageBox

from .. import strings
from ..config import ConfigError, load_config
from ..settings import SettingsError
from .setup_window import AndroidSetupWindow


def _init_logging() -> None:
    """Configure loguru to play nicely with the GUI."""

    # Remove default stderr handler so log messages flow through custom sinks.
    logger.remove()
    log_dir = Path.home() / ".gpgs_setup"
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / "gui.log"
    logger.add(logfile, rotation="1 week", retention=5, level="INFO")


def main() -> int:
    """Entry point used by the gpgs-setup-gui script."""

    _init_logging()
    app = QApplication(sys.argv)
    app.setOrganizationName("Google")
    app.setApplicationName("Play Games Android Setup")
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    try:
        config = load_config(config_path)
        window = AndroidSetupWindow(config)
    except (ConfigError, SettingsError) as exc:
        logger.exception("Unable to start setup window")
        QMessageBox.critical(None, strings.ERROR_TITLE, str(exc))
        return 1
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
