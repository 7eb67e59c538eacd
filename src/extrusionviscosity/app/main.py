"""
Application Initialization
==========================
Loads the configuration, builds the main window and starts the Qt event loop.

Run with: python -m extrusionviscosity
"""
from __future__ import annotations

import logging
import os
import sys

import pyqtgraph as pg

from extrusionviscosity.app.application import create_app
from extrusionviscosity.app.ui.main_window import MainWindow
from extrusionviscosity.config import DEFAULT_CONFIG, AppConfig, load_config
from extrusionviscosity.logging_config import LOG_FILE_ENV, level_from_env, setup_logging
from extrusionviscosity.model.errors import ConfigurationError

logger = logging.getLogger(__name__)

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOptions(antialias=True)


def _load_config_or_default(path: str | None) -> AppConfig:
    try:
        return load_config(path)
    except ConfigurationError:
        logger.exception("Invalid configuration, falling back to built-in defaults")
        return DEFAULT_CONFIG


def main() -> int:
    """Main entry point for the application."""
    # EXTRUSIONVISCOSITY_DEBUG=1 for debug output, EXTRUSIONVISCOSITY_LOG_FILE to keep a log
    setup_logging(level=level_from_env(), log_file=os.environ.get(LOG_FILE_ENV))

    config = _load_config_or_default(os.environ.get("EXTRUSIONVISCOSITY_CONFIG"))

    app = create_app()
    win = MainWindow(config)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
