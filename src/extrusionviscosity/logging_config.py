"""
Logging Configuration
Sets up the package logger for the application.

The log level and an optional log file come from the environment when the
desktop app starts (see `level_from_env` and `LOG_FILE_ENV`).
"""
import logging
import os
import sys
from typing import Mapping, Optional

LOGGER_NAME = "extrusionviscosity"
DEBUG_ENV = "EXTRUSIONVISCOSITY_DEBUG"
LOG_FILE_ENV = "EXTRUSIONVISCOSITY_LOG_FILE"

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_DATE_FORMAT = '%H:%M:%S'


def level_from_env(environ: Mapping[str, str] = os.environ) -> int:
    """DEBUG if EXTRUSIONVISCOSITY_DEBUG is set to anything but 0/false/empty, INFO otherwise."""
    value = environ.get(DEBUG_ENV, "").strip().lower()
    return logging.DEBUG if value not in ("", "0", "false", "no") else logging.INFO


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'extrusionviscosity' namespace.

    Python warnings (e.g. numpy RuntimeWarnings) are routed into the same
    handlers so they end up in the log file too.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. Missing parent
            directories are created.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        directory = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    warnings_logger = logging.getLogger("py.warnings")
    logging.captureWarnings(True)

    # Avoid duplicate output when setup runs twice in the same process
    for target in (logger, warnings_logger):
        for old in list(target.handlers):
            target.removeHandler(old)
            old.close()
        for handler in handlers:
            target.addHandler(handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logger.debug(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file or '-'}).")
    return logger
