# campus/utils/logger.py
"""
Logging setup shared by every module: console plus a size-rotated file.
Level, directory and file name come from settings (LOG_LEVEL, LOG_DIR, LOG_FILE).
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from campus.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 10

_configured = False


def log_file_path() -> str:
    return os.path.join(settings.LOG_DIR, settings.LOG_FILE)


def _handlers(level: str) -> list:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            filename=log_file_path(),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        ),
    ]
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def configure_logging():
    """Attach the campus handlers to the root logger. Runs once per process."""
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    root = logging.getLogger()
    root.setLevel(level)
    for handler in _handlers(level):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    configure_logging()
    return logging.getLogger(name)
