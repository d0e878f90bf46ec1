"""Logging for the profile app: rotating file under Data/Logs plus console.

APP_LOG_LEVEL selects the root level (default INFO).
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from core.paths import LOG_FILE

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _configured_level():
    name = os.environ.get("APP_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_file=None):
    """Attach file + console handlers to the root logger once."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    log_path = log_file or LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger.setLevel(_configured_level())
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
