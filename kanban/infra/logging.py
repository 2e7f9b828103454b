from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from kanban.config import SETTINGS, PROJECT_ROOT

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_FILE_NAME = "kanban.log"


def setup_logging(log_dir: Path | None = None) -> Path:
    """Attach file and console handlers to the ``kanban`` logger.

    Calling it again replaces the handlers installed by the previous call.
    Returns the log file path.
    """
    log_dir = log_dir or PROJECT_ROOT / SETTINGS.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    console_handler = logging.StreamHandler()

    package_logger = logging.getLogger("kanban")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(SETTINGS.log_level.upper())
    return log_file
