# catalog_admin/config/logging_config.py

"""Logging for one dashboard session.

Everything under the ``catalog_admin`` logger goes to
``logs/run_<YYYYMMDD_HHMMSS>.log``.  While the TUI is up Textual draws
over the terminal, so stderr only sees warnings and errors.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from catalog_admin.config.settings import Settings

PACKAGE_LOGGER = "catalog_admin"

FILE_LINE = "%(asctime)s %(levelname)s [%(name)s] %(funcName)s:%(lineno)d %(message)s"
STDERR_LINE = "%(levelname)s %(name)s: %(message)s"
TIMESTAMP = "%Y-%m-%d %H:%M:%S"


def _run_log_path(started: datetime) -> Path:
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return Settings.LOGS_DIR / f"run_{started:%Y%m%d_%H%M%S}.log"


def _with_format(
    handler: logging.Handler, level: int, line: str
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(line, datefmt=TIMESTAMP))
    return handler


def setup_logging() -> Path:
    """Attach the run-log and stderr handlers; return the run-log path.

    Only the first call installs handlers.  Later calls (tests, the CLI
    entering twice) leave the existing ones in place.
    """
    log_path = _run_log_path(datetime.now())
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    if package_logger.handlers:
        return log_path

    package_logger.addHandler(
        _with_format(
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.DEBUG,
            FILE_LINE,
        )
    )
    package_logger.addHandler(
        _with_format(
            logging.StreamHandler(sys.stderr), logging.WARNING, STDERR_LINE
        )
    )
    package_logger.debug("Session log opened at %s", log_path)
    return log_path
