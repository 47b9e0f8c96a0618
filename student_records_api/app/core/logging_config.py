"""
Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is set, a size‑rotated file handler.  Handlers added
here are tagged by name, so calling it again (tests build many apps in
one process) only adjusts the level and adds a file handler for a
path that is not logged to yet.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "student_records.console"
FILE_HANDLER_NAME = "student_records.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console.  Rotated once it
        reaches ``max_bytes``, keeping ``backup_count`` old files.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        already_attached = any(
            h.get_name() == FILE_HANDLER_NAME and Path(h.baseFilename) == log_path
            for h in root.handlers
            if isinstance(h, RotatingFileHandler)
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
