"""
Logging configuration for the Student Survey API.

``setup_logging`` is called by every ``create_app``.  The level given
on the latest call always wins.  The package's own console handler
is attached once per process and a file handler once per log file,
so building several apps (the module-level one, then one per test)
never duplicates output.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "student_survey_api.console"
FILE_HANDLER_PREFIX = "student_survey_api.file:"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and attach the package handlers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also log to.  Resolved against the current
        working directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler_name = f"{FILE_HANDLER_PREFIX}{log_path}"
        if not _has_handler(root, file_handler_name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
