"""
Logging setup for the directory API.

The root logger gets a single console handler the first time
:func:`setup_logging` runs.  Everything else is applied on every call,
so each application built by ``create_app`` (one per test) gets its own
settings:

* the ``prop_directory_api`` logger takes the configured level, or
  ``DEBUG`` when the app runs in debug mode;
* ``LOG_FILE`` adds a file handler to that logger, once per path,
  creating the parent directory when needed;
* uvicorn's per-request access log is kept at ``WARNING`` outside debug
  mode, since every API call is already logged by the services.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "prop_directory_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> logging.Logger:
    """Configure logging for the package and return its logger.

    Parameters
    ----------
    level : str
        Level name for the package logger, case insensitive.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file for the package's records.
    debug : bool
        Force ``DEBUG`` and leave the uvicorn access log untouched.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        root.setLevel(logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if debug else _level(level))

    if logfile:
        log_path = Path(logfile).resolve()
        already_attached = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
            for h in package_logger.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    if not debug:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return package_logger
