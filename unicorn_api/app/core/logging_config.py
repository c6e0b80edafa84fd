"""
Logging configuration for the Unicorn API.

Two things happen in ``setup_logging``.  The ``unicorn_api`` package
logger always gets the level from ``LOG_LEVEL``, even when something
else (uvicorn, pytest) already configured the root logger.  Handlers
are only attached to the root logger when it has none, so running
under uvicorn does not print every record twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "unicorn_api"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Apply ``level`` to the package logger and make sure output goes somewhere.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names mean INFO.
    logfile : Optional[str]
        Extra file to write records to.  Only honoured when the root
        logger is configured here.

    Returns
    -------
    logging.Logger
        The ``unicorn_api`` package logger.
    """
    numeric_level = resolve_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        package_logger.debug("Root logging already configured; level set to %s", logging.getLevelName(numeric_level))
        return package_logger

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return package_logger
