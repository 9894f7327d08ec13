"""Logging configuration for the ``storefront`` logger tree."""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "storefront"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure console (stderr) and optional daily-rotating file output.

    Calling it again replaces the handlers installed by the previous call,
    so repeated CLI invocations in one process do not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_FORMATTER)
    logger.addHandler(console_handler)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                filename=log_dir / "storefront.log",
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
        except OSError:
            logger.warning("Cannot write logs to %s; console only", log_dir)
        else:
            file_handler.setFormatter(_FORMATTER)
            logger.addHandler(file_handler)

    return logger
