"""Logging for the cinema_tickets package.

Everything logs under the ``cinema_tickets`` logger; the CLI calls
``setup_logging`` once per invocation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

ROOT_LOGGER_NAME = "cinema_tickets"


def setup_logging(
    level: str | None = None, log_file: str | None = None
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Level name such as "DEBUG" or "warning".  When omitted the
            ``LOG_LEVEL`` environment variable is used, then INFO.  Unknown
            names also mean INFO.
        log_file: Path of a file to copy log records to; its directory is
            created if needed.

    Returns:
        The ``cinema_tickets`` logger
    """
    log_level = level or os.getenv("LOG_LEVEL") or "INFO"
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Repeated calls replace the handlers instead of stacking them
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for *name*, nested under ``cinema_tickets``.

    Passing ``__name__`` from inside the package returns that module's
    logger unchanged.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
