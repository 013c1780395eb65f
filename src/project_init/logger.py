"""Logging helpers shared by every project_init module."""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "project_init"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Install a single stderr handler on the package root logger.

    Level resolution: explicit arg, then PROJECT_INIT_LOG_LEVEL, then WARNING.
    Calling again only updates the level.
    """
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    resolved = level if level is not None else os.getenv("PROJECT_INIT_LOG_LEVEL", "WARNING")
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logger.setLevel(resolved)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        setup_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
