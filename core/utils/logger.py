"""Logging utility."""
import logging
import sys
from typing import Optional

from app.config import settings


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Set up and return a logger writing to stdout."""
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))

    # Reloads (uvicorn --reload, pytest) must not stack handlers
    if not logger.handlers:
        logger.addHandler(handler)

    return logger


# Default logger instance
logger = setup_logger("fruitie")
