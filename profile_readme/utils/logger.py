"""Logging configuration for the profile README generator."""

import logging
import sys
from typing import Optional, Union

from profile_readme.config import LOG_LEVEL


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a configured logger instance. Level falls back to LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)
    if level is not None:
        logger.setLevel(level)
    return logger
