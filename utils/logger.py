"""Logging configuration."""

import logging
import sys
from typing import Optional
from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = __name__, level: Optional[str] = None) -> logging.Logger:
    """Set up a stdout logger at the configured level."""
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
        # uvicorn installs root handlers; avoid printing every record twice
        logger.propagate = False

    return logger
