"""Logging configuration."""

import logging
import sys
from typing import Optional

from pykmc.core.schemas import LoggingConfig

FORMATS = {
    "structured": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "plain": '%(levelname)s - %(message)s',
}


def setup_logging(settings: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Route log records to stdout according to a validated logging section.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.

    Args:
        settings: LoggingConfig from the configuration file. Defaults to
            WARNING with the plain format.

    Returns:
        The ``pykmc`` package logger.
    """
    if settings is None:
        settings = LoggingConfig()
    log_level = getattr(logging, settings.level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATS[settings.format]))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger("pykmc")
    logger.setLevel(log_level)
    return logger
