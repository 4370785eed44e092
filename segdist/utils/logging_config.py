"""Logging configuration for applications embedding segdist."""

import logging
import sys
from typing import Optional, Union

from segdist.config import env_log_level


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging configuration

    Args:
        level: Logging level. Falls back to ``SEGDIST_LOG_LEVEL`` and then
            to ``WARNING``.
        log_file: Optional log file path
        format_string: Optional custom format string

    Returns:
        The ``segdist`` package logger
    """
    if level is None:
        level = env_log_level(default='WARNING')
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True
    )

    return logging.getLogger('segdist')
