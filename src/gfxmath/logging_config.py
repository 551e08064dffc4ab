"""
Logging Configuration
Sets up the logger for the 'gfxmath' namespace.
"""
import logging
import sys
from typing import Optional, Union

from gfxmath import config


def setup_logging(level: Optional[Union[int, str]] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'gfxmath' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to config.LOG_LEVEL.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger("gfxmath")
    logger.setLevel(level)

    # Repeated calls must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
