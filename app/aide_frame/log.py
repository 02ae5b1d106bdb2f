"""
Central logging configuration for the slider library.

Provides one named logger shared by the framework and the application:
- DEBUG: Resolution and rendering decisions
- INFO: Lifecycle messages (init, textdomain loaded, update checks)
- WARNING: Something unexpected but recoverable (unreadable .mo, bad config)
- ERROR: Something failed

Usage:
    from aide_frame.log import logger
    logger.info("Loaded textdomain f9slider")
    logger.debug("Slider 'home' resolved by slug")
"""

import logging
import sys

LOGGER_NAME = "f9slider"

LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

# Format: "INFO: Message" or "WARNING: Message"
_handler = logging.StreamHandler(sys.stdout)
_handler.setLevel(logging.DEBUG)
_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

logger.addHandler(_handler)

# Keep host application logging configuration out of our output
logger.propagate = False


def set_level(level: str):
    """
    Set the logging level.

    Args:
        level: One of 'DEBUG', 'INFO', 'WARNING', 'ERROR' (case-insensitive).
               Unknown names fall back to INFO.
    """
    logger.setLevel(LEVELS.get(str(level).upper(), logging.INFO))


def set_quiet():
    """Only show warnings and errors."""
    set_level('WARNING')


def set_verbose():
    """Show all messages including debug."""
    set_level('DEBUG')


# Convenience aliases
debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error


__all__ = [
    'logger',
    'set_level',
    'set_quiet',
    'set_verbose',
    'debug',
    'info',
    'warning',
    'error',
]
