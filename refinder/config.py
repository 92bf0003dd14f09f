#!/usr/bin/env python3
"""
Runtime configuration and logging setup for refinder.

Settings come from the environment (a .env file in the working directory is
loaded first):
- DEBUG: any non-empty value turns on debug logging
- LOG_LEVEL: explicit level name, overrides DEBUG
- REFINDER_SNAPSHOT: default snapshot path for the viewer and console
"""

import logging
import os
import sys

import colorlog
from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# Environment Flags
# =============================================================================

DEBUG = os.getenv('DEBUG', '') != ''
DEFAULT_SNAPSHOT = os.getenv('REFINDER_SNAPSHOT') or None

LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

LOG_FORMAT = '%(log_color)s[%(levelname)s] %(asctime)s - %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def determine_log_level(raw_level: str | None = None, debug: bool | None = None) -> int:
    """
    Resolve the logging level from LOG_LEVEL / DEBUG.

    Unknown level names fall back to WARNING (or DEBUG when debug is on).
    """
    if raw_level is None:
        raw_level = os.getenv('LOG_LEVEL', '')
    if debug is None:
        debug = DEBUG

    level = LOG_LEVELS.get(raw_level.strip().upper())
    if level is not None:
        return level
    return logging.DEBUG if debug else logging.WARNING


# =============================================================================
# Logging
# =============================================================================

def setup_logger(name: str = 'refinder') -> logging.Logger:
    """Attach a coloured stderr handler to the package logger (once)."""
    logger = logging.getLogger(name)
    if getattr(logger, '_refinder_configured', False):
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        fmt=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'bold_red',
        },
    ))

    logger.addHandler(handler)
    logger.setLevel(determine_log_level())
    logger.propagate = False
    logger._refinder_configured = True
    return logger
