"""
Logging Utilities
=================
Level-gated console messages for the CLI. set_log_level() also sets the
stdlib root logger, so the engine's logging.getLogger(__name__) trace
follows the same level.

Messages go to stderr; stdout carries names and reports only.
"""

import logging
import sys
from typing import Union

# Log levels
LOG_LEVEL_SILENT = 0
LOG_LEVEL_ERROR = 1
LOG_LEVEL_INFO = 2
LOG_LEVEL_DEBUG = 3

LEVEL_NAMES = {
    "silent": LOG_LEVEL_SILENT,
    "error": LOG_LEVEL_ERROR,
    "info": LOG_LEVEL_INFO,
    "debug": LOG_LEVEL_DEBUG,
}

# Engine loggers only speak up for warnings unless debugging
_STDLIB_LEVELS = {
    LOG_LEVEL_SILENT: logging.CRITICAL + 10,
    LOG_LEVEL_ERROR: logging.ERROR,
    LOG_LEVEL_INFO: logging.WARNING,
    LOG_LEVEL_DEBUG: logging.DEBUG,
}

# Global log level (can be set from config)
CURRENT_LOG_LEVEL = LOG_LEVEL_INFO


def parse_log_level(level: Union[int, str]) -> int:
    """'debug' -> LOG_LEVEL_DEBUG; ints pass through."""
    if isinstance(level, int):
        if level not in _STDLIB_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        return level
    try:
        return LEVEL_NAMES[str(level).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {', '.join(LEVEL_NAMES)})")


def set_log_level(level: Union[int, str]):
    """Set global log level."""
    global CURRENT_LOG_LEVEL
    CURRENT_LOG_LEVEL = parse_log_level(level)

    logging.basicConfig(stream=sys.stderr, format="   🔍 %(name)s: %(message)s")
    logging.getLogger().setLevel(_STDLIB_LEVELS[CURRENT_LOG_LEVEL])


def log_error(msg: str):
    """Printed unless silent (critical errors)."""
    if CURRENT_LOG_LEVEL >= LOG_LEVEL_ERROR:
        print(f"❌ {msg}", file=sys.stderr)


def log_info(msg: str):
    """Printed at INFO level and above."""
    if CURRENT_LOG_LEVEL >= LOG_LEVEL_INFO:
        print(msg, file=sys.stderr)


def log_debug(msg: str):
    """Only printed at DEBUG level."""
    if CURRENT_LOG_LEVEL >= LOG_LEVEL_DEBUG:
        print(f"   🔍 {msg}", file=sys.stderr)
