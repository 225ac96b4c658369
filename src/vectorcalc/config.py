"""
Configuration & Global Constants
================================
This module serves as the central registry for application-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers and names scattered throughout the
   code (window title, component limit, log level).
2. Deployment: Values can be overridden through environment variables without
   touching the code.

Exports:
    APP_NAME (str): Internal application identifier.
    VISIBLE_APP_NAME (str): Name shown in the window title.
    MAX_COMPONENTS (int): Largest vector the front ends accept.
    DEFAULT_LOG_LEVEL (int): Logging level used when none is given.
"""
import logging
import os

ORG_ID = "vectorcalc"
APP_ID = "vectorcalc"
APP_NAME = "vectorcalc"
VISIBLE_APP_NAME = "Vector Calculator"

_DEFAULT_MAX_COMPONENTS = 25


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring %s=%r (not an integer), using %d", name, raw, default
        )
        return default


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Global Constants
MAX_COMPONENTS: int = _env_int("VECTORCALC_MAX_COMPONENTS", _DEFAULT_MAX_COMPONENTS)
DEFAULT_LOG_LEVEL: int = _env_log_level("VECTORCALC_LOG_LEVEL", logging.WARNING)
