"""
Defaults for xoshiro128.

Module-level constants only; the library itself never reads the
environment. get_log_level() is used by the command line entry point.
"""

import logging
import os

# ============================================================================
# Generator defaults
# ============================================================================

DEFAULT_KIND = "xoshiro128starstar"
DEFAULT_SEED = 0

# ============================================================================
# Logging (CLI only)
# ============================================================================

LOG_LEVEL_ENV = "XOSHIRO128_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Resolve the CLI log level from XOSHIRO128_LOG_LEVEL (default WARNING)."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level
