"""
Configuration constants and environment settings for detect-cycles.
"""

import logging
import os
from typing import Optional


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_LOG_LEVEL: str = "WARNING"


# ─────────────────────────────────────────────────────────────────────
# INTERNAL CONSTANTS - Not exposed on the command line
# ─────────────────────────────────────────────────────────────────────

TOKEN_SEPARATOR: str = " "
LOG_FORMAT: str = "%(name)s %(message)s"


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def get_encoding(override: Optional[str] = None) -> str:
    """
    Get the input file encoding.

    An explicit override (from --encoding) wins, then
    DETECT_CYCLES_ENCODING from the environment or .env,
    then DEFAULT_ENCODING.
    """
    if override:
        return override
    value = os.environ.get("DETECT_CYCLES_ENCODING", "").strip()
    return value or DEFAULT_ENCODING


def get_log_level(verbose: bool = False) -> int:
    """
    Get the logging level for the CLI.

    --verbose forces DEBUG. Otherwise DETECT_CYCLES_LOG_LEVEL is used
    (default: WARNING); unknown level names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    name = os.environ.get("DETECT_CYCLES_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)
