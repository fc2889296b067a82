"""Runtime settings for infixcalc, read from the process environment.

INFIXCALC_MAX_HISTORY — entries kept by CalculationHistory (default 10)
INFIXCALC_LOG_LEVEL   — logging level name for the CLI (default WARNING)
"""

from __future__ import annotations

import os

DEFAULT_MAX_HISTORY = 10
DEFAULT_LOG_LEVEL = "WARNING"


def _int_from_env(name: str, default: int) -> int:
    """Read a positive int from the environment, falling back on bad values."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


MAX_HISTORY = _int_from_env("INFIXCALC_MAX_HISTORY", DEFAULT_MAX_HISTORY)
LOG_LEVEL = os.environ.get("INFIXCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
