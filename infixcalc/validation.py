"""Input checks that run before any parsing.

Every function here is a pure predicate returning a Result; none mutates or
stores its input.
"""

from __future__ import annotations

import logging
import math
import re

from infixcalc.models import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, ErrorKind, Result

logger = logging.getLogger(__name__)

# Digits, the four operators, decimal point, parentheses and plain spaces.
_ALLOWED_RE = re.compile(r"^[\d+\-*/.() ]+$", re.ASCII)


def validate_expression(text: str) -> Result:
    """Reject blank input and characters outside the calculator alphabet."""
    if not text or not text.strip():
        logger.debug("Rejected blank expression")
        return Result.failure(ErrorKind.EMPTY_EXPRESSION)

    if not _ALLOWED_RE.match(text):
        logger.debug(f"Rejected disallowed characters in {text!r}")
        return Result.failure(ErrorKind.INVALID_EXPRESSION)

    return Result.success()


def validate_parentheses(text: str) -> Result:
    """Check that every ')' closes an earlier '(' and none are left open."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth < 0:
            return Result.failure(ErrorKind.MISMATCHED_PARENTHESES)

    if depth != 0:
        return Result.failure(ErrorKind.MISMATCHED_PARENTHESES)
    return Result.success()


def is_valid_number(text: str) -> bool:
    """True if text parses to a finite float."""
    try:
        return math.isfinite(float(text))
    except (TypeError, ValueError):
        return False


def is_in_safe_range(value: float) -> bool:
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def safe_parse_number(text: str) -> Result:
    """Parse a numeric literal, checking it is finite and within the safe range.

    Args:
        text: Literal such as ``"42"``, ``"-3.5"`` or ``".25"``.

    Returns:
        Result holding the float, or InvalidNumber / NumberOutOfRange.
    """
    if text is None:
        return Result.failure(ErrorKind.INVALID_NUMBER, "Value is missing")
    if not is_valid_number(text):
        return Result.failure(ErrorKind.INVALID_NUMBER)

    value = float(text)
    if not is_in_safe_range(value):
        return Result.failure(ErrorKind.NUMBER_OUT_OF_RANGE)
    return Result.success(value)
