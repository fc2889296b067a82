"""Bounded log of successful calculations.

The caller constructs a CalculationHistory and passes it around; there is no
shared module-level instance.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Optional

from infixcalc import config
from infixcalc.models import ErrorKind, HistoryEntry, Result

logger = logging.getLogger(__name__)


class CalculationHistory:
    """Ordered (oldest→newest) list of entries capped at ``max_entries``."""

    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is None:
            max_entries = config.MAX_HISTORY
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
            raise ValueError(f"max_entries must be a positive integer, got {max_entries!r}")
        self.max_entries = max_entries
        self._entries: list[HistoryEntry] = []

    def push(self, expression: Any, result: Any) -> Result:
        """Append a calculation, evicting the oldest entry beyond the cap.

        Error results (strings), bools and non-finite numbers are refused.
        """
        if not isinstance(expression, str) or not expression.strip():
            logger.warning("Entry must have a valid expression string")
            return Result.failure(
                ErrorKind.INVALID_EXPRESSION, "Missing or invalid expression"
            )

        if result is None:
            return Result.failure(ErrorKind.INVALID_NUMBER, "Missing result")

        if isinstance(result, (str, bool)) or not isinstance(result, Real):
            logger.info("Skipping error result from history")
            return Result.failure(
                ErrorKind.INVALID_NUMBER, "Cannot add error results to history"
            )

        if not math.isfinite(result):
            logger.warning("Result must be a valid finite number")
            return Result.failure(ErrorKind.INVALID_NUMBER, "Invalid result value")

        self._entries.append(HistoryEntry(expression.strip(), float(result)))
        if len(self._entries) > self.max_entries:
            del self._entries[: -self.max_entries]
        return Result.success()

    def all(self) -> list[HistoryEntry]:
        return list(self._entries)

    def last(self) -> Optional[HistoryEntry]:
        return self._entries[-1] if self._entries else None

    def get(self, index: int) -> Optional[HistoryEntry]:
        if not self._valid_index(index):
            return None
        return self._entries[index]

    def remove(self, index: int) -> Result:
        if not self._valid_index(index):
            return Result.failure(ErrorKind.INVALID_EXPRESSION, "Invalid index")
        del self._entries[index]
        return Result.success()

    def clear(self) -> None:
        self._entries = []

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def _valid_index(self, index: Any) -> bool:
        # Negative indexes are rejected rather than counted from the end.
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._entries)
        )
