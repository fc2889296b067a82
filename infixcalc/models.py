"""Data models for the infixcalc evaluator.

ErrorKind, TokenKind, Token, Result, HistoryEntry — the typed structures that
flow through validation → engine → history → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

# Largest integer magnitude a double represents exactly.
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


class ErrorKind(str, Enum):
    """Failure classifications returned by the pipeline."""

    EMPTY_EXPRESSION = "EmptyExpression"
    INVALID_EXPRESSION = "InvalidExpression"
    INVALID_NUMBER = "InvalidNumber"
    NUMBER_OUT_OF_RANGE = "NumberOutOfRange"
    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    MISSING_OPERAND = "MissingOperand"
    DIVISION_BY_ZERO = "DivisionByZero"
    CALCULATION_ERROR = "CalculationError"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_EXPRESSION: "No expression to calculate",
    ErrorKind.INVALID_EXPRESSION: "Invalid expression",
    ErrorKind.INVALID_NUMBER: "Invalid number format",
    ErrorKind.NUMBER_OUT_OF_RANGE: "Number outside safe range",
    ErrorKind.MISMATCHED_PARENTHESES: "Mismatched parentheses",
    ErrorKind.MISSING_OPERAND: "Missing operand",
    ErrorKind.DIVISION_BY_ZERO: "Cannot divide by zero",
    ErrorKind.CALCULATION_ERROR: "Calculation error",
}


class TokenKind(str, Enum):
    """Lexical classes produced by the tokenizer."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left-paren"
    RIGHT_PAREN = "right-paren"


OPERATORS = ("+", "-", "*", "/")

# Higher binds tighter; all operators are left-associative.
PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


@dataclass(frozen=True)
class Token:
    """A classified lexeme. Numbers may carry a leading '-' after normalization."""

    kind: TokenKind
    text: str

    @classmethod
    def classify(cls, text: str) -> Token:
        """Build a token from a lexeme matched by the tokenizer grammar."""
        if text in OPERATORS:
            return cls(TokenKind.OPERATOR, text)
        if text == "(":
            return cls(TokenKind.LEFT_PAREN, text)
        if text == ")":
            return cls(TokenKind.RIGHT_PAREN, text)
        return cls(TokenKind.NUMBER, text)

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.text, 0) if self.is_operator else 0

    def __str__(self) -> str:
        return self.text


@dataclass
class Result:
    """Tagged outcome of a pipeline step.

    Either ``ok`` with a ``value`` (which may be None for checks that only
    pass or fail), or not ``ok`` with an ErrorKind and a message.
    """

    ok: bool
    value: Any = None
    kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None) -> Result:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: Optional[str] = None) -> Result:
        return cls(ok=False, kind=kind, message=message or kind.message)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        if self.ok:
            return {"ok": True, "value": self.value}
        return {"ok": False, "kind": self.kind.value, "message": self.message}


@dataclass(frozen=True)
class HistoryEntry:
    """A successful calculation kept in the history log."""

    expression: str
    result: float
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "result": self.result,
            "timestamp": self.timestamp,
        }
