"""Infixcalc engine — turns an infix expression into a number.

Data flow per calculation:
1. validate_expression / validate_parentheses reject bad input up front
2. tokenize splits the text into classified tokens
3. merge_negative_numbers fuses unary minus into signed number tokens
4. infix_to_postfix reorders tokens with the shunting-yard algorithm
5. evaluate_postfix runs the postfix string on an operand stack

Each step returns a Result and the first failure is passed through
unchanged. Nothing here keeps state between calls.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from infixcalc.models import ErrorKind, Result, Token, TokenKind
from infixcalc.validation import (
    is_in_safe_range,
    is_valid_number,
    safe_parse_number,
    validate_expression,
    validate_parentheses,
)

logger = logging.getLogger(__name__)

# A number (optional digits, optional '.', at least one digit) or one operator/paren.
_TOKEN_RE = re.compile(r"\d*\.?\d+|[+\-*/()]", re.ASCII)
_BINARY_OPERATORS = ("+", "-", "*", "/")


def tokenize(text: str) -> Result:
    """Split text into Tokens. Characters outside the grammar are skipped.

    Returns:
        Result holding a list of Token, or InvalidExpression when nothing matched.
    """
    tokens = [Token.classify(lexeme) for lexeme in _TOKEN_RE.findall(text)]
    if not tokens:
        logger.debug(f"No tokens found in {text!r}")
        return Result.failure(ErrorKind.INVALID_EXPRESSION)
    return Result.success(tokens)


def _is_unary_position(tokens: Sequence[Token], index: int) -> bool:
    """A '-' is unary at the start or right after an operator or '('."""
    if index == 0:
        return True
    prev = tokens[index - 1]
    return prev.is_operator or prev.kind is TokenKind.LEFT_PAREN


def merge_negative_numbers(tokens: Sequence[Token]) -> Result:
    """Fuse each unary '-' with the number that follows it.

    '5-3' keeps a binary minus, while '-5+3' and '5*-3' become signed
    literals, so the converter only ever sees binary operators. A unary '-'
    that is not followed by a number (e.g. '-(2)') stays an operator token.
    """
    merged: list[Token] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None

        if (
            token.is_operator
            and token.text == "-"
            and _is_unary_position(tokens, i)
            and nxt is not None
            and nxt.is_number
        ):
            literal = f"-{nxt.text}"
            if not is_valid_number(literal):
                return Result.failure(ErrorKind.INVALID_NUMBER)
            merged.append(Token(TokenKind.NUMBER, literal))
            i += 2
            continue

        merged.append(token)
        i += 1

    return Result.success(merged)


def _check_operand(text: str) -> Result:
    """Parse a numeric token; any finiteness or range failure is out of range."""
    parsed = safe_parse_number(text)
    if not parsed.ok:
        logger.debug(f"Operand {text!r} rejected: {parsed.message}")
        return Result.failure(ErrorKind.NUMBER_OUT_OF_RANGE)
    return parsed


def infix_to_postfix(tokens: Sequence[Token]) -> Result:
    """Convert normalized infix tokens to a space-joined postfix string.

    Shunting-yard: operators are popped while the stack top has greater or
    equal precedence, which makes every operator left-associative.
    """
    output: list[str] = []
    stack: list[Token] = []

    for token in tokens:
        if token.is_number:
            checked = _check_operand(token.text)
            if not checked.ok:
                return checked
            output.append(token.text)

        elif token.is_operator:
            while (
                stack
                and stack[-1].is_operator
                and stack[-1].precedence >= token.precedence
            ):
                output.append(stack.pop().text)
            stack.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop().text)
            if not stack:
                return Result.failure(ErrorKind.MISMATCHED_PARENTHESES)
            stack.pop()

        else:
            return Result.failure(
                ErrorKind.INVALID_EXPRESSION, f"invalid token: {token.text}"
            )

    while stack:
        top = stack.pop()
        if top.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN):
            return Result.failure(ErrorKind.MISMATCHED_PARENTHESES)
        output.append(top.text)

    if not output:
        return Result.failure(ErrorKind.EMPTY_EXPRESSION)
    return Result.success(" ".join(output))


def _apply(operator: str, a: float, b: float) -> Result:
    if operator == "+":
        return Result.success(a + b)
    if operator == "-":
        return Result.success(a - b)
    if operator == "*":
        return Result.success(a * b)
    if operator == "/":
        if b == 0:
            return Result.failure(ErrorKind.DIVISION_BY_ZERO)
        return Result.success(a / b)
    return Result.failure(ErrorKind.INVALID_EXPRESSION, f"invalid token: {operator}")


def _parses_as_float(text: str) -> bool:
    """True for any float literal, including 'inf' and '1e400'; range is checked later."""
    try:
        float(text)
    except ValueError:
        return False
    return True


def evaluate_postfix(postfix: str) -> Result:
    """Evaluate a space-separated postfix expression.

    Any token that parses as a float is an operand, so non-finite or
    exponent literals are reported as NumberOutOfRange.

    Returns:
        Result holding the float, or the first failure met while evaluating.
    """
    stack: list[float] = []

    for item in postfix.split():
        if item not in _BINARY_OPERATORS and _parses_as_float(item):
            checked = _check_operand(item)
            if not checked.ok:
                return checked
            stack.append(checked.value)
            continue

        if item not in _BINARY_OPERATORS:
            return Result.failure(
                ErrorKind.INVALID_EXPRESSION, f"invalid token: {item}"
            )
        if len(stack) < 2:
            return Result.failure(ErrorKind.MISSING_OPERAND)

        b = stack.pop()
        a = stack.pop()
        applied = _apply(item, a, b)
        if not applied.ok:
            return applied

        value = applied.value
        if not math.isfinite(value):
            return Result.failure(ErrorKind.CALCULATION_ERROR)
        if not is_in_safe_range(value):
            return Result.failure(ErrorKind.NUMBER_OUT_OF_RANGE)
        stack.append(value)

    if len(stack) != 1:
        logger.debug(f"Postfix {postfix!r} left {len(stack)} values on the stack")
        return Result.failure(ErrorKind.INVALID_EXPRESSION)
    return Result.success(stack[0])


def to_postfix(expression: str) -> Result:
    """Validate, tokenize, normalize and convert without evaluating."""
    for check in (validate_expression, validate_parentheses):
        checked = check(expression)
        if not checked.ok:
            return checked

    tokens = tokenize(expression)
    if not tokens.ok:
        return tokens

    merged = merge_negative_numbers(tokens.value)
    if not merged.ok:
        return merged

    return infix_to_postfix(merged.value)


def calculate(expression: str) -> Result:
    """Evaluate an infix expression.

    Example:
        >>> calculate("3+4*2").value
        11.0
        >>> calculate("4/0").kind
        <ErrorKind.DIVISION_BY_ZERO: 'DivisionByZero'>
    """
    try:
        postfix = to_postfix(expression)
        result = postfix if not postfix.ok else evaluate_postfix(postfix.value)
    except Exception:
        logger.exception(f"Unexpected failure calculating {expression!r}")
        return Result.failure(ErrorKind.CALCULATION_ERROR)

    if result.ok:
        logger.debug(f"{expression!r} = {result.value}")
    else:
        logger.debug(f"{expression!r} failed: {result.kind.value} ({result.message})")
    return result
