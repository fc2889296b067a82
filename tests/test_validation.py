"""Tests for the up-front expression checks and number helpers."""

import pytest

from infixcalc.models import MAX_SAFE_INTEGER, ErrorKind
from infixcalc.validation import (
    is_in_safe_range,
    is_valid_number,
    safe_parse_number,
    validate_expression,
    validate_parentheses,
)


# --- validate_expression ---

@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_blank_input_is_empty(text):
    result = validate_expression(text)
    assert not result.ok
    assert result.kind is ErrorKind.EMPTY_EXPRESSION
    assert result.message == "No expression to calculate"


@pytest.mark.parametrize("text", ["2+a", "2^3", "1,5", "sqrt(4)", "2\t+3"])
def test_disallowed_characters(text):
    assert validate_expression(text).kind is ErrorKind.INVALID_EXPRESSION


def test_allowed_alphabet_passes():
    assert validate_expression("(1.5 + 2) * -3 / 4").ok


# --- validate_parentheses ---

@pytest.mark.parametrize("text", ["(2+3", "2+3)", ")(", "((1)"])
def test_unbalanced_parentheses(text):
    assert validate_parentheses(text).kind is ErrorKind.MISMATCHED_PARENTHESES


def test_balanced_parentheses():
    assert validate_parentheses("((1+2)*(3))").ok
    assert validate_parentheses("1+2").ok


def test_parentheses_check_is_repeatable():
    """Same verdict twice, input untouched."""
    text = "(2+3))"
    first = validate_parentheses(text)
    second = validate_parentheses(text)
    assert first == second
    assert text == "(2+3))"


# --- number helpers ---

def test_is_valid_number():
    assert is_valid_number("3.25")
    assert is_valid_number("-.5")
    assert not is_valid_number("abc")
    assert not is_valid_number("9" * 400)  # overflows to inf


def test_is_in_safe_range_bounds():
    assert is_in_safe_range(MAX_SAFE_INTEGER)
    assert is_in_safe_range(-MAX_SAFE_INTEGER)
    assert not is_in_safe_range(MAX_SAFE_INTEGER + 1)


def test_safe_parse_number():
    assert safe_parse_number("42").value == 42.0
    assert safe_parse_number("x").kind is ErrorKind.INVALID_NUMBER
    assert safe_parse_number(None).kind is ErrorKind.INVALID_NUMBER
    assert safe_parse_number("9007199254740992").kind is ErrorKind.NUMBER_OUT_OF_RANGE
