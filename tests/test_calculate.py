"""End-to-end tests for calculate()."""

import pytest

from infixcalc.engine import calculate, evaluate_postfix, to_postfix
from infixcalc.models import ErrorKind


# --- Arithmetic and precedence ---

@pytest.mark.parametrize("expression, expected", [
    ("1+1", 2),
    ("10 - 4", 6),
    ("3 * 7", 21),
    ("15 / 4", 3.75),
    ("2+3*4", 14),
    ("(2+3)*4", 20),
    ("10 - 2 * 3 + 4 / 2", 6),
    ("((2 + 3) * (4 - 1))", 15),
    ("(((1 + 2)))", 3),
    ("3.14 * 2", 6.28),
    (".5 + .25", 0.75),
])
def test_calculate_values(expression, expected):
    result = calculate(expression)
    assert result.ok
    assert result.value == pytest.approx(expected)


# --- Unary minus ---

def test_unary_minus():
    assert calculate("-5+3").value == -2
    assert calculate("5*-3").value == -15
    assert calculate("5-3").value == 2
    assert calculate("5--3").value == 8
    assert calculate("(-2)*(-3)").value == 6


def test_minus_before_paren_is_missing_operand():
    assert calculate("-(2+3)").kind is ErrorKind.MISSING_OPERAND


# --- Errors ---

@pytest.mark.parametrize("expression, kind", [
    ("", ErrorKind.EMPTY_EXPRESSION),
    ("   ", ErrorKind.EMPTY_EXPRESSION),
    ("()", ErrorKind.EMPTY_EXPRESSION),
    ("2+a", ErrorKind.INVALID_EXPRESSION),
    ("2 3", ErrorKind.INVALID_EXPRESSION),
    ("...", ErrorKind.INVALID_EXPRESSION),
    ("(2+3", ErrorKind.MISMATCHED_PARENTHESES),
    ("2+3)", ErrorKind.MISMATCHED_PARENTHESES),
    ("4/0", ErrorKind.DIVISION_BY_ZERO),
    ("4/(2-2)", ErrorKind.DIVISION_BY_ZERO),
    ("2 + + 3", ErrorKind.MISSING_OPERAND),
    ("*", ErrorKind.MISSING_OPERAND),
])
def test_calculate_errors(expression, kind):
    result = calculate(expression)
    assert not result.ok
    assert result.kind is kind
    assert result.message == kind.message


def test_safe_integer_boundary():
    assert calculate("9007199254740991").value == 9007199254740991
    assert calculate("-9007199254740991").value == -9007199254740991
    assert calculate("9007199254740992").kind is ErrorKind.NUMBER_OUT_OF_RANGE
    assert calculate("9007199254740991+1").kind is ErrorKind.NUMBER_OUT_OF_RANGE


def test_calculate_is_deterministic():
    results = [calculate("(1.1 + 2.2) * 3 / 7") for _ in range(5)]
    assert all(r == results[0] for r in results)


def test_round_trip_matches_calculate():
    postfix = to_postfix("3+4*2")
    assert postfix.value == "3 4 2 * +"
    assert evaluate_postfix(postfix.value).value == calculate("3+4*2").value == 11


def test_unexpected_failure_becomes_calculation_error(monkeypatch):
    """No exception crosses calculate()."""
    def boom(postfix):
        raise RuntimeError("boom")

    monkeypatch.setattr("infixcalc.engine.evaluate_postfix", boom)
    result = calculate("1+1")
    assert result.kind is ErrorKind.CALCULATION_ERROR


def test_to_dict():
    assert calculate("2*3").to_dict() == {"ok": True, "value": 6.0}
    assert calculate("1/0").to_dict() == {
        "ok": False,
        "kind": "DivisionByZero",
        "message": "Cannot divide by zero",
    }
