"""infixcalc — arithmetic expression evaluator.

Validates an infix expression, tokenizes it, folds unary minus into signed
literals, converts to postfix with the shunting-yard algorithm and evaluates
the result on an operand stack. Every failure comes back as a Result tagged
with an ErrorKind rather than an exception.

Usage:
    python -m infixcalc eval "3+4*2"     # 11
    python -m infixcalc postfix "3+4*2"  # 3 4 2 * +
    python -m infixcalc repl             # Interactive session
"""

from infixcalc.engine import calculate, evaluate_postfix, infix_to_postfix, to_postfix
from infixcalc.models import ErrorKind, Result

__all__ = ["calculate", "evaluate_postfix", "infix_to_postfix", "to_postfix", "ErrorKind", "Result"]
