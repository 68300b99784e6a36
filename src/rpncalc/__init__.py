from rpncalc.exceptions.calc_exceptions import (
    BadExpression,
    DivisionByZero,
    EvalError,
    InvalidToken,
    MismatchedParentheses,
)
from rpncalc.parser.expr import evaluate
from rpncalc.utils._version import __version__

__all__ = [
    "__version__",
    "evaluate",
    "EvalError",
    "InvalidToken",
    "MismatchedParentheses",
    "BadExpression",
    "DivisionByZero",
]
