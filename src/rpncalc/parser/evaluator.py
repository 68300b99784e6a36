# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import math

from rpncalc.exceptions.calc_exceptions import BadExpression, DivisionByZero
from rpncalc.parser.tokens import DIV, Operand, Operator


def round_half_away(number):
    """round to the nearest integer, ties away from zero (C's round())"""
    if not math.isfinite(number):
        return number
    magnitude = abs(number)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, number)


def round_result(number):
    return round_half_away(number * 100) / 100


def _pop(stack):
    if not stack:
        raise BadExpression()
    return stack.pop()


def evaluate_postfix(postfix):
    """Evaluate a postfix token sequence, result rounded to 2 decimals."""
    stack = []
    for token in postfix:
        if isinstance(token, Operand):
            stack.append(token.value)
        elif isinstance(token, Operator):
            b = _pop(stack)
            a = _pop(stack)
            if token is DIV and b == 0.0:
                raise DivisionByZero()
            stack.append(token(a, b))
        else:
            raise TypeError(f"unexpected token in postfix sequence: {token!r}")

    if len(stack) != 1:
        raise BadExpression()

    return round_result(stack[-1])
