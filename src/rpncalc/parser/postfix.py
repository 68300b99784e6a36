# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""infix -> postfix conversion (shunting-yard)"""

from rpncalc.exceptions.calc_exceptions import MismatchedParentheses
from rpncalc.parser.tokens import LEFT_BRACKET, RIGHT_BRACKET, Operand, Operator


def _handle_closing_bracket(operator_stack, output):
    while True:
        if not operator_stack:
            raise MismatchedParentheses()
        top = operator_stack.pop()
        if top is LEFT_BRACKET:
            break
        output.append(top)


def to_postfix(tokens):
    """Convert an iterable of infix tokens to a list in postfix order.

    Operators of equal precedence are left-associative. Brackets do not
    appear in the result.
    """
    output = []
    operator_stack = []

    for token in tokens:
        if isinstance(token, Operand):
            output.append(token)
        elif isinstance(token, Operator):
            while operator_stack and token.precedence <= operator_stack[-1].precedence:
                output.append(operator_stack.pop())
            operator_stack.append(token)
        elif token is LEFT_BRACKET:
            operator_stack.append(token)
        elif token is RIGHT_BRACKET:
            _handle_closing_bracket(operator_stack, output)
        else:
            raise TypeError(f"unknown token: {token!r}")

    while operator_stack:
        top = operator_stack.pop()
        if top is LEFT_BRACKET:
            raise MismatchedParentheses()
        output.append(top)

    return output
