# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Split an arithmetic expression into tokens.

A '-' is read as the sign of the following number whenever an operand
may start at that position (beginning of input, after an operator or
after an opening bracket). Everywhere else it is the subtraction
operator.
"""

import re

from rpncalc.exceptions.calc_exceptions import InvalidToken
from rpncalc.parser.tokens import LEFT_BRACKET, SUB, Operand, Operator, single_char_tokens

SEPARATORS = frozenset(" +-*/()")

rx_number = re.compile(
    r"""
    (?:\d+\.?\d*|\.\d+)   # mantissa: 1 1. 1.5 .5
    (?:[eE]\d+)?          # unsigned exponent
    \Z""",
    re.VERBOSE | re.ASCII,
)


def read_operand(text, start):
    """Read the number starting at text[start].

    Consumes characters up to the next separator and returns a tuple
    (value, end) where end is the index of the first unconsumed
    character. ',' is accepted as decimal separator.
    Raises InvalidToken with the consumed run if it is not a number.
    """
    end = start
    while end < len(text) and text[end] not in SEPARATORS:
        end += 1

    raw = text[start:end]
    literal = raw.replace(",", ".")
    if not rx_number.match(literal):
        raise InvalidToken(raw)
    return float(literal), end


class Tokenizer:
    def __init__(self, expression):
        self.expression = expression
        self.pos = 0
        self.allow_negation = True

    def __iter__(self):
        return self

    def _skip_spaces(self):
        while self.pos < len(self.expression) and self.expression[self.pos] == " ":
            self.pos += 1

    def __next__(self):
        self._skip_spaces()
        if self.pos >= len(self.expression):
            raise StopIteration

        char = self.expression[self.pos]
        token = single_char_tokens.get(char)
        if token is SUB and self.allow_negation:
            value, self.pos = read_operand(self.expression, self.pos + 1)
            token = Operand(-value)
        elif token is not None:
            self.pos += 1
        else:
            value, self.pos = read_operand(self.expression, self.pos)
            token = Operand(value)

        self.allow_negation = isinstance(token, Operator) or token is LEFT_BRACKET
        return token


def tokenize(expression):
    return Tokenizer(expression)
