# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Token types produced by the tokenizer.

Operands carry a float, operators and brackets carry a fixed
precedence. Operator and bracket tokens are module level singletons,
so identity comparison works for them.
"""

import operator
from dataclasses import dataclass, field
from typing import Callable


def format_number(value):
    """render integral floats without a fractional part: 7.0 -> '7', -0.0 -> '-0'"""
    if value.is_integer():
        return f"{value:.0f}"
    return repr(value)


@dataclass(frozen=True)
class Operand:
    value: float

    def __str__(self):
        return format_number(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str
    precedence: int
    fun: Callable[[float, float], float] = field(compare=False, repr=False)

    def __call__(self, a, b):
        return self.fun(a, b)

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class Bracket:
    symbol: str
    precedence: int = 1

    def __str__(self):
        return self.symbol


ADD = Operator("+", 2, operator.add)
SUB = Operator("-", 2, operator.sub)
MUL = Operator("*", 3, operator.mul)
DIV = Operator("/", 3, operator.truediv)

LEFT_BRACKET = Bracket("(")
RIGHT_BRACKET = Bracket(")")

single_char_tokens = {
    "+": ADD,
    "-": SUB,
    "*": MUL,
    "/": DIV,
    "(": LEFT_BRACKET,
    ")": RIGHT_BRACKET,
}


def format_tokens(tokens):
    """space separated rendering of a token sequence, e.g. '1 2 3 * +'"""
    return " ".join(str(t) for t in tokens)
