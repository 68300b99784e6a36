# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Evaluate single-line arithmetic expressions.

Supported are numbers (',' or '.' as decimal separator), + - * /,
parentheses and unary minus. The result is rounded to two decimal
places.

    >>> evaluate("-10 + (8 * 2.5) - (3 / 1,5)")
    8.0
"""

import logging

from rpncalc.parser.evaluator import evaluate_postfix
from rpncalc.parser.postfix import to_postfix
from rpncalc.parser.tokenizer import Tokenizer
from rpncalc.parser.tokens import format_tokens

logger = logging.getLogger(__name__)


def evaluate(expression):
    """Evaluate expression and return the rounded result.

    Raises an EvalError subclass on the first problem found.
    """
    postfix = to_postfix(Tokenizer(expression))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"postfix for {expression!r}: {format_tokens(postfix)!r}")
    result = evaluate_postfix(postfix)
    logger.debug(f"{expression!r} = {result!r}")
    return result
