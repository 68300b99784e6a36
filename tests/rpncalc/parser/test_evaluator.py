#! /usr/bin/env py.test

import pytest

from rpncalc.exceptions.calc_exceptions import BadExpression, DivisionByZero
from rpncalc.parser import evaluator
from rpncalc.parser.tokens import ADD, DIV, MUL, SUB, Operand

A, S, M, D = ADD, SUB, MUL, DIV


def toks(*items):
    return [Operand(float(x)) if isinstance(x, (int, float)) else x for x in items]


@pytest.mark.parametrize(
    "postfix, expected",
    [
        (toks(1), 1),
        (toks(1, 3, D), 0.33),
        (toks(1, 2, A), 3),
        (toks(15, 7, 1, 1, A, S, D, 3, M, 2, 1, 1, A, A, S), 5),
        (toks(2, 8, S), -6),
        (toks(10, 4, D), 2.5),
    ],
)
def test_evaluate_postfix(postfix, expected):
    assert evaluator.evaluate_postfix(postfix) == expected


def test_operand_order():
    # a b - means a - b
    assert evaluator.evaluate_postfix(toks(1, 3, S)) == -2
    assert evaluator.evaluate_postfix(toks(3, 1, D)) == 3


@pytest.mark.parametrize(
    "postfix, exc, msg",
    [
        (toks(), BadExpression, "bad input expression"),
        (toks(1, 0, D), DivisionByZero, "division by zero"),
        (toks(1, 2, A, M), BadExpression, "bad input expression"),
        (toks(1, M), BadExpression, "bad input expression"),
        (toks(M), BadExpression, "bad input expression"),
        (toks(1, 2), BadExpression, "bad input expression"),
    ],
)
def test_evaluate_postfix_errors(postfix, exc, msg):
    with pytest.raises(exc) as excinfo:
        evaluator.evaluate_postfix(postfix)
    assert str(excinfo.value) == msg


def test_negative_zero_divisor():
    with pytest.raises(DivisionByZero):
        evaluator.evaluate_postfix(toks(1, -0.0, D))


def test_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        evaluator.evaluate_postfix(toks(5, 0, D))


@pytest.mark.parametrize(
    "number, expected",
    [
        (0.5, 1),
        (-0.5, -1),
        (1.5, 2),
        (2.5, 3),
        (-2.5, -3),
        (1.4999, 1),
        (-1.4999, -1),
        (0.49999999999999994, 0),
        (7.0, 7),
    ],
)
def test_round_half_away(number, expected):
    assert evaluator.round_half_away(number) == expected


def test_round_result():
    assert evaluator.round_result(0.125) == 0.13
    assert evaluator.round_result(-0.125) == -0.13
    assert evaluator.round_result(1 / 3) == 0.33
    assert evaluator.round_result(2 / 3) == 0.67
    assert evaluator.round_result(0.75) == 0.75


def test_round_result_infinite():
    assert evaluator.round_result(float("inf")) == float("inf")
