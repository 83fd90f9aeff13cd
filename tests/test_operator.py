import pytest

from adlang.operator import Operator


@pytest.mark.parametrize(
    "operator, expected",
    [
        (Operator.ADD, (10, 11)),
        (Operator.SUB, (10, 11)),
        (Operator.MUL, (12, 13)),
        (Operator.DIV, (12, 13)),
        (Operator.EQ, (8, 9)),
        (Operator.NEQ, (8, 9)),
        (Operator.ASSIGN, (2, 1)),
        (Operator.OPENING_BRACKET, (0, 1)),
        (Operator.CLOSING_BRACKET, (0, 0)),
        (Operator.DOT, (20, 21)),
    ],
)
def test_binding_powers(operator, expected):
    assert operator.infix_binding_power() == expected


@pytest.mark.parametrize(
    "operator, symbol",
    [
        (Operator.ADD, "+"),
        (Operator.EQ, "=="),
        (Operator.NEQ, "!="),
        (Operator.ASSIGN, "="),
        (Operator.DOT, "."),
    ],
)
def test_display_is_symbol(operator, symbol):
    assert str(operator) == symbol
    assert Operator(symbol) is operator


@pytest.mark.parametrize(
    "token, expected, power",
    [
        ("a==b", Operator.EQ, (8, 9)),
        ("a!=b", Operator.NEQ, (8, 9)),
        ("a=b", Operator.ASSIGN, (2, 1)),
    ],
)
def test_compound_symbols_are_tried_before_assign(token, expected, power):
    first_match = next(op for op in Operator if str(op) in token)
    assert first_match is expected
    assert first_match.infix_binding_power() == power


def test_multiplication_binds_tighter_than_addition():
    assert Operator.MUL.infix_binding_power()[0] > Operator.ADD.infix_binding_power()[0]
    assert Operator.ADD.infix_binding_power()[0] > Operator.EQ.infix_binding_power()[0]


def test_assign_is_right_associative():
    left, right = Operator.ASSIGN.infix_binding_power()
    assert left > right