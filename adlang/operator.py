"""Operators of the expression language and their binding powers."""

from __future__ import annotations

from enum import Enum


class Operator(Enum):
    """An operator, valued by the symbol it is written with.

    Members are declared in the order the lexer tries them, so that
    ``==`` and ``!=`` are recognised before ``=``.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NEQ = "!="
    ASSIGN = "="
    OPENING_BRACKET = "("
    CLOSING_BRACKET = ")"
    DOT = "."

    def __str__(self) -> str:
        return self.value

    def infix_binding_power(self) -> tuple[int, int]:
        """Return the (left, right) binding power used when parsing infix."""
        return _BINDING_POWERS[self]


_BINDING_POWERS: dict[Operator, tuple[int, int]] = {
    Operator.ADD: (10, 11),
    Operator.SUB: (10, 11),
    Operator.DIV: (12, 13),
    Operator.MUL: (12, 13),
    Operator.ASSIGN: (2, 1),
    Operator.EQ: (8, 9),
    Operator.NEQ: (8, 9),
    Operator.OPENING_BRACKET: (0, 1),
    Operator.CLOSING_BRACKET: (0, 0),
    Operator.DOT: (20, 21),
}