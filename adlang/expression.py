"""Expression trees: parsing from tokens and evaluation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import MutableMapping

from .lexer import Keyword, Lexer, Token
from .literal import Literal
from .operator import Operator
from .value import Value, ValueKind, ValueOperationError
from .variable import Variable

Variables = MutableMapping[Variable, Value]


class ParseError(ValueError):
    """The tokens do not form a valid expression."""


class EvalError(Exception):
    """An expression cannot be evaluated."""


def _token_kind(token: Token) -> str:
    if isinstance(token, Keyword):
        return "Keyword"
    if isinstance(token, Operator):
        return "Op"
    if isinstance(token, Literal):
        return "Literal"
    return "Variable"


class Expression(ABC):
    """A node of an expression tree."""

    @abstractmethod
    def eval(self, variables: Variables) -> Value:
        """Evaluate the expression, reading and writing ``variables``."""


@dataclass(frozen=True)
class VariableExpr(Expression):
    """A reference to a variable."""

    variable: Variable

    def eval(self, variables: Variables) -> Value:
        try:
            return variables[self.variable]
        except KeyError:
            raise EvalError(f"unknown variable '{self.variable.name}'") from None

    def __str__(self) -> str:
        return self.variable.name


@dataclass(frozen=True)
class LiteralExpr(Expression):
    """A literal value."""

    literal: Literal

    def eval(self, variables: Variables) -> Value:
        return self.literal.value

    def __str__(self) -> str:
        return str(self.literal)


@dataclass(frozen=True)
class Operation(Expression):
    """A binary operation."""

    operator: Operator
    lhs: Expression
    rhs: Expression

    def eval(self, variables: Variables) -> Value:
        rhs = self.rhs.eval(variables)
        operator = self.operator

        if operator is Operator.ASSIGN:
            if not isinstance(self.lhs, VariableExpr):
                raise EvalError(f"Expected Variable, found {self.lhs}")
            variables[self.lhs.variable] = rhs
            return rhs
        if operator is Operator.DOT:
            raise EvalError("the '.' operator cannot be evaluated")
        if operator in (Operator.OPENING_BRACKET, Operator.CLOSING_BRACKET):
            raise EvalError(f"Expected Expression, found Operator '{operator}'")

        lhs = self.lhs.eval(variables)
        try:
            if operator is Operator.ADD:
                return lhs + rhs
            if operator is Operator.SUB:
                return lhs - rhs
            if operator is Operator.MUL:
                return lhs * rhs
            if operator is Operator.DIV:
                return lhs / rhs
            if operator is Operator.EQ:
                return Value(ValueKind.BOOL, lhs == rhs)
            return Value(ValueKind.BOOL, lhs != rhs)
        except ValueOperationError as error:
            raise EvalError(str(error)) from error

    def __str__(self) -> str:
        return f"({self.operator} {self.lhs} {self.rhs})"


@dataclass(frozen=True)
class Declaration:
    """A statement declaring a new variable."""

    name: str
    expression: Expression


@dataclass(frozen=True)
class Assign:
    """A statement assigning to an existing variable."""

    name: str
    expression: Expression


def _parse_prefix(lexer: Lexer) -> Expression:
    token = next(lexer, None)
    if token is None:
        raise ParseError("expected Token, but there were no Tokens left")
    if isinstance(token, Variable):
        return VariableExpr(token)
    if isinstance(token, Literal):
        return LiteralExpr(token)
    if isinstance(token, Keyword):
        raise ParseError(f"expected Expression, found Keyword '{token}'")
    if token is Operator.OPENING_BRACKET:
        inner = parse_expression(lexer, token.infix_binding_power()[1])
        if next(lexer, None) is not Operator.CLOSING_BRACKET:
            raise ParseError("expected closing bracket")
        return inner
    if token in (Operator.ADD, Operator.SUB):
        zero = LiteralExpr(Literal(Value(ValueKind.I64, 0)))
        return Operation(token, zero, parse_expression(lexer, token.infix_binding_power()[1]))
    raise ParseError(f"expected Expression, found Operator '{token}'")


def parse_expression(lexer: Lexer, binding_power_lhs: int = 0) -> Expression:
    """Parse an expression whose operators bind at least as tightly as given."""
    lhs = _parse_prefix(lexer)
    while True:
        token = lexer.peek()
        if token is None:
            break
        if not isinstance(token, Operator):
            raise ParseError(f"expected Operator, found '{_token_kind(token)}'")
        left_power, right_power = token.infix_binding_power()
        if left_power < binding_power_lhs:
            break
        next(lexer)
        rhs = parse_expression(lexer, right_power)
        lhs = Operation(token, lhs, rhs)
    return lhs


def parse(text: str) -> Expression:
    """Parse source text into an expression."""
    return parse_expression(Lexer(text), 0)