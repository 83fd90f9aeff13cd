import pytest

from adlang.lexer import Keyword, LexError, Lexer, tokenize
from adlang.literal import Literal
from adlang.operator import Operator
from adlang.value import Value, ValueKind
from adlang.variable import Variable


def lit(n):
    return Literal(Value(ValueKind.I64, n))


def test_operators_without_spaces():
    assert list(tokenize("1+2 * 3")) == [lit(1), Operator.ADD, lit(2), Operator.MUL, lit(3)]


def test_prefix_minus():
    assert list(tokenize("-5 + -5")) == [
        Operator.SUB, lit(5), Operator.ADD, Operator.SUB, lit(5),
    ]


def test_equality_is_not_split_into_assignments():
    assert list(tokenize("x = a == 2")) == [
        Variable("x"), Operator.ASSIGN, Variable("a"), Operator.EQ, lit(2),
    ]


def test_not_equal():
    tokens = list(tokenize("true != false"))
    assert tokens[1] is Operator.NEQ
    assert len(tokens) == 3


def test_brackets():
    assert list(tokenize("(( ( a )) )")) == [
        Operator.OPENING_BRACKET,
        Operator.OPENING_BRACKET,
        Operator.OPENING_BRACKET,
        Variable("a"),
        Operator.CLOSING_BRACKET,
        Operator.CLOSING_BRACKET,
        Operator.CLOSING_BRACKET,
    ]


def test_float_literal_is_not_a_dot():
    tokens = list(tokenize("1.23"))
    assert len(tokens) == 1
    assert tokens[0].value == Value(ValueKind.F64, 1.23)


def test_dot_between_names():
    assert list(tokenize("a.b.c")) == [
        Variable("a"), Operator.DOT, Variable("b"), Operator.DOT, Variable("c"),
    ]


def test_string_with_spaces_stays_whole():
    assert list(tokenize('"Hello, World!"')) == [
        Literal(Value(ValueKind.STRING, "Hello, World!"))
    ]


def test_char_whitespace():
    assert list(tokenize("' '")) == [Literal(Value(ValueKind.CHAR, " "))]


def test_keyword():
    assert list(tokenize("Let x")) == [Keyword.LET, Variable("x")]
    assert list(tokenize("let")) == [Variable("let")]


def test_empty_input():
    assert list(tokenize("   ")) == []


@pytest.mark.parametrize("text", ["'abc", '"a\'', "1a"])
def test_lex_errors(text):
    with pytest.raises(LexError):
        list(tokenize(text))


def test_lexer_peek_and_next():
    lexer = Lexer("a + 1")
    assert lexer.peek() == Variable("a")
    assert next(lexer) == Variable("a")
    assert lexer.peek() is Operator.ADD
    assert list(lexer) == [Operator.ADD, lit(1)]
    assert lexer.peek() is None
    with pytest.raises(StopIteration):
        next(lexer)


def test_lexer_build_error():
    with pytest.raises(LexError):
        Lexer('"open')