"""Splitting source text into tokens."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Union

from .literal import Literal, NotALiteralError, TokenError, parse_literal
from .operator import Operator
from .variable import Variable


class Keyword(Enum):
    """A reserved word."""

    LET = "Let"

    def __str__(self) -> str:
        return self.value


Token = Union[Keyword, Operator, Literal, Variable]


class LexError(ValueError):
    """The source text cannot be split into tokens."""


def _split(text: str) -> list[str]:
    pieces: list[str] = []
    current: list[str] = []
    open_quote: Optional[str] = None
    for char in text:
        if char in "'\"":
            if open_quote is None:
                open_quote = char
            elif open_quote != char:
                raise LexError(
                    f"Expected matching closing delimiter {open_quote}, found {char}"
                )
            else:
                open_quote = None
            current.append(char)
        elif char.isspace() and open_quote is None:
            pieces.append("".join(current))
            current = []
        else:
            current.append(char)
    pieces.append("".join(current))
    if open_quote is not None:
        raise LexError(f"Expected closing delimiter {open_quote}")
    return [piece for piece in pieces if piece]


def _split_at(piece: str, operator: Operator) -> Optional[Iterator[Token]]:
    position = piece.find(operator.value)
    if position < 0:
        return None

    def parts() -> Iterator[Token]:
        yield from tokenize(piece[:position])
        yield operator
        yield from tokenize(piece[position + len(operator.value):])

    return parts()


def _tokenize_piece(piece: str) -> Iterator[Token]:
    try:
        yield Keyword(piece)
        return
    except ValueError:
        pass

    for operator in Operator:
        if operator is Operator.DOT:
            continue
        parts = _split_at(piece, operator)
        if parts is not None:
            yield from parts
            return

    try:
        literal = parse_literal(piece)
    except NotALiteralError:
        pass
    except TokenError as error:
        raise LexError(f"invalid literal {piece!r}: {error}") from error
    else:
        yield literal
        return

    parts = _split_at(piece, Operator.DOT)
    if parts is not None:
        yield from parts
        return

    yield Variable(piece)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in order."""
    for piece in _split(text):
        yield from _tokenize_piece(piece)


class Lexer:
    """A stream of tokens with one token of look-ahead."""

    def __init__(self, text: str) -> None:
        self._tokens: list[Token] = list(tokenize(text))
        self._tokens.reverse()

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at the end."""
        return self._tokens[-1] if self._tokens else None

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        if not self._tokens:
            raise StopIteration
        return self._tokens.pop()