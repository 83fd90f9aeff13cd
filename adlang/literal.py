"""Literal values written in source text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .value import Value, ValueKind

_DIGITS = frozenset("0123456789")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"\+?\d+", re.ASCII)

_INT_LIMITS = {
    ValueKind.I64: (-(2**63), 2**63 - 1),
    ValueKind.U64: (0, 2**64 - 1),
    ValueKind.I32: (-(2**31), 2**31 - 1),
    ValueKind.U32: (0, 2**32 - 1),
}


class TokenError(ValueError):
    """A token looks like a literal but cannot be read as one."""


class NotALiteralError(ValueError):
    """A token is not a literal at all."""

    def __init__(self, message: str = "Token is not a literal") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Literal:
    """A literal value in an expression."""

    value: Value

    def __str__(self) -> str:
        return str(self.value)


def _parse_float(text: str, kind: ValueKind) -> Value:
    if not _FLOAT_RE.fullmatch(text):
        raise TokenError("invalid float literal")
    return Value(kind, float(text))


def _parse_int(text: str, kind: ValueKind) -> Value:
    if not text:
        raise TokenError("cannot parse integer from empty string")
    if not _INT_RE.fullmatch(text):
        raise TokenError("invalid digit found in string")
    number = int(text)
    low, high = _INT_LIMITS[kind]
    if not low <= number <= high:
        raise TokenError("number too large to fit in target type")
    return Value(kind, number)


def _parse_number(text: str) -> Value:
    if "." in text:
        if text.endswith("f"):
            return _parse_float(text[:-1], ValueKind.F32)
        return _parse_float(text.rstrip("d"), ValueKind.F64)
    for suffix, kind in (("i32", ValueKind.I32), ("u32", ValueKind.U32), ("u", ValueKind.U64)):
        if text.endswith(suffix):
            return _parse_int(text[: -len(suffix)], kind)
    return _parse_int(text.rstrip("i"), ValueKind.I64)


def parse_literal(text: str) -> Literal:
    """Read a literal token.

    Raises NotALiteralError if the token is not a literal and TokenError if
    it looks like one but is malformed.
    """
    first = text[0] if text else " "
    if first in _DIGITS:
        return Literal(_parse_number(text))
    if first == "'":
        if len(text) < 2:
            raise TokenError("chars must contain exactly one character")
        return Literal(Value(ValueKind.CHAR, text[1]))
    if first == '"':
        if len(text) < 2:
            raise TokenError("unterminated string literal")
        return Literal(Value(ValueKind.STRING, text[1:-1]))
    if text == "true":
        return Literal(Value(ValueKind.BOOL, True))
    if text == "false":
        return Literal(Value(ValueKind.BOOL, False))
    raise NotALiteralError()