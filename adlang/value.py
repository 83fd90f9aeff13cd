"""Runtime values and the operations defined on them."""

from __future__ import annotations

import math
import operator as _op
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Union


class ValueOperationError(Exception):
    """Raised when an operation is not defined for the kinds of its operands."""


class ValueKind(Enum):
    """The type of a runtime value."""

    STRING = "String"
    CHAR = "Char"
    I64 = "I64"
    U64 = "U64"
    I32 = "I32"
    U32 = "U32"
    F64 = "F64"
    F32 = "F32"
    BOOL = "Bool"


_INT_RANGES: dict[ValueKind, tuple[int, int]] = {
    ValueKind.I64: (-(2**63), 2**63 - 1),
    ValueKind.U64: (0, 2**64 - 1),
    ValueKind.I32: (-(2**31), 2**31 - 1),
    ValueKind.U32: (0, 2**32 - 1),
}
_FLOAT_KINDS = frozenset({ValueKind.F64, ValueKind.F32})
_NUMERIC_KINDS = frozenset({ValueKind.I64, ValueKind.U64, ValueKind.F64, ValueKind.F32})
_ADD_KINDS = _NUMERIC_KINDS | {ValueKind.STRING}

_CROSS_COMPARABLE = frozenset(
    {
        (ValueKind.I64, ValueKind.U32),
        (ValueKind.U32, ValueKind.I64),
        (ValueKind.I64, ValueKind.I32),
        (ValueKind.I32, ValueKind.I64),
        (ValueKind.U64, ValueKind.U32),
        (ValueKind.U32, ValueKind.U64),
        (ValueKind.U64, ValueKind.I32),
        (ValueKind.I32, ValueKind.U64),
        (ValueKind.F64, ValueKind.F32),
        (ValueKind.F32, ValueKind.F64),
    }
)


def _to_f32(x: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _shortest_f32(x: float) -> str:
    for precision in range(1, 18):
        text = f"{x:.{precision}g}"
        if _to_f32(float(text)) == x:
            return text
    return repr(x)


def _format_float(x: float, single: bool) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = _shortest_f32(x) if single else repr(x)
    return format(Decimal(text).normalize(), "f")


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _float_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass(frozen=True)
class _Operation:
    name: str
    symbol: str
    verb: str
    exact: Callable[[Any, Any], Any]
    floating: Callable[[float, float], float]
    kinds: frozenset


_ADD = _Operation("add", "+", "add", _op.add, _op.add, _ADD_KINDS)
_SUB = _Operation("sub", "-", "subtract", _op.sub, _op.sub, _NUMERIC_KINDS)
_MUL = _Operation("mul", "*", "multiply", _op.mul, _op.mul, _NUMERIC_KINDS)
_DIV = _Operation("div", "/", "divide", _int_div, _float_div, _NUMERIC_KINDS)


@dataclass(frozen=True, eq=False)
class Value:
    """A typed runtime value."""

    kind: ValueKind
    data: Union[str, int, float, bool]

    def __post_init__(self) -> None:
        kind, data = self.kind, self.data
        if kind is ValueKind.STRING:
            if not isinstance(data, str):
                raise TypeError(f"String value needs a str, got {data!r}")
        elif kind is ValueKind.CHAR:
            if not isinstance(data, str) or len(data) != 1:
                raise TypeError(f"Char value needs a single character, got {data!r}")
        elif kind is ValueKind.BOOL:
            if not isinstance(data, bool):
                raise TypeError(f"Bool value needs a bool, got {data!r}")
        elif kind in _INT_RANGES:
            if isinstance(data, bool) or not isinstance(data, int):
                raise TypeError(f"{kind.value} value needs an int, got {data!r}")
            low, high = _INT_RANGES[kind]
            if not low <= data <= high:
                raise OverflowError(f"{data} does not fit in {kind.value}")
        else:
            if isinstance(data, bool) or not isinstance(data, (int, float)):
                raise TypeError(f"{kind.value} value needs a float, got {data!r}")
            number = float(data)
            if kind is ValueKind.F32:
                number = _to_f32(number)
            object.__setattr__(self, "data", number)

    def _apply(self, other: Any, operation: _Operation) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        kind = self.kind
        if other.kind is kind and kind in operation.kinds:
            if kind in _FLOAT_KINDS:
                return Value(kind, operation.floating(self.data, other.data))
            result = operation.exact(self.data, other.data)
            if kind in _INT_RANGES:
                low, high = _INT_RANGES[kind]
                if not low <= result <= high:
                    raise OverflowError(f"attempt to {operation.verb} with overflow")
            return Value(kind, result)
        raise ValueOperationError(
            f"Invalid operation, trying to perform '{operation.name}' ({operation.symbol}) "
            f"on {self!r} and {other!r} which is not supported"
        )

    def __add__(self, other: Any) -> Value:
        if (
            isinstance(other, Value)
            and self.kind is ValueKind.CHAR
            and other.kind is ValueKind.CHAR
        ):
            return Value(ValueKind.STRING, self.data + other.data)
        return self._apply(other, _ADD)

    def __sub__(self, other: Any) -> Value:
        return self._apply(other, _SUB)

    def __mul__(self, other: Any) -> Value:
        return self._apply(other, _MUL)

    def __truediv__(self, other: Any) -> Value:
        return self._apply(other, _DIV)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.kind is other.kind or (self.kind, other.kind) in _CROSS_COMPARABLE:
            return self.data == other.data
        raise ValueOperationError(
            f"Invalid Operation. Trying to compare {self!r} and {other!r}"
        )

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOL:
            return "true" if self.data else "false"
        if self.kind in _FLOAT_KINDS:
            return _format_float(self.data, self.kind is ValueKind.F32)
        return str(self.data)

    def __repr__(self) -> str:
        if self.kind is ValueKind.STRING:
            escaped = self.data.replace("\\", "\\\\").replace('"', '\\"')
            inner = f'"{escaped}"'
        elif self.kind is ValueKind.CHAR:
            inner = "'\\''" if self.data == "'" else f"'{self.data}'"
        elif self.kind in _FLOAT_KINDS:
            inner = str(self)
            if math.isfinite(self.data) and "." not in inner:
                inner += ".0"
        else:
            inner = str(self)
        return f"{self.kind.value}({inner})"


def value_of(obj: Any) -> Value:
    """Convert a plain Python object into a Value."""
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, bool):
        return Value(ValueKind.BOOL, obj)
    if isinstance(obj, int):
        return Value(ValueKind.I64, obj)
    if isinstance(obj, float):
        return Value(ValueKind.F64, obj)
    if isinstance(obj, str):
        return Value(ValueKind.STRING, obj)
    raise TypeError(f"cannot convert {obj!r} to a value")