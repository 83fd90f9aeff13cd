# adlang

A small expression language. It has typed integer, float, character, string
and boolean values, arithmetic, equality tests and variable assignment.
Operator precedence is handled by a Pratt parser.

## Installation

```
pip install .
```

## Interactive use

```
adlang
```

Type an expression at the `>>` prompt and its value is printed. Variables
assigned on one line keep their values for later lines. Type `exit`, or end
the input, to leave.

```
>> a = 2
2
>> a * (3 + 4)
14
>> "Hello" + ", World!"
Hello, World!
>> 1 == 1
true
```

Pass `--debug` (or `-d`) to print each result in its detailed form, such as
`I64(14)`, and each evaluation error prefixed with `Error:`.

Evaluation errors (`EvalError`, for example an unknown variable or adding an
integer to a float) are printed and the loop goes on. Other errors end the
session: a line that cannot be tokenized (`LexError`) or parsed
(`ParseError`), integer division by zero (`ZeroDivisionError`) and integer
overflow (`OverflowError`).

## Language

- Integers: `12`, `12i` (signed 64-bit), `123u` (unsigned 64-bit), `7i32`, `7u32`
- Floats: `1.23`, `4.99d` (64-bit), `32.1f` (32-bit)
- Characters: `'c'`; strings: `"text"`; booleans: `true`, `false`
- Operators: `+ - * /`, `==`, `!=`, `=` (assignment), parentheses, and `.`
- Unary `-x` and `+x` are read as `0 - x` and `0 + x`
- `*`, `/` bind tighter than `+`, `-`, which bind tighter than `==`, `!=`;
  `=` binds loosest and groups to the right

Arithmetic works only between two values of the same type (`i64`, `u64`,
`f64` or `f32`); `+` also joins two strings, and two characters into a
string. Integer division truncates towards zero. Equality compares values of
the same type, and also integers of different widths and the two float
types; comparing other mixed types is an error.

Tokens are split on whitespace. Quoted literals may contain spaces, but an
operator character inside a quoted literal still splits it.

## Library use

```python
from adlang.expression import parse
from adlang.value import value_of
from adlang.variable import Variable

expr = parse("a + b * 2")
print(expr)                     # (+ a (* b 2))

variables = {Variable("a"): value_of(1), Variable("b"): value_of(2)}
print(expr.eval(variables))     # 5
```

- `adlang.expression`: `parse(text)`, `parse_expression(lexer, binding_power_lhs)`,
  the expression nodes `VariableExpr`, `LiteralExpr` and `Operation`, and the
  errors `ParseError` and `EvalError`. `Expression.eval(variables)` evaluates
  against a mutable mapping of `Variable` to `Value`; assignment writes into it.
- `adlang.lexer`: `tokenize(text)`, `Lexer` (an iterator of tokens with
  `peek()`), `Keyword` and `LexError`.
- `adlang.literal`: `parse_literal(text)`, `Literal`, `TokenError`,
  `NotALiteralError`.
- `adlang.value`: `Value`, `ValueKind`, `value_of(obj)` and
  `ValueOperationError`.
- `adlang.operator`: `Operator` and its `infix_binding_power()`.
- `adlang.repl`: `run_repl(stdin, stdout, debug)` and `main(argv)`.

## What it does not do

- The `.` operator is parsed but cannot be evaluated; evaluating it raises
  `EvalError`.
- There are no statements. The keyword `Let` is recognised by the lexer but
  the parser rejects it, and the `Declaration` and `Assign` records in
  `adlang.expression` are not produced by the parser or run by anything.
- There are no comparisons other than `==` and `!=`, no control flow and no
  functions.