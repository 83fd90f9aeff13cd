"""A small expression language with a Pratt parser, typed values and an interactive REPL."""

__version__ = "0.1.0"
__all__ = ["expression", "lexer", "literal", "operator", "repl", "value", "variable"]