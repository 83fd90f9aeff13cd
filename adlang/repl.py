"""Interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .expression import EvalError, parse
from .value import Value
from .variable import Variable


def run_repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    debug: bool = False,
) -> None:
    """Read expressions line by line, evaluate them and print the results.

    The loop ends on a line reading ``exit`` or at the end of input.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    variables: dict[Variable, Value] = {}

    while True:
        stdout.write(">> ")
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() == "exit":
            break

        expression = parse(line)
        try:
            result = expression.eval(variables)
        except EvalError as error:
            print(f"Error: {error}" if debug else str(error), file=stdout)
        else:
            print(repr(result) if debug else str(result), file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interpreter; ``--debug`` or ``-d`` prints detailed results."""
    args = sys.argv[1:] if argv is None else list(argv)
    debug = any(arg in ("--debug", "-d") for arg in args)
    run_repl(sys.stdin, sys.stdout, debug)
    return 0