"""The interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .errors import LispError, UnexpectedEOFError
from .evaluator import evaluate
from .reader import Parser

PROMPT = "\n* "


def repl(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read one expression per line, evaluate it and print the result, until end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        try:
            sexp = Parser(line).read()
        except UnexpectedEOFError:
            continue
        except LispError as error:
            stdout.write(f"{error}\n")
            continue
        try:
            result = evaluate(sexp)
        except LispError as error:
            stdout.write(f"{error}\n")
        else:
            stdout.write(f"{result}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive loop on the standard streams."""
    try:
        repl()
    except KeyboardInterrupt:
        pass
    return 0