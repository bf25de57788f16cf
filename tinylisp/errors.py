"""Positions in source text and the errors raised while reading and evaluating."""

from __future__ import annotations

from typing import Any, NamedTuple


class Position(NamedTuple):
    """A line and column in the source text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LispError(Exception):
    """Base class of every error the interpreter raises."""

    pos: Position | None = None


class ReadError(LispError):
    """An error found while turning text into expressions."""


class UnexpectedCharError(ReadError):
    def __init__(self, char: str, pos: Position) -> None:
        self.char = char
        self.pos = pos
        super().__init__(f"Unexpected character : '{char}' ({pos})")


class UnclosedStringError(ReadError):
    def __init__(self, pos: Position) -> None:
        self.pos = pos
        super().__init__(f"Unclosed string ({pos})")


class IncorrectNumberError(ReadError):
    def __init__(self, text: str, pos: Position) -> None:
        self.text = text
        self.pos = pos
        super().__init__(f"Incorrect number : {text} ({pos})")


class UnclosedParenError(ReadError):
    def __init__(self, pos: Position) -> None:
        self.pos = pos
        super().__init__(f"Unclosed parenthesis ({pos})")


class UnexpectedClosingParenError(ReadError):
    def __init__(self, pos: Position) -> None:
        self.pos = pos
        super().__init__(f"Unexpected closing parenthesis ({pos})")


class UnexpectedEOFError(ReadError):
    def __init__(self) -> None:
        super().__init__("Unexpected end of file.")


class EvalError(LispError):
    """An error found while evaluating an expression."""


class IllegalFunctionCallError(EvalError):
    def __init__(self, pos: Position) -> None:
        self.pos = pos
        super().__init__(f"Illegal function call ({pos})")


class ArityMismatchError(EvalError):
    def __init__(self, name: str, given: int, expected: int, pos: Position) -> None:
        self.name = name
        self.given = given
        self.expected = expected
        self.pos = pos
        super().__init__(
            f"{name} expected {expected} arguments, {given} were given ({pos})"
        )


class UnboundSymbolError(EvalError):
    def __init__(self, name: str, pos: Position) -> None:
        self.name = name
        self.pos = pos
        super().__init__(f"The symbol {name} is unbound ({pos})")


class TypeMismatchError(EvalError):
    def __init__(self, given: Any, expected: str, pos: Position) -> None:
        self.given = given
        self.expected = expected
        self.pos = pos
        super().__init__(f"{given!r} is not a {expected} ({pos})")