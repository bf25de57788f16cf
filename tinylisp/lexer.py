"""Splitting source text into tokens."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import (
    IncorrectNumberError,
    Position,
    UnclosedStringError,
    UnexpectedCharError,
)

SYMBOL_CHARS = frozenset("-+*|~")
_DIGITS = frozenset("0123456789")
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class TokenType(Enum):
    LPAREN = auto()
    RPAREN = auto()
    SYMBOL = auto()
    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str | int | float | None
    line: int
    column: int


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _is_digit(char: str | None) -> bool:
    return char is not None and char in _DIGITS


def _is_symbol_tail(char: str | None) -> bool:
    if char is None:
        return False
    return (char.isascii() and char.isalnum()) or char in SYMBOL_CHARS


def _to_f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Lexer:
    """An iterator of tokens over source text; raises ReadError on bad input."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._index = 0
        self._curr = 0
        self._start = 0
        self.line = 1
        self.column = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        char = self._consume()
        if char is None:
            raise StopIteration
        if char == "(":
            return Token(TokenType.LPAREN, None, self.line, self.column)
        if char == ")":
            return Token(TokenType.RPAREN, None, self.line, self.column)
        if char == '"':
            return self._string()
        if (char in "+-" and _is_digit(self._peek())) or _is_digit(char):
            return self._number()
        if char.isalpha() or char in SYMBOL_CHARS:
            return self._symbol()
        raise UnexpectedCharError(char, Position(self.line, self.column))

    def _peek(self) -> str | None:
        if self._index < len(self._source):
            return self._source[self._index]
        return None

    def _consume(self) -> str | None:
        self._curr += 1
        while (char := self._peek()) is not None and _is_whitespace(char):
            self._index += 1
            if char in "\n\r":
                self.line += 1
                self.column = 0
                self._curr += 1
            elif char in "\t ":
                self.column += 1
                self._curr += 1
        self.column += 1
        char = self._peek()
        if char is not None:
            self._index += 1
        return char

    def _at_end(self) -> bool:
        return self._curr >= len(self._source)

    def _token(self, kind: TokenType, value: str | int | float) -> Token:
        return Token(kind, value, self.line, self._start)

    def _string(self) -> Token:
        self._start = self._curr
        while self._peek() != '"' and not self._at_end():
            self._consume()
        if self._at_end() and self._peek() != '"':
            raise UnclosedStringError(Position(self.line, self._start))
        raw = self._source[self._start:self._curr]
        self._consume()
        return self._token(TokenType.STRING, raw)

    def _symbol(self) -> Token:
        self._start = self._curr
        while _is_symbol_tail(self._peek()) and not self._at_end():
            self._consume()
        raw = self._source[self._start - 1:self._curr]
        return self._token(TokenType.SYMBOL, raw)

    def _number(self) -> Token:
        self._start = self._curr
        while True:
            ahead = self._peek()
            if not (_is_digit(ahead) or ahead == ".") or self._at_end():
                break
            self._consume()
        raw = self._source[self._start - 1:self._curr]
        try:
            integer = int(raw)
        except ValueError:
            pass
        else:
            if _I32_MIN <= integer <= _I32_MAX:
                return self._token(TokenType.INTEGER, integer)
        try:
            number = float(raw)
        except ValueError:
            raise IncorrectNumberError(raw, Position(self.line, self._start)) from None
        return self._token(TokenType.FLOAT, _to_f32(number))


def tokenize(source: str) -> list[Token]:
    """Return every token of the source text."""
    return list(Lexer(source))