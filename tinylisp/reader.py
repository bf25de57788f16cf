"""Symbolic expressions and the reader that builds them from text."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import Union

from .errors import (
    Position,
    UnclosedParenError,
    UnexpectedClosingParenError,
    UnexpectedEOFError,
)
from .lexer import Lexer, Token, TokenType


class AtomKind(Enum):
    SYMBOL = auto()
    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()


def _f32_equal(text: str, value: float) -> bool:
    return struct.unpack("<f", struct.pack("<f", float(text)))[0] == value


def _format_float(value: float) -> str:
    """Shortest single-precision text for value, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    for digits in range(1, 10):
        candidate = f"{value:.{digits}g}"
        if _f32_equal(candidate, value):
            text = candidate
            break
    fixed = format(Decimal(text), "f")
    if "." in fixed:
        fixed = fixed.rstrip("0").rstrip(".")
    return fixed


@dataclass(frozen=True)
class Atom:
    kind: AtomKind
    value: str | int | float

    def __str__(self) -> str:
        if self.kind is AtomKind.SYMBOL:
            return str(self.value).upper()
        if self.kind is AtomKind.STRING:
            return f'"{self.value}"'
        if self.kind is AtomKind.FLOAT:
            return _format_float(float(self.value))
        return str(self.value)


SexpValue = Union[Atom, "list[Sexp]"]


@dataclass(eq=False)
class Sexp:
    """An atom or a list of expressions, with where it was read from."""

    value: SexpValue
    pos: Position = Position(0, 0)

    def __str__(self) -> str:
        if isinstance(self.value, Atom):
            return str(self.value)
        return "(" + " ".join(str(item) for item in self.value) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sexp):
            return NotImplemented
        return self.value == other.value

    def is_atom(self) -> bool:
        return isinstance(self.value, Atom)


_ATOM_KINDS = {
    TokenType.SYMBOL: AtomKind.SYMBOL,
    TokenType.STRING: AtomKind.STRING,
    TokenType.INTEGER: AtomKind.INTEGER,
    TokenType.FLOAT: AtomKind.FLOAT,
}


class Parser:
    """Reads expressions one at a time from source text."""

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)
        self._ahead: Token | None = None
        self._peeked = False

    def _peek(self) -> Token | None:
        if not self._peeked:
            self._ahead = next(self._lexer, None)
            self._peeked = True
        return self._ahead

    def _next(self) -> Token | None:
        token = self._peek()
        self._peeked = False
        self._ahead = None
        return token

    def read(self) -> Sexp:
        """Read the next expression; raise ReadError if there is none or it is malformed."""
        token = self._next()
        if token is None:
            raise UnexpectedEOFError()
        pos = Position(token.line, token.column)
        if token.type is TokenType.LPAREN:
            items: list[Sexp] = []
            while True:
                ahead = self._peek()
                if ahead is None:
                    raise UnclosedParenError(pos)
                if ahead.type is TokenType.RPAREN:
                    self._next()
                    break
                items.append(self.read())
            return Sexp(items, pos)
        if token.type is TokenType.RPAREN:
            raise UnexpectedClosingParenError(pos)
        return Sexp(Atom(_ATOM_KINDS[token.type], token.value), pos)


def read(source: str) -> Sexp:
    """Read the first expression of the source text."""
    return Parser(source).read()


def detached(value: SexpValue) -> Sexp:
    """An expression that stands at no place in any source."""
    return Sexp(value, Position(0, 0))


def nil() -> Sexp:
    """The empty list."""
    return detached([])


def symbol(name: str) -> Sexp:
    """A detached symbol."""
    return detached(Atom(AtomKind.SYMBOL, name))