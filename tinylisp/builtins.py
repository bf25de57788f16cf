"""The primitive operations of the language."""

from __future__ import annotations

import copy
from typing import Callable, Iterable

from .errors import ArityMismatchError, LispError, TypeMismatchError
from .reader import Sexp, detached, nil, symbol

Evaluator = Callable[[Sexp], Sexp]


def show(result: Sexp | LispError) -> None:
    """Print an expression, or the message of an error, on its own line."""
    print(result)


def quote(sexp: Sexp) -> Sexp:
    """Return the expression unevaluated, as a copy independent of its source."""
    return copy.deepcopy(sexp)


def _require_list(sexp: Sexp) -> list[Sexp]:
    if sexp.is_atom():
        raise TypeMismatchError(sexp.value, "list", sexp.pos)
    return sexp.value  # type: ignore[return-value]


def car(sexp: Sexp) -> Sexp:
    """The first element of a list, or the empty list if it has none."""
    items = _require_list(sexp)
    return items[0] if items else nil()


def cdr(sexp: Sexp) -> Sexp:
    """Everything in a list but its first element."""
    items = _require_list(sexp)
    return detached(list(items[1:]))


def cons(item: Sexp, sexp: Sexp) -> Sexp:
    """A new list with item in front of the elements of sexp."""
    items = _require_list(sexp)
    return detached([item, *items])


def _truth(flag: bool) -> Sexp:
    return symbol("t") if flag else nil()


def atom(sexp: Sexp) -> Sexp:
    """T if the expression is an atom, the empty list otherwise."""
    return _truth(sexp.is_atom())


def eq(left: Sexp, right: Sexp) -> Sexp:
    """T if both expressions are equal, the empty list otherwise."""
    return _truth(left == right)


def cond(conditions: Iterable[Sexp], evaluate: Evaluator) -> Sexp:
    """Return the branch of the first clause whose test is not the empty list.

    Each clause is a two-element list: a test, which is evaluated, and a
    branch, which is returned as it stands.
    """
    empty = nil()
    for clause in conditions:
        items = _require_list(clause)
        if len(items) != 2:
            raise ArityMismatchError("condition", len(items), 2, clause.pos)
        test, branch = items
        if evaluate(test) != empty:
            return branch
    return nil()