"""Evaluation of expressions."""

from __future__ import annotations

from typing import Callable

from . import builtins
from .errors import ArityMismatchError, IllegalFunctionCallError, UnboundSymbolError
from .reader import AtomKind, Sexp, detached, symbol

PRIMITIVES = frozenset(
    {"car", "cdr", "cons", "atom", "quote", "lambda", "cond", "eq"}
)


def _check_arity(head: Sexp, name: str, args: list[Sexp], expected: int) -> None:
    if len(args) != expected:
        raise ArityMismatchError(name, len(args), expected, head.pos)


def _eval(args: list[Sexp]) -> Sexp:
    return evaluate(evaluate(args[0]))


def _quote(args: list[Sexp]) -> Sexp:
    return builtins.quote(args[0])


def _car(args: list[Sexp]) -> Sexp:
    return builtins.car(evaluate(args[0]))


def _cdr(args: list[Sexp]) -> Sexp:
    return builtins.cdr(evaluate(args[0]))


def _cons(args: list[Sexp]) -> Sexp:
    item = evaluate(args[0])
    return builtins.cons(item, evaluate(args[1]))


def _atom(args: list[Sexp]) -> Sexp:
    return builtins.atom(evaluate(args[0]))


def _eq(args: list[Sexp]) -> Sexp:
    left = evaluate(args[0])
    return builtins.eq(left, evaluate(args[1]))


_FORMS: dict[str, tuple[int, Callable[[list[Sexp]], Sexp]]] = {
    "eval": (1, _eval),
    "quote": (1, _quote),
    "car": (1, _car),
    "cdr": (1, _cdr),
    "cons": (2, _cons),
    "atom": (1, _atom),
    "eq": (2, _eq),
}


def _evaluate_atom(sexp: Sexp) -> Sexp:
    atom = sexp.value
    if atom.kind is not AtomKind.SYMBOL:  # type: ignore[union-attr]
        return sexp
    name = atom.value  # type: ignore[union-attr]
    if name in PRIMITIVES:
        return sexp
    if name == "t":
        return detached([symbol("quote"), symbol("t")])
    raise UnboundSymbolError(name, sexp.pos)


def evaluate(sexp: Sexp) -> Sexp:
    """Evaluate an expression; raise EvalError when it cannot be evaluated."""
    if sexp.is_atom():
        return _evaluate_atom(sexp)
    items: list[Sexp] = sexp.value  # type: ignore[assignment]
    if not items:
        return sexp
    head, *args = items
    if not head.is_atom() or head.value.kind is not AtomKind.SYMBOL:  # type: ignore[union-attr]
        raise IllegalFunctionCallError(head.pos)
    name = head.value.value  # type: ignore[union-attr]
    if name == "cond":
        if not args:
            raise ArityMismatchError(name, 0, 2, head.pos)
        return builtins.cond(args, evaluate)
    form = _FORMS.get(name)
    if form is None:
        raise UnboundSymbolError(name, head.pos)
    expected, handler = form
    _check_arity(head, name, args, expected)
    return handler(args)