import pytest

from tinylisp.errors import (
    ArityMismatchError,
    IllegalFunctionCallError,
    TypeMismatchError,
    UnboundSymbolError,
)
from tinylisp.evaluator import evaluate
from tinylisp.reader import nil, read, symbol


def run(text):
    return evaluate(read(text))


@pytest.mark.parametrize("text", ["42", '"hi"', "1.5", "-7"])
def test_self_evaluating_atoms(text):
    assert run(text) == read(text)


@pytest.mark.parametrize("name", ["car", "cdr", "cons", "atom", "quote", "lambda", "cond", "eq"])
def test_primitive_symbols_evaluate_to_themselves(name):
    assert run(name) == read(name)


def test_t_evaluates_to_quoted_t():
    assert run("t") == read("(quote t)")


def test_empty_list_evaluates_to_itself():
    assert run("()") == nil()


def test_unbound_symbol():
    with pytest.raises(UnboundSymbolError) as info:
        run("foo")
    assert info.value.name == "foo"


def test_quote():
    assert run("(quote (a b))") == read("(a b)")


def test_car():
    assert run("(car (quote (a b)))") == read("a")


def test_cdr():
    assert run("(cdr (quote (a b c)))") == read("(b c)")


def test_cons():
    assert run("(cons (quote a) (quote (b)))") == read("(a b)")


def test_atom():
    assert run("(atom (quote a))") == symbol("t")
    assert run("(atom (quote (a)))") == nil()


def test_eq():
    assert run("(eq (quote a) (quote a))") == symbol("t")
    assert run("(eq 1 2)") == nil()


def test_eval_evaluates_twice():
    assert run("(eval (quote (car (quote (x y)))))") == read("x")


def test_cond_returns_branch_of_first_true_test():
    assert run("(cond ((eq 1 2) a) (t b))") == read("b")


def test_cond_without_true_test_is_nil():
    assert run("(cond ((eq 1 2) a))") == nil()


def test_cond_without_clauses_raises():
    with pytest.raises(ArityMismatchError) as info:
        run("(cond)")
    assert info.value.given == 0
    assert info.value.expected == 2


@pytest.mark.parametrize(
    "text, given, expected",
    [("(car)", 0, 1), ("(cdr 1 2)", 2, 1), ("(cons 1)", 1, 2), ("(quote)", 0, 1), ("(eq 1)", 1, 2)],
)
def test_arity_mismatch(text, given, expected):
    with pytest.raises(ArityMismatchError) as info:
        run(text)
    assert info.value.given == given
    assert info.value.expected == expected


def test_car_of_non_list_raises():
    with pytest.raises(TypeMismatchError):
        run("(car 1)")


def test_unknown_operator_raises():
    with pytest.raises(UnboundSymbolError) as info:
        run("(foo 1)")
    assert info.value.name == "foo"


def test_lambda_is_not_callable():
    with pytest.raises(UnboundSymbolError):
        run("(lambda x)")


def test_number_in_operator_position_raises():
    with pytest.raises(IllegalFunctionCallError):
        run("(1 2)")


def test_list_in_operator_position_raises():
    with pytest.raises(IllegalFunctionCallError):
        run("((a) b)")


def test_argument_errors_propagate():
    with pytest.raises(UnboundSymbolError):
        run("(car x)")