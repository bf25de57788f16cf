import io

from tinylisp import repl as repl_module
from tinylisp.evaluator import evaluate
from tinylisp.reader import read


def session(text):
    out = io.StringIO()
    repl_module.repl(io.StringIO(text), out)
    return out.getvalue()


def test_prints_evaluated_result():
    line = "(car (quote (a b)))"
    expected = str(evaluate(read(line)))
    assert session(line + "\n") == f"\n* {expected}\n\n* "


def test_blank_line_prints_only_prompts():
    assert session("\n") == "\n* \n* "


def test_empty_input_ends_after_one_prompt():
    assert session("") == "\n* "


def test_eval_error_is_reported_and_loop_continues():
    output = session("(foo)\n(quote x)\n")
    assert "The symbol foo is unbound" in output
    assert output.endswith(f"{read('x')}\n\n* ")


def test_read_error_is_reported():
    output = session(")\n")
    assert "Unexpected closing parenthesis" in output


def test_each_line_gets_a_prompt():
    output = session("1\n2\n3\n")
    assert output.count("\n* ") == 4


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(atom 1)\n"))
    assert repl_module.main([]) == 0
    assert capsys.readouterr().out == f"\n* {evaluate(read('(atom 1)'))}\n\n* "