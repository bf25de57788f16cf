# tinylisp

A tiny Lisp that reads and evaluates a small set of primitive forms. You can use it from an interactive prompt or call it from Python.

## Installation

```
pip install .
```

## The prompt

```
tinylisp
```

The program prints a `* ` prompt and reads one line at a time. It reads the first expression on the line, evaluates it and prints the result. Symbols are printed in upper case:

```
* (car (quote (a b c)))
A

* (cons (quote a) (quote (b c)))
(A B C)

* (atom (quote a))
T
```

Blank lines are ignored. If an expression cannot be read or evaluated, the prompt prints the error message, which gives the line and column. It then waits for the next line. The loop stops at end of input or on Ctrl-C.

## Supported forms

- `quote`: returns its argument without evaluating it.
- `car`: returns the first element of a list, or `()` if the list is empty.
- `cdr`: returns the list without its first element.
- `cons`: puts an item in front of a list.
- `atom`: gives `T` for an atom and `()` for a list.
- `eq`: gives `T` when its two arguments are equal and `()` otherwise.
- `cond`: takes `(test branch)` pairs and evaluates each test in turn. It returns the branch of the first test that is not `()`, as written and without evaluating it. If no test passes it returns `()`. It needs at least one pair.
- `eval`: evaluates its argument, then evaluates the result.

`car`, `cdr` and `cons` raise an error when the argument that should be a list is not a list. Each form checks how many arguments it was given.

Integers, floats, strings in double quotes and the empty list `()` evaluate to themselves. The names of the primitives also evaluate to themselves. The symbol `t` evaluates to `(quote t)`, which prints as `(QUOTE T)`. Any other symbol is unbound. A list whose head is not a symbol is an illegal function call.

## From Python

```python
from tinylisp.reader import read
from tinylisp.evaluator import evaluate
from tinylisp.errors import LispError

try:
    result = evaluate(read("(cons 1 (quote (2 3)))"))
    print(result)            # (1 2 3)
except LispError as err:
    print(err)
```

Other parts can be used on their own:

- `tinylisp.lexer.tokenize` and `tinylisp.lexer.Lexer` split source text into tokens.
- `tinylisp.reader.Parser` reads expressions one at a time, and `tinylisp.reader.read` reads the first one. `Sexp` and `Atom` represent the expressions. `nil()`, `symbol(name)` and `detached(value)` build expressions that are not tied to a position in any source.
- `tinylisp.builtins` contains the primitive operations, which work on expressions that are already evaluated.
- `tinylisp.repl.repl(stdin, stdout)` runs the prompt on any pair of text streams.

Errors are raised as exceptions. `ReadError` covers problems found while reading, such as an unexpected character, an unclosed string or parenthesis, or a malformed number. `EvalError` covers problems found while evaluating, such as an unbound symbol, an illegal function call, a wrong number of arguments, or a wrong argument type. Both are subclasses of `LispError`. Every message except the end-of-input one includes the position where the problem happened.

## What it does not do

There are no variables, definitions, user functions or arithmetic. `lambda` is a reserved name, but calling it is reported as an unbound symbol. The prompt does not run source files. It reads only the first expression of each line.