"""A tiny Lisp: lexer, reader, evaluator of primitive forms and an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["builtins", "errors", "evaluator", "lexer", "reader", "repl"]