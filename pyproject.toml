[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylisp"
version = "0.1.0"
description = "A tiny Lisp reader and evaluator with an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "s-expression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinylisp = "tinylisp.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["tinylisp"]

[tool.pytest.ini_options]
addopts = "-ra"
