[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightlang"
version = "1.0.0"
description = "Front end for the Knight programming language: lexer, parser, partial SSA IR generation and a command-line syntax checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["knight", "lexer", "parser", "ssa", "ir"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
knight = "knightlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knightlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
