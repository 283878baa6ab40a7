# knightlang

A front end for the Knight programming language. It reads Knight source,
splits it into tokens, builds a syntax tree, and can lower a small part of
that tree into an SSA-style intermediate representation.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
knight [options] <input_file>
```

Options:

- `-v`, `--verbose`: write `[INFO]` diagnostic lines to standard error (version,
  flags, the file being read and its size, and the node count of the parsed tree)
- `-h`, `--help`: print the usage text and exit with status 0
- `-e`, `--execute <code>`: take the Knight code from the argument instead of a file
- `-j`, `--jit-off`: clear the JIT flag shown in the verbose flag report

Running `knight` with no arguments prints the usage text. Any other argument
is taken as the input file name; the last one given wins.

Examples:

```
knight program.kn
knight -v -e 'OUTPUT + 1 2'
```

The command reads the input and parses it. A file that cannot be read, an
unknown character, an unexpected end of input or text left over after the
program makes it print a `[PANIC]` line to standard error and exit with
status 1. Otherwise it exits with status 0.

## Library use

```python
from knightlang.lexer import tokenize
from knightlang.parser import parse_source
from knightlang.ir import Function, Block, generate_ssa

tokens = list(tokenize("; = a 3 OUTPUT a"))
tree = parse_source("+ 1 2")

function = Function()
block = Block(id=0)
result_id = generate_ssa(parse_source("123"), function, block)
```

Modules:

- `knightlang.lexer`: `TokenType`, `Token`, `Lexer` (with `peek`, `consume`,
  `accept`, `expect`) and `tokenize`, which yields every token before end of input
- `knightlang.parser`: `AstKind`, `LiteralKind`, `Node`, `expression`, `parse`
  and `parse_source`
- `knightlang.ir`: `IRType`, `IROp`, `Instruction`, `Block`, `Function`
  (with `next_id` and `emit`), `load_literal` and `generate_ssa`
- `knightlang.value`: `ValueType`, `Value`, `create_value`, `create_string`
  and `coerce`
- `knightlang.symbols`: `SymbolTable`, an open-addressing table keyed by
  FNV-1a hashes (`fnv1a`); names that are not present give 0
- `knightlang.errors`: `KnightError`, raised for every reading, lexing,
  parsing and value error, and `Reporter`, which writes prefixed diagnostic
  lines (`debug`, `info` and `warn` only when verbose; `error` always)
- `knightlang.cli`: `Flags`, `Config`, `help_text`, `parse_args`, `read_file`
  and `main`

## What it does not do

- It does not run Knight programs. The `knight` command only checks that the
  input lexes and parses; nothing is evaluated or printed by the program
  itself, and there is no compiler behind the JIT flag.
- `generate_ssa` handles only literals, variable loads, `PROMPT` and
  `RANDOM`. Any other node raises `KnightError`, and list literals (`@`)
  cannot be loaded.
- `coerce` returns a value that already has the requested type and raises
  `KnightError` for every other case; there are no conversions between types.