"""Command-line entry point: argument handling, file reading and the driver."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntFlag

from .errors import KnightError, Reporter
from .lexer import Lexer
from .parser import Node, parse
from .symbols import SymbolTable

VERSION = "1.0.0"


class Flags(IntFlag):
    NONE = 0
    VERBOSE = 1 << 0
    JIT = 1 << 1
    FILE = 1 << 2


@dataclass
class Config:
    """Settings gathered from the command line."""

    flags: Flags = Flags.JIT | Flags.FILE
    input: str | None = None
    help: bool = False

    @property
    def verbose(self) -> bool:
        return bool(self.flags & Flags.VERBOSE)

    @property
    def jit(self) -> bool:
        return bool(self.flags & Flags.JIT)

    @property
    def from_file(self) -> bool:
        return bool(self.flags & Flags.FILE)


def help_text() -> str:
    """Return the usage message."""
    return (
        "Usage: knight [options] <input_file>\n"
        "Options:\n"
        "  -v, --verbose        Enable verbose output\n"
        "  -h, --help           Show this help message\n"
        "  -e, --execute        Execute a string of Knight code\n"
        "  -j, --jit-off        Disable JIT compilation\n"
    )


def parse_args(argv: list[str]) -> Config:
    """Build a Config from arguments, excluding the program name.

    An empty argument list or a help option yields a config with ``help`` set.
    """
    if not argv:
        return Config(help=True)

    config = Config()
    args = iter(argv)
    for arg in args:
        if arg in ("-v", "--verbose"):
            config.flags |= Flags.VERBOSE
        elif arg in ("-j", "--jit-off"):
            config.flags &= ~Flags.JIT
        elif arg in ("-e", "--execute"):
            config.flags &= ~Flags.FILE
            code = next(args, None)
            if code is None:
                raise KnightError("No string specified for -e")
            config.input = code
        elif arg in ("-h", "--help"):
            return Config(flags=config.flags, input=config.input, help=True)
        else:
            config.flags |= Flags.FILE
            config.input = arg
    return config


def read_file(path: str) -> bytes:
    """Return the whole contents of the file at ``path``."""
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise KnightError(f"Failed to read input file: {path}") from exc


def _count_nodes(node: Node) -> int:
    return 1 + sum(_count_nodes(arg) for arg in node.args)


def _describe(flags: Flags) -> str:
    return (
        ("VERBOSE " if flags & Flags.VERBOSE else "")
        + ("FILE " if flags & Flags.FILE else "INLINE ")
        + ("JIT" if flags & Flags.JIT else "JIT-OFF")
    )


def _run(config: Config, reporter: Reporter) -> None:
    reporter.info(f"KnightJIT v{VERSION}")
    reporter.info(f"FLAGS 0x{int(config.flags):x} ({_describe(config.flags)})")

    if config.from_file and config.input:
        reporter.info(f"Reading input file: {config.input}")
        data = read_file(config.input)
        reporter.info(f"Read {len(data)} bytes from file: {config.input}")
        source = data.decode("utf-8", errors="replace")
    elif config.input:
        reporter.info("Executing inline code")
        source = config.input
    else:
        raise KnightError("No input provided. Use -h for help.")

    tree = parse(Lexer(source))
    reporter.info(f"Parsed AST of {_count_nodes(tree)} nodes")
    SymbolTable(8)


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_args(list(argv))
    except KnightError as exc:
        print(f"[PANIC] {exc}", file=sys.stderr)
        return 1

    if config.help:
        print(help_text(), end="")
        return 0

    try:
        _run(config, Reporter(verbose=config.verbose))
    except KnightError as exc:
        print(f"[PANIC] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())