"""Knight front end: lexer, parser, values, symbol table, partial SSA IR and a syntax-checking command."""

__version__ = "1.0.0"
__all__ = ["errors", "value", "symbols", "lexer", "parser", "ir", "cli"]