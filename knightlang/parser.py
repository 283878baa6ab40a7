"""Recursive-descent parser that builds an abstract syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import KnightError
from .lexer import Lexer, Token, TokenType


class AstKind(IntEnum):
    LITERAL = 0
    PROMPT = 1
    RANDOM = 2
    BLOCK = 3
    CALL = 4
    QUIT = 5
    DUMP = 6
    OUTPUT = 7
    LENGTH = 8
    NOT = 9
    NEGATE = 10
    ASCII = 11
    BOX = 12
    PRIME = 13
    ULTIMATE = 14
    PLUS = 15
    MINUS = 16
    MULTIPLY = 17
    DIVIDE = 18
    MODULO = 19
    POWER = 20
    LESS = 21
    GREATER = 22
    EQUAL = 23
    AND = 24
    OR = 25
    EXPR = 26
    ASSIGN = 27
    WHILE = 28
    IF = 29
    GET = 30
    SET = 31


class LiteralKind(IntEnum):
    STRING = 0
    NUMBER = 1
    BOOLEAN = 2
    NULL = 3
    IDENTIFIER = 4
    ARRAY = 5


@dataclass(frozen=True)
class Node:
    """A syntax tree node: a literal with its text, or an operation with arguments."""

    kind: AstKind
    args: tuple[Node, ...] = ()
    literal_kind: LiteralKind | None = None
    value: str | None = None


_LITERALS = {
    TokenType.NUMBER: LiteralKind.NUMBER,
    TokenType.STRING: LiteralKind.STRING,
    TokenType.TRUE: LiteralKind.BOOLEAN,
    TokenType.FALSE: LiteralKind.BOOLEAN,
    TokenType.NULL: LiteralKind.NULL,
    TokenType.IDENTIFIER: LiteralKind.IDENTIFIER,
    TokenType.LIST: LiteralKind.ARRAY,
}

# Operation tokens: the node kind they build and how many arguments follow.
_OPERATIONS = {
    TokenType.PROMPT: (AstKind.PROMPT, 0),
    TokenType.RANDOM: (AstKind.RANDOM, 0),
    TokenType.BLOCK: (AstKind.BLOCK, 1),
    TokenType.CALL: (AstKind.CALL, 1),
    TokenType.QUIT: (AstKind.QUIT, 1),
    TokenType.DUMP: (AstKind.DUMP, 1),
    TokenType.OUTPUT: (AstKind.OUTPUT, 1),
    TokenType.LENGTH: (AstKind.LENGTH, 1),
    TokenType.NOT: (AstKind.NOT, 1),
    TokenType.NEGATE: (AstKind.NEGATE, 1),
    TokenType.ASCII: (AstKind.ASCII, 1),
    TokenType.BOX: (AstKind.BOX, 1),
    TokenType.PRIME: (AstKind.PRIME, 1),
    TokenType.ULTIMATE: (AstKind.ULTIMATE, 1),
    TokenType.PLUS: (AstKind.PLUS, 2),
    TokenType.MINUS: (AstKind.MINUS, 2),
    TokenType.MULTIPLY: (AstKind.MULTIPLY, 2),
    TokenType.DIVIDE: (AstKind.DIVIDE, 2),
    TokenType.MODULO: (AstKind.MODULO, 2),
    TokenType.POWER: (AstKind.POWER, 2),
    TokenType.LESS: (AstKind.LESS, 2),
    TokenType.GREATER: (AstKind.GREATER, 2),
    TokenType.EQUAL: (AstKind.EQUAL, 2),
    TokenType.AND: (AstKind.AND, 2),
    TokenType.OR: (AstKind.OR, 2),
    TokenType.EXPR: (AstKind.EXPR, 2),
    TokenType.ASSIGN: (AstKind.ASSIGN, 2),
    TokenType.WHILE: (AstKind.WHILE, 2),
    TokenType.IF: (AstKind.IF, 3),
    TokenType.GET: (AstKind.GET, 3),
    TokenType.SET: (AstKind.SET, 4),
}


def _literal(token: Token) -> Node:
    return Node(AstKind.LITERAL, literal_kind=_LITERALS[token.type], value=token.value)


def expression(lexer: Lexer) -> Node:
    """Read one complete expression from ``lexer``."""
    token = lexer.consume()
    if token.type is TokenType.EOF:
        raise KnightError("Unexpected end of input")
    if token.type in _LITERALS:
        return _literal(token)
    operation = _OPERATIONS.get(token.type)
    if operation is None:
        raise KnightError(f"Unexpected token type: {token.type.name}")
    kind, arity = operation
    args = tuple(expression(lexer) for _ in range(arity))
    return Node(kind, args)


def parse(lexer: Lexer) -> Node:
    """Parse a whole program: one expression followed by end of input."""
    tree = expression(lexer)
    trailing = lexer.consume()
    if trailing.type is not TokenType.EOF:
        raise KnightError(f"Unexpected token after body: {trailing.value}")
    return tree


def parse_source(source: str) -> Node:
    """Parse the program held in ``source``."""
    return parse(Lexer(source))