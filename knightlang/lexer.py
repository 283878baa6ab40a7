"""Tokenizer for Knight source text."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from .errors import KnightError


class TokenType(IntEnum):
    NONE = 0
    NUMBER = 1
    STRING = 2
    TRUE = 3
    FALSE = 4
    NULL = 5
    IDENTIFIER = 6
    LIST = 7
    PROMPT = 8
    RANDOM = 9
    BLOCK = 10
    CALL = 11
    QUIT = 12
    DUMP = 13
    OUTPUT = 14
    LENGTH = 15
    NOT = 16
    NEGATE = 17
    ASCII = 18
    BOX = 19
    PRIME = 20
    ULTIMATE = 21
    PLUS = 22
    MINUS = 23
    MULTIPLY = 24
    DIVIDE = 25
    MODULO = 26
    POWER = 27
    LESS = 28
    GREATER = 29
    EQUAL = 30
    AND = 31
    OR = 32
    EXPR = 33
    ASSIGN = 34
    WHILE = 35
    IF = 36
    GET = 37
    SET = 38
    EOF = 39


@dataclass(frozen=True)
class Token:
    """A token and the text it was read from."""

    type: TokenType
    value: str | None = None
    line: int = 0

    @property
    def length(self) -> int:
        return len(self.value) if self.value is not None else 0


_DIGITS = frozenset(string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_IDENT_START = _LOWER | {"_"}
_IDENT_BODY = _LOWER | _DIGITS | {"_"}
_WORD_BODY = _UPPER | {"_"}
_BLANKS = frozenset(" \t\r")

_FUNCTIONS = {
    "A": TokenType.ASCII,
    "B": TokenType.BLOCK,
    "C": TokenType.CALL,
    "D": TokenType.DUMP,
    "F": TokenType.FALSE,
    "G": TokenType.GET,
    "I": TokenType.IF,
    "L": TokenType.LENGTH,
    "N": TokenType.NULL,
    "O": TokenType.OUTPUT,
    "P": TokenType.PROMPT,
    "Q": TokenType.QUIT,
    "R": TokenType.RANDOM,
    "S": TokenType.SET,
    "T": TokenType.TRUE,
    "W": TokenType.WHILE,
}

_SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
    "^": TokenType.POWER,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "=": TokenType.ASSIGN,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "!": TokenType.NOT,
    "?": TokenType.EQUAL,
    ";": TokenType.EXPR,
    "[": TokenType.PRIME,
    "]": TokenType.ULTIMATE,
    ",": TokenType.BOX,
    "@": TokenType.LIST,
}


class Lexer:
    """Reads tokens one at a time from source text."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.line = 1
        self._token = Token(TokenType.EOF, None, self.line)

    def _current(self) -> str:
        if self.position < len(self.source):
            return self.source[self.position]
        return "\0"

    def _scan(self, start: int, allowed: frozenset[str]) -> int:
        end = start
        while end < len(self.source) and self.source[end] in allowed:
            end += 1
        return end

    def _load(self) -> Token:
        while True:
            char = self._current()
            if char == "\n":
                self.line += 1
            elif char not in _BLANKS:
                break
            self.position += 1

        start = self.position
        if char == "\0":
            return Token(TokenType.EOF, None, self.line)

        if char in _DIGITS:
            end = self._scan(start + 1, _DIGITS)
            token_type = TokenType.NUMBER
        elif char in "\"'":
            close = self.source.find(char, start + 1)
            if close == -1:
                text = self.source[start + 1:]
                self.position = len(self.source)
            else:
                text = self.source[start + 1:close]
                self.position = close + 1
            return Token(TokenType.STRING, text, self.line)
        elif char in _IDENT_START:
            end = self._scan(start + 1, _IDENT_BODY)
            token_type = TokenType.IDENTIFIER
        elif char in _UPPER:
            token_type = _FUNCTIONS.get(char)
            if token_type is None:
                raise KnightError(f"Unknown function '{char}' at line {self.line}")
            end = self._scan(start + 1, _WORD_BODY)
        else:
            token_type = _SYMBOLS.get(char)
            if token_type is None:
                raise KnightError(f"Unknown character '{char}' at line {self.line}")
            end = start + 1

        self.position = end
        return Token(token_type, self.source[start:end], self.line)

    def peek(self) -> Token:
        """Return the most recently read token without advancing."""
        return self._token

    def consume(self) -> Token:
        """Read the next token and make it current."""
        self._token = self._load()
        return self._token

    def accept(self, token_type: TokenType) -> Token:
        """Read the next token; return it if it matches, else a NONE token."""
        token = self.consume()
        if token.type is token_type:
            return token
        return Token(TokenType.NONE, None, self.line)

    def expect(self, token_type: TokenType) -> Token:
        """Read the next token and raise unless it has ``token_type``."""
        token = self.consume()
        if token.type is not token_type:
            raise KnightError(
                f"Expected token type {token_type.name} but got "
                f"{token.type.name} at line {self.line}"
            )
        return token


def tokenize(source: str) -> Iterator[Token]:
    """Yield every token of ``source`` up to, but not including, end of input."""
    lexer = Lexer(source)
    while (token := lexer.consume()).type is not TokenType.EOF:
        yield token