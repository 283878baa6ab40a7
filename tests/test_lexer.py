import pytest

from knightlang.errors import KnightError
from knightlang.lexer import Lexer, Token, TokenType, tokenize


def kinds(source):
    return [token.type for token in tokenize(source)]


def test_simple_expression():
    tokens = list(tokenize("+ 1 23"))
    assert [t.type for t in tokens] == [TokenType.PLUS, TokenType.NUMBER, TokenType.NUMBER]
    assert [t.value for t in tokens] == ["+", "1", "23"]


def test_double_and_single_quoted_strings():
    tokens = list(tokenize("\"hi there\" 'x y'"))
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.STRING, "hi there"),
        (TokenType.STRING, "x y"),
    ]


def test_quote_of_other_kind_inside_string():
    (token,) = tokenize("\"it's\"")
    assert token.value == "it's"


def test_unterminated_string_runs_to_end():
    (token,) = tokenize("'open ended")
    assert token == Token(TokenType.STRING, "open ended", 1)


def test_identifier_with_digits_and_underscores():
    (token,) = tokenize("_foo_bar9")
    assert token.type is TokenType.IDENTIFIER
    assert token.value == "_foo_bar9"
    assert token.length == len("_foo_bar9")


def test_identifier_stops_at_uppercase():
    tokens = list(tokenize("a1B"))
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.IDENTIFIER, "a1"),
        (TokenType.BLOCK, "B"),
    ]


def test_function_word_is_one_token():
    tokens = list(tokenize("OUTPUT IF_ELSE"))
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.OUTPUT, "OUTPUT"),
        (TokenType.IF, "IF_ELSE"),
    ]


@pytest.mark.parametrize(
    "letter, expected",
    [
        ("A", TokenType.ASCII), ("B", TokenType.BLOCK), ("C", TokenType.CALL),
        ("D", TokenType.DUMP), ("F", TokenType.FALSE), ("G", TokenType.GET),
        ("I", TokenType.IF), ("L", TokenType.LENGTH), ("N", TokenType.NULL),
        ("O", TokenType.OUTPUT), ("P", TokenType.PROMPT), ("Q", TokenType.QUIT),
        ("R", TokenType.RANDOM), ("S", TokenType.SET), ("T", TokenType.TRUE),
        ("W", TokenType.WHILE),
    ],
)
def test_function_letters(letter, expected):
    assert kinds(letter) == [expected]


@pytest.mark.parametrize(
    "symbol, expected",
    [
        ("+", TokenType.PLUS), ("-", TokenType.MINUS), ("*", TokenType.MULTIPLY),
        ("/", TokenType.DIVIDE), ("%", TokenType.MODULO), ("^", TokenType.POWER),
        ("<", TokenType.LESS), (">", TokenType.GREATER), ("=", TokenType.ASSIGN),
        ("&", TokenType.AND), ("|", TokenType.OR), ("!", TokenType.NOT),
        ("?", TokenType.EQUAL), (";", TokenType.EXPR), ("[", TokenType.PRIME),
        ("]", TokenType.ULTIMATE), (",", TokenType.BOX), ("@", TokenType.LIST),
    ],
)
def test_symbols(symbol, expected):
    (token,) = tokenize(symbol)
    assert token.type is expected
    assert token.value == symbol


def test_unknown_function_letter():
    with pytest.raises(KnightError, match="Unknown function 'X'"):
        list(tokenize("X"))


def test_unknown_character():
    with pytest.raises(KnightError, match="Unknown character '#'"):
        list(tokenize("# comment"))


def test_whitespace_only_gives_no_tokens():
    assert list(tokenize(" \t\r\n ")) == []


def test_nul_ends_input():
    assert [t.value for t in tokenize("1\0 2")] == ["1"]


def test_line_counting():
    lexer = Lexer("1\n\n2")
    assert lexer.consume().line == 1
    assert lexer.consume().line == 3
    assert lexer.line == 3


def test_peek_before_and_after_consume():
    lexer = Lexer("T")
    assert lexer.peek().type is TokenType.EOF
    token = lexer.consume()
    assert lexer.peek() == token
    assert token.type is TokenType.TRUE


def test_consume_at_end_keeps_returning_eof():
    lexer = Lexer("N")
    lexer.consume()
    first = lexer.consume()
    second = lexer.consume()
    assert first.type is second.type is TokenType.EOF
    assert first.value is None and first.length == 0


def test_accept_match_and_mismatch():
    lexer = Lexer("1 foo")
    assert lexer.accept(TokenType.NUMBER).value == "1"
    missed = lexer.accept(TokenType.NUMBER)
    assert missed.type is TokenType.NONE
    assert missed.value is None
    assert lexer.peek().type is TokenType.IDENTIFIER


def test_expect_match():
    lexer = Lexer("'s'")
    assert lexer.expect(TokenType.STRING).value == "s"


def test_expect_mismatch_raises():
    lexer = Lexer("+")
    with pytest.raises(KnightError, match="Expected token type NUMBER"):
        lexer.expect(TokenType.NUMBER)