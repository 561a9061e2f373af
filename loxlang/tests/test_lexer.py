"""
Tests for the Lox lexer.
"""
import pytest

from loxlang.exceptions import BadCharError, NumberParseError, UnterminatedStringError
from loxlang.lexer import scan
from loxlang.tokens import TokenType


def types_of(tokens):
    return [tok.type for tok in tokens]


def test_scan_declaration():
    """
    Test that a declaration yields typed tokens with literals and positions.
    """
    tokens, errors = scan("var a = 1;")
    assert errors == []
    assert types_of(tokens) == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.EQUAL,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    number = tokens[3]
    assert number.literal == 1.0
    assert number.lexeme == "1"
    assert (number.line, number.position) == (1, 9)
    assert tokens[1].lexeme == "a"
    assert tokens[1].position == 5


def test_operators_longest_match():
    tokens, errors = scan("!= == <= >= ! = < > ( ) { } , . - + ; * /")
    assert errors == []
    assert types_of(tokens)[:-1] == [
        TokenType.BANG_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.LESS_EQUAL,
        TokenType.GREATER_EQUAL,
        TokenType.BANG,
        TokenType.EQUAL,
        TokenType.LESS,
        TokenType.GREATER,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.STAR,
        TokenType.SLASH,
    ]


def test_keywords_and_identifiers():
    """
    Test that keywords are only recognized as whole words.
    """
    tokens, _ = scan("var variable orchid or nil nilly")
    assert types_of(tokens)[:-1] == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.OR,
        TokenType.NIL,
        TokenType.IDENTIFIER,
    ]


def test_comments_skipped_and_lines_counted():
    tokens, errors = scan("// leading comment\nprint 1; // trailing\n")
    assert errors == []
    assert types_of(tokens) == [
        TokenType.PRINT, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF,
    ]
    assert (tokens[0].line, tokens[0].position) == (2, 1)
    assert tokens[-1].line == 3


def test_multiline_string():
    tokens, errors = scan('"a\nb" x')
    assert errors == []
    string, ident = tokens[0], tokens[1]
    assert string.type == TokenType.STRING
    assert string.literal == "a\nb"
    assert string.line == 1
    assert (ident.line, ident.position) == (2, 4)


def test_numbers():
    tokens, errors = scan("1 2.5 10")
    assert errors == []
    assert [tok.literal for tok in tokens[:-1]] == [1.0, 2.5, 10.0]


def test_bad_character():
    """
    Test that an unexpected character fails the whole scan.
    """
    tokens, errors = scan("var a = @;")
    assert tokens == []
    assert len(errors) == 1
    error = errors[0]
    assert isinstance(error, BadCharError)
    assert error.char == "@"
    assert (error.line, error.position) == (1, 9)
    assert str(error) == "Unexpected character @ at 9"


def test_bad_character_on_later_line():
    _, errors = scan("print 1;\n  #")
    assert isinstance(errors[0], BadCharError)
    assert (errors[0].line, errors[0].position) == (2, 3)


def test_unterminated_string():
    tokens, errors = scan('print "abc;\nvar x = 1;')
    assert tokens == []
    error = errors[0]
    assert isinstance(error, UnterminatedStringError)
    assert error.text == '"abc;\nvar x = 1;'
    assert (error.line, error.position) == (1, 7)


def test_unterminated_string_reports_opening_line():
    _, errors = scan('var a;\nprint "oops\nmore\nlines')
    assert isinstance(errors[0], UnterminatedStringError)
    assert errors[0].line == 2


def test_malformed_number():
    """
    Test that a numeral with two decimal points carries its exact text.
    """
    tokens, errors = scan("print 12.34.56;")
    assert tokens == []
    error = errors[0]
    assert isinstance(error, NumberParseError)
    assert error.text == "12.34.56"
    assert isinstance(error.cause, ValueError)
    assert (error.line, error.position) == (1, 7)


@pytest.mark.parametrize("source", [
    "",
    "print \"hello\";",
    "var x = (1 + 2) * 3 / 4 - 5;",
    "fun f(a, b) { return a >= b and !nil or false; }",
    "while (i <= 10) { i = i + 1; }\n// done",
])
def test_valid_sources_never_fail(source):
    tokens, errors = scan(source)
    assert errors == []
    assert tokens[-1].type == TokenType.EOF


def test_tokens_are_immutable():
    tokens, _ = scan("x")
    with pytest.raises(AttributeError):
        tokens[0].line = 5
