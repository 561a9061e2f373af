"""Lexer for Lox.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, source text, literal value, line number and column.

1. Token Definitions
Token types are defined via named regular expressions (``TOKEN_SPECIFICATION``)
covering operators, delimiters, literals and identifiers. Order matters: two
character operators are listed before their one character prefixes, and line
comments before the slash operator.

2. Keyword Differentiation
Identifiers are matched with a single pattern and then looked up in
``KEYWORDS``; a hit replaces the token type with the keyword type.

3. Errors
Scanning stops at the first lexical error. The result is then an empty token
list and a single :class:`ScanError`: a stray character, a string whose
closing quote never arrives, or a numeral that ``float()`` rejects
(``12.34.56``).


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re

from loxlang.exceptions import (
    BadCharError,
    NumberParseError,
    ScanError,
    UnterminatedStringError,
)
from loxlang.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*'),
    ('NUMBER',        r'\d[\d.]*'),

    # Identifiers and keywords
    ('IDENTIFIER',    r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',       r'//[^\n]*'),

    # Two character operators
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),

    # One character operators
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),

    # Delimiters
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('SEMICOLON',     r';'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def scan(code: str) -> tuple[list[Token], list[ScanError]]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens, terminated by an EOF token. Empty on error.
        list[ScanError]: Empty on success, otherwise the single lexical error.
    """
    tokens: list[Token] = []
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue

        try:
            if kind == 'MISMATCH':
                raise BadCharError(value, line_num, column)
            if kind == 'UNTERMINATED':
                raise UnterminatedStringError(value, line_num, column)
            if kind == 'NUMBER':
                try:
                    number = float(value)
                except ValueError as e:
                    raise NumberParseError(value, e, line_num, column) from e
                tokens.append(Token(TokenType.NUMBER, value, number, line_num, column))
            elif kind == 'STRING':
                tokens.append(Token(TokenType.STRING, value, value[1:-1], line_num, column))
                # Strings may span lines
                newlines = value.count('\n')
                if newlines:
                    line_num += newlines
                    line_start = match_obj.start() + value.rfind('\n') + 1
            elif kind == 'IDENTIFIER':
                type_ = KEYWORDS.get(value, TokenType.IDENTIFIER)
                tokens.append(Token(type_, value, None, line_num, column))
            else:
                tokens.append(Token(TokenType(kind), value, None, line_num, column))
        except ScanError as e:
            logger.debug("scan failed: %s (line %d)", e, e.line)
            return [], [e]

    tokens.append(Token(TokenType.EOF, '', None, line_num, len(code) - line_start + 1))
    logger.debug("scanned %d tokens", len(tokens))
    return tokens, []


__all__ = ["scan", "TOKEN_SPECIFICATION"]
