"""Token model for Lox.

Every lexical unit produced by the lexer is a :class:`Token` tagged with a
:class:`TokenType`. Token types are plain string enums so they compare equal
to their names (``TokenType.NUMBER == 'NUMBER'``), which keeps debug output
and tests readable.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of lexeme categories.
    """

    # Single-character tokens
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"

    # One or two character tokens
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "AND"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FOR = "FOR"
    FUN = "FUN"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


class Token:
    """
    Represents a lexical token with a type, its source text and position.

    Tokens are immutable once produced.
    """
    __slots__ = ("type", "lexeme", "literal", "line", "position")

    def __init__(self, type_, lexeme, literal, line, position):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            lexeme (str): The source text of the token.
            literal (Any): The literal value for numbers and strings, else None.
            line (int): The 1-based source line.
            position (int): The 1-based column of the first character.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "position", position)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable, cannot set '{name}'")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.type == other.type
            and self.lexeme == other.lexeme
            and self.literal == other.literal
            and self.line == other.line
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((self.type, self.lexeme, self.literal, self.line, self.position))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return (
            f"Token({self.type}, {self.lexeme!r}, {self.literal!r}, "
            f"line={self.line}, position={self.position})"
        )


__all__ = ["TokenType", "KEYWORDS", "Token"]
