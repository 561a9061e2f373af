"""Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

A syntax error does not stop the parser. The error is recorded, tokens are
discarded up to the next statement boundary and parsing resumes, so a single
pass reports every independent mistake in the source.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from loxlang.exceptions import ParseError
from loxlang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)

# Tokens that begin a statement; synchronization stops in front of them.
STATEMENT_STARTS = frozenset({
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            file (str): The name of the script.
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            last_line = tokens[-1].line if tokens else 1
            tokens = list(tokens) + [Token(TokenType.EOF, '', None, last_line, 0)]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        self.errors: list[ParseError] = []
        self.function_depth = 0

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        tok = self.curr_token
        if tok.type != TokenType.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def previous(self) -> Token | None:
        """
        Return the most recently consumed token.
        """
        if self.position == 0:
            return None
        return self.tokens[self.position - 1]

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token has one of the given types.
        """
        return self.curr_token.type in token_types

    def eat(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): The error message if the token does not match.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            return self.advance()
        raise self.error(self.curr_token, message)

    def error(self, token: Token, message: str) -> ParseError:
        """
        Build a ParseError for ``token``. Errors on EOF carry no token.
        """
        if token.type == TokenType.EOF:
            return ParseError(None, message, token.line)
        return ParseError(token, message)

    def report(self, error: ParseError) -> None:
        """
        Record an error without unwinding the current production.
        """
        logger.debug("parse error on line %s: %s", error.line, error.message)
        self.errors.append(error)

    def synchronize(self) -> None:
        """
        Discard tokens until a statement boundary is reached.
        """
        self.advance()
        while self.curr_token.type != TokenType.EOF:
            prev = self.previous()
            if prev is not None and prev.type == TokenType.SEMICOLON:
                return
            if self.curr_token.type in STATEMENT_STARTS:
                return
            self.advance()


    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)

    def assignment(self) -> tuple:
        """
        Parse an assignment, which is right associative.
        """
        return _expr.parse_assignment(self)

    def logical_or(self) -> tuple:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def logical_and(self) -> tuple:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def equality(self) -> tuple:
        """
        Parse an equality expression using '==' or '!='.
        """
        return _expr.parse_equality(self)

    def comparison(self) -> tuple:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self) -> tuple:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self) -> tuple:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self) -> tuple:
        """
        Parse a prefix '!' or '-' expression.
        """
        return _expr.parse_unary(self)

    def call(self) -> tuple:
        """
        Parse a call expression.
        """
        return _expr.parse_call(self)

    def primary(self) -> tuple:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)


    # Statement wrappers
    def declaration(self) -> tuple | None:
        """
        Parse a declaration, recovering from syntax errors.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> tuple:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_func_def(self) -> tuple:
        """
        Parse a function declaration.
        """
        return _stmt.parse_func_def(self)

    def parse_var(self) -> tuple:
        """
        Parse a variable declaration.
        """
        return _stmt.parse_var(self)

    def parse_print(self) -> tuple:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> tuple:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self) -> tuple:
        """
        Parse a 'for' loop.
        """
        return _stmt.parse_for(self)

    def parse_return(self) -> tuple:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_expr_stmt(self) -> tuple:
        """
        Parse an expression statement.
        """
        return _stmt.parse_expr_stmt(self)


    def parse(self) -> list[tuple]:
        """
        Parse the full input into a list of statements.

        Errors are collected in ``self.errors``; the statements parsed around
        them are still returned.
        """
        statements = []
        while self.curr_token.type != TokenType.EOF:
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        logger.debug(
            "parsed %d statements with %d errors in %s",
            len(statements), len(self.errors), self.source_file,
        )
        return statements


def parse(tokens: list[Token], file: str = "<stdin>") -> tuple[list[tuple], list[ParseError]]:
    """
    Parse tokens into statements.

    Parameters:
        tokens (list[Token]): Output of the lexer.
        file (str): The name of the script.

    Returns:
        list[tuple]: The statements, or an empty list if any error occurred.
        list[ParseError]: Every syntax error, in source order.
    """
    parser = Parser(tokens, file)
    statements = parser.parse()
    if parser.errors:
        return [], parser.errors
    return statements, []
