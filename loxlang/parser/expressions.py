"""Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity.

Precedence, lowest first: assignment, ``or``, ``and``, equality, comparison,
term (``+ -``), factor (``* /``), unary (``! -``), call, primary.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.operations import Op
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser

MAX_ARGUMENTS = 255


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == TokenType.NUMBER:
        parser.advance()
        return ('number', tok.literal, tok.line)

    if tok.type == TokenType.STRING:
        parser.advance()
        return ('string', tok.literal, tok.line)

    if tok.type in (TokenType.TRUE, TokenType.FALSE):
        parser.advance()
        return ('bool', tok.type == TokenType.TRUE, tok.line)

    if tok.type == TokenType.NIL:
        parser.advance()
        return ('nil', None, tok.line)

    if tok.type == TokenType.IDENTIFIER:
        parser.advance()
        return ('ident', tok.lexeme, tok.line)

    if tok.type == TokenType.LEFT_PAREN:
        parser.advance()
        node = parser.expr()
        parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
        return ('grouping', node, tok.line)

    raise parser.error(tok, "Expect expression.")


def _finish_call(parser: 'Parser', callee: tuple) -> tuple:
    """Parse the argument list of a call whose '(' was just consumed."""
    args = []
    if not parser.check(TokenType.RIGHT_PAREN):
        args.append(parser.expr())
        while parser.check(TokenType.COMMA):
            parser.advance()
            if len(args) >= MAX_ARGUMENTS:
                parser.report(parser.error(
                    parser.curr_token,
                    f"Can't have more than {MAX_ARGUMENTS} arguments.",
                ))
            args.append(parser.expr())
    paren = parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
    return ('func_call', callee, args, paren.line)


def parse_call(parser: 'Parser') -> tuple:
    """Parse a primary followed by any number of call suffixes."""
    result = parser.primary()
    while parser.check(TokenType.LEFT_PAREN):
        parser.advance()
        result = _finish_call(parser, result)
    return result


def parse_unary(parser: 'Parser') -> tuple:
    """Parse prefix '!' and '-'."""
    tok = parser.curr_token
    if tok.type in (TokenType.BANG, TokenType.MINUS):
        parser.advance()
        op = Op.NOT if tok.type == TokenType.BANG else Op.NEG
        return ('unary', op, parser.unary(), tok.line)
    return parser.call()


def parse_factor(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.check(TokenType.STAR, TokenType.SLASH):
        op_tok = parser.advance()
        op_map = {
            TokenType.STAR: Op.MUL,
            TokenType.SLASH: Op.DIV,
        }
        result = (op_map[op_tok.type], result, parser.unary(), op_tok.line)
    return result


def parse_term(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.check(TokenType.PLUS, TokenType.MINUS):
        tok = parser.advance()
        op_map = {
            TokenType.PLUS: Op.ADD,
            TokenType.MINUS: Op.SUB,
        }
        result = (op_map[tok.type], result, parser.factor(), tok.line)
    return result


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse comparison expressions (<, >, <=, >=)."""
    result = parser.term()
    op_map = {
        TokenType.GREATER: Op.GT,
        TokenType.GREATER_EQUAL: Op.GE,
        TokenType.LESS: Op.LT,
        TokenType.LESS_EQUAL: Op.LE,
    }
    while parser.curr_token.type in op_map:
        op_tok = parser.advance()
        result = (op_map[op_tok.type], result, parser.term(), op_tok.line)
    return result


def parse_equality(parser: 'Parser') -> tuple:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.check(TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
        op_tok = parser.advance()
        op = Op.EQ if op_tok.type == TokenType.EQUAL_EQUAL else Op.NE
        result = (op, result, parser.comparison(), op_tok.line)
    return result


def parse_logical_and(parser: 'Parser') -> tuple:
    """Parse logical AND expressions using the 'and' keyword."""
    result = parser.equality()
    while parser.check(TokenType.AND):
        tok = parser.advance()
        result = (Op.AND, result, parser.equality(), tok.line)
    return result


def parse_logical_or(parser: 'Parser') -> tuple:
    """Parse logical OR expressions using the 'or' keyword."""
    result = parser.logical_and()
    while parser.check(TokenType.OR):
        tok = parser.advance()
        result = (Op.OR, result, parser.logical_and(), tok.line)
    return result


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse an assignment. The target is parsed as an ordinary expression
    first and only accepted if it turns out to be a plain variable.
    """
    result = parser.logical_or()
    if parser.check(TokenType.EQUAL):
        equals = parser.advance()
        value = parser.assignment()
        if result[0] == 'ident':
            return ('assign', result[1], value, equals.line)
        parser.report(parser.error(equals, "Invalid assignment target."))
    return result


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
