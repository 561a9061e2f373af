"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function declarations.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParseError
from loxlang.tokens import TokenType

from .expressions import MAX_ARGUMENTS

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> tuple | None:
    """
    Parse a declaration or statement.

    On a syntax error the error is recorded, the parser synchronizes to the
    next statement boundary and None is returned. Nesting too deep for the
    Python stack is reported the same way.

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: The AST node, or None if the declaration was discarded.
    """
    try:
        if parser.check(TokenType.FUN):
            return parser.parse_func_def()
        if parser.check(TokenType.VAR):
            return parser.parse_var()
        return parser.statement()
    except ParseError as e:
        parser.report(e)
        parser.synchronize()
        return None
    except RecursionError:
        parser.report(parser.error(parser.curr_token, "Expression nesting too deep."))
        parser.synchronize()
        return None


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.PRINT:
        return parser.parse_print()
    elif tok.type == TokenType.IF:
        return parser.parse_if()
    elif tok.type == TokenType.WHILE:
        return parser.parse_while()
    elif tok.type == TokenType.FOR:
        return parser.parse_for()
    elif tok.type == TokenType.RETURN:
        return parser.parse_return()
    elif tok.type == TokenType.LEFT_BRACE:
        return parser.block()
    return parser.parse_expr_stmt()


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', list_of_statements, line_number)
    """
    tok = parser.eat(TokenType.LEFT_BRACE, "Expect '{' before block.")
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE, TokenType.EOF):
        stmt = parser.declaration()
        if stmt is not None:
            statements.append(stmt)
    parser.eat(TokenType.RIGHT_BRACE, "Expect '}' after block.")
    return ('block', statements, tok.line)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function declaration.

    Syntax:
        fun <name>(<param>, ...) { <statements> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('func_def', name, params, body_statements, line_number)
    """
    start_tok = parser.eat(TokenType.FUN, "Expect 'fun'.")
    name_tok = parser.eat(TokenType.IDENTIFIER, "Expect function name.")
    parser.eat(TokenType.LEFT_PAREN, "Expect '(' after function name.")
    params = []
    if not parser.check(TokenType.RIGHT_PAREN):
        params.append(parser.eat(TokenType.IDENTIFIER, "Expect parameter name.").lexeme)
        while parser.check(TokenType.COMMA):
            parser.advance()
            if len(params) >= MAX_ARGUMENTS:
                parser.report(parser.error(
                    parser.curr_token,
                    f"Can't have more than {MAX_ARGUMENTS} parameters.",
                ))
            params.append(parser.eat(TokenType.IDENTIFIER, "Expect parameter name.").lexeme)
    parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")

    if not parser.check(TokenType.LEFT_BRACE):
        raise parser.error(parser.curr_token, "Expect '{' before function body.")
    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
    return ('func_def', name_tok.lexeme, params, body[1], start_tok.line)


def parse_var(parser: 'Parser') -> tuple:
    """
    Parse a ``var`` variable declaration.

    Syntax:
        var <name> [= <expression>];

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('var', name, initializer_or_None, line)
    """
    parser.eat(TokenType.VAR, "Expect 'var'.")
    id_tok = parser.eat(TokenType.IDENTIFIER, "Expect variable name.")
    initializer = None
    if parser.check(TokenType.EQUAL):
        parser.advance()
        initializer = parser.expr()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return ('var', id_tok.lexeme, initializer, id_tok.line)


def parse_print(parser: 'Parser') -> tuple:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('print', expression_node, line_number)
    """
    tok = parser.eat(TokenType.PRINT, "Expect 'print'.")
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after value.")
    return ('print', expr_node, tok.line)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional 'if' statement with an optional else branch.

    A dangling ``else`` binds to the nearest ``if``.

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_branch, else_branch_or_None, line)
    """
    tok = parser.eat(TokenType.IF, "Expect 'if'.")
    parser.eat(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
    condition = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
    then_branch = parser.statement()
    else_branch = None
    if parser.check(TokenType.ELSE):
        parser.advance()
        else_branch = parser.statement()
    return ('if', condition, then_branch, else_branch, tok.line)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a 'while' statement.

    Returns:
        tuple: ('while', condition, body, line)
    """
    tok = parser.eat(TokenType.WHILE, "Expect 'while'.")
    parser.eat(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
    condition = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
    body = parser.statement()
    return ('while', condition, body, tok.line)


def parse_for(parser: 'Parser') -> tuple:
    """
    Parse a 'for' statement and desugar it into a while loop.

    ``for (init; cond; incr) body`` becomes
    ``{ init; while (cond) { body; incr; } }``. A missing condition loops
    forever.

    Returns:
        tuple: representing the desugared AST node.
    """
    tok = parser.eat(TokenType.FOR, "Expect 'for'.")
    parser.eat(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")

    if parser.check(TokenType.SEMICOLON):
        parser.advance()
        initializer = None
    elif parser.check(TokenType.VAR):
        initializer = parser.parse_var()
    else:
        initializer = parser.parse_expr_stmt()

    condition = None
    if not parser.check(TokenType.SEMICOLON):
        condition = parser.expr()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after loop condition.")

    increment = None
    if not parser.check(TokenType.RIGHT_PAREN):
        increment = parser.expr()
    parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

    body = parser.statement()

    if increment is not None:
        body = ('block', [body, ('expr_stmt', increment, increment[-1])], body[-1])
    if condition is None:
        condition = ('bool', True, tok.line)
    loop = ('while', condition, body, tok.line)
    if initializer is not None:
        loop = ('block', [initializer, loop], tok.line)
    return loop


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a 'return' statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('return', expression_or_None, line)
    """
    tok = parser.eat(TokenType.RETURN, "Expect 'return'.")
    if parser.function_depth == 0:
        parser.report(parser.error(tok, "Can't return from top-level code."))
    expr_node = None
    if not parser.check(TokenType.SEMICOLON):
        expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after return value.")
    return ('return', expr_node, tok.line)


def parse_expr_stmt(parser: 'Parser') -> tuple:
    """
    Parse an expression evaluated for its side effects.

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('expr_stmt', expression_node, line)
    """
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after expression.")
    return ('expr_stmt', expr_node, expr_node[-1])
