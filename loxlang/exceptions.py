"""Errors.

Lexical, syntax and runtime errors are carried as exception objects. Each
pipeline stage catches its own errors at its boundary and hands them back to
the caller as a list, so a driver can report every problem before deciding
how the run ends.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScanError(Exception):
    """
    Base error for lexical failures.
    """
    def __init__(self, message, line, position):
        self.line = line
        self.position = position
        super().__init__(message)


class BadCharError(ScanError):
    """
    Error for a character that cannot begin any token.
    """
    def __init__(self, char, line, position):
        self.char = char
        super().__init__(f"Unexpected character {char} at {position}", line, position)


class UnterminatedStringError(ScanError):
    """
    Error for a string literal with no closing quote before end of input.
    """
    def __init__(self, text, line, position):
        self.text = text
        super().__init__(f"Unterminated string {text} at {position}", line, position)


class NumberParseError(ScanError):
    """
    Error for a numeral that does not parse as a number.
    """
    def __init__(self, text, cause, line, position):
        self.text = text
        self.cause = cause
        super().__init__(
            f"Could not parse {text} as a number at {position} ({cause})",
            line,
            position,
        )


class ParseError(Exception):
    """
    Error for syntax violations. ``token`` is None when the error occurs at
    end of input, in which case ``line`` still records where input ended.
    """
    def __init__(self, token, message, line=None):
        self.token = token
        self.message = message
        self._line = line
        super().__init__(message)

    @property
    def line(self):
        """
        Source line of the offending token, or of the end of input.
        """
        if self.token is not None:
            return self.token.line
        return self._line

    @property
    def at_end(self) -> bool:
        """
        True when the error was raised on the end of input.
        """
        return self.token is None


class LoxRuntimeError(RuntimeError):
    """
    Error raised while evaluating an expression.
    """
    def __init__(self, message, expr=None, line=None):
        self.message = message
        self.expr = expr
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} [line {self.line}]: {self.expr}"


class UndefinedVariableException(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, expr=None, line=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'.", expr, line)


class UnknownOpException(LoxRuntimeError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, expr=None, line=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'.", expr, line)


class ReturnControlFlow(Exception):
    """
    Control flow handling for return statements.
    """
    def __init__(self, value):
        super().__init__()
        self.value = value
