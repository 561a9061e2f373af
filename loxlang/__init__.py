"""Lox language interpreter.

The pipeline is split across four stages: :mod:`loxlang.lexer` scans source
text into tokens, :mod:`loxlang.parser` builds statements, and
:mod:`loxlang.interpreter` executes them against an
:class:`~loxlang.environment.Environment`.

Parsing and evaluation both recurse once per nesting level, several Python
frames at a time, so importing the package raises the interpreter's
recursion limit to ``RECURSION_LIMIT``. Nesting beyond that is reported as
a parse error or a "Stack overflow." runtime error.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

__version__ = "0.1.0"

RECURSION_LIMIT = 10_000

if sys.getrecursionlimit() < RECURSION_LIMIT:
    sys.setrecursionlimit(RECURSION_LIMIT)
