"""Shared definitions for AST operation identifiers.

This module centralizes the operator labels used by the parser and
interpreter to tag nodes in the abstract syntax tree.  Keeping them in one
place prevents the two components from drifting apart when new operations are
added or existing ones are renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

    # Unary
    NEG = "neg"
    NOT = "not"

    # Logical
    AND = "and"
    OR = "or"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Source-level spelling of each operator, used when rendering expressions.
SYMBOLS: dict[Op, str] = {
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
    Op.EQ: "==",
    Op.NE: "!=",
    Op.GT: ">",
    Op.GE: ">=",
    Op.LT: "<",
    Op.LE: "<=",
    Op.NEG: "-",
    Op.NOT: "!",
    Op.AND: "and",
    Op.OR: "or",
}

BINARY_OPS = frozenset({
    Op.ADD, Op.SUB, Op.MUL, Op.DIV,
    Op.EQ, Op.NE, Op.GT, Op.GE, Op.LT, Op.LE,
})

LOGICAL_OPS = frozenset({Op.AND, Op.OR})


__all__ = ["Op", "SYMBOLS", "BINARY_OPS", "LOGICAL_OPS"]
