"""Shared definitions for operator identifiers.

This module centralizes the operator names used by the expression grammar to
label ``Unary`` and ``Binary`` nodes, together with the source symbols that
spell them.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported operator names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"

    # Unary
    NEG = "neg"
    NOT = "not"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Binary operator symbols grouped by precedence, lowest first. Longer
# symbols come before their prefixes ("<=" before "<").
BINARY_PRECEDENCE: list[list[tuple[str, Op]]] = [
    [("||", Op.OR)],
    [("&&", Op.AND)],
    [("==", Op.EQ), ("!=", Op.NE)],
    [("<=", Op.LE), (">=", Op.GE), ("<", Op.LT), (">", Op.GT)],
    [("+", Op.ADD), ("-", Op.SUB)],
    [("*", Op.MUL), ("/", Op.DIV), ("%", Op.MOD)],
]

UNARY_OPERATORS: list[tuple[str, Op]] = [
    ("-", Op.NEG),
    ("!", Op.NOT),
]


__all__ = ["Op", "BINARY_PRECEDENCE", "UNARY_OPERATORS"]
