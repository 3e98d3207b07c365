"""AST node definitions for brisk.

Statements and expressions are frozen dataclasses. Every node records the
offset it started at, but the offset takes no part in equality so two parses
of equivalent text compare equal. Child collections are tuples; a tree never
shares nodes between parents.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from brisklang.operations import Op


class Node:
    """Base class for every AST node."""


class Statement(Node):
    """Base class for statement nodes."""


class Expr(Node):
    """Base class for expression nodes."""


def _offset():
    return field(default=0, compare=False, repr=False)


# ---- Expressions ----

@dataclass(frozen=True)
class Number(Expr):
    value: int | float
    offset: int = _offset()


@dataclass(frozen=True)
class String(Expr):
    value: str
    offset: int = _offset()


@dataclass(frozen=True)
class Bool(Expr):
    value: bool
    offset: int = _offset()


@dataclass(frozen=True)
class Name(Expr):
    ident: str
    offset: int = _offset()


@dataclass(frozen=True)
class Unary(Expr):
    op: Op
    operand: Expr
    offset: int = _offset()


@dataclass(frozen=True)
class Binary(Expr):
    op: Op
    left: Expr
    right: Expr
    offset: int = _offset()


@dataclass(frozen=True)
class Assign(Expr):
    """``target = value``; target is a ``Name`` or ``Index``."""
    target: Expr
    value: Expr
    offset: int = _offset()


@dataclass(frozen=True)
class Call(Expr):
    callee: Expr
    args: tuple = ()
    offset: int = _offset()


@dataclass(frozen=True)
class Index(Expr):
    target: Expr
    index: Expr
    offset: int = _offset()


# ---- Statements ----

@dataclass(frozen=True)
class Continue(Statement):
    offset: int = _offset()


@dataclass(frozen=True)
class Break(Statement):
    offset: int = _offset()


@dataclass(frozen=True)
class Return(Statement):
    value: Optional[Expr] = None
    offset: int = _offset()


@dataclass(frozen=True)
class Block(Statement):
    body: tuple = ()
    offset: int = _offset()


@dataclass(frozen=True)
class If(Statement):
    """
    Conditional. An ``else if`` chain nests the next ``If`` as the only
    statement of ``otherwise``.
    """
    condition: Expr
    then: Block
    otherwise: Optional[Block] = None
    offset: int = _offset()


@dataclass(frozen=True)
class While(Statement):
    condition: Expr
    body: Block
    offset: int = _offset()


@dataclass(frozen=True)
class Loop(Statement):
    body: Block
    offset: int = _offset()


@dataclass(frozen=True)
class For(Statement):
    name: str
    iterable: Expr
    body: Block
    offset: int = _offset()


@dataclass(frozen=True)
class Let(Statement):
    name: str
    value: Expr
    mutable: bool = False
    offset: int = _offset()


@dataclass(frozen=True)
class Const(Statement):
    name: str
    value: Expr
    offset: int = _offset()


@dataclass(frozen=True)
class Function(Statement):
    name: str
    params: tuple
    body: Block
    offset: int = _offset()


@dataclass(frozen=True)
class ExprStmt(Statement):
    expr: Expr
    offset: int = _offset()


__all__ = [
    "Node", "Statement", "Expr",
    "Number", "String", "Bool", "Name", "Unary", "Binary", "Assign", "Call", "Index",
    "Continue", "Break", "Return", "Block", "If", "While", "Loop", "For",
    "Let", "Const", "Function", "ExprStmt",
]
