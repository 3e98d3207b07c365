"""Expression parsing utilities for brisk.

These functions operate on a `brisklang.parser.parser.Parser` instance and a
cursor, and implement the recursive descent logic for expressions,
maintaining operator precedence and associativity. Each returns a
``Success`` or ``Failure`` value; none of them raise.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from brisklang.cursor import Cursor
from brisklang.exceptions import ExpectedPattern, UnexpectedEndOfInput
from brisklang.nodes import (
    Assign, Binary, Bool, Call, Index, Name, Number, String, Unary,
)
from brisklang.operations import BINARY_PRECEDENCE, UNARY_OPERATORS
from brisklang.parser.combinators import (
    Failure,
    ParseResult,
    Success,
    context,
    delimited,
    fail,
    identifier,
    keyword,
    literal,
    pattern,
    separated0,
    sequence,
    ws0,
)

if TYPE_CHECKING:
    from brisklang.parser import Parser


_number = pattern(r"[0-9]+(?:\.[0-9]+)?", "number")
_string = pattern(r'"(?:[^"\\\n]|\\.)*"', "string literal")
_assign_op = pattern(r"=(?!=)", "'='")
_comma = delimited(ws0, literal(","), ws0)

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", '"': '"', "\\": "\\"}


def _unescape(body: str) -> str:
    out = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars)
            out.append(_ESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a literal, a name, or a parenthesized expression.

    Syntax:
        <number> | <string> | true | false | <identifier> | ( <expression> )
    """
    start = cursor.offset
    ch = cursor.peek()

    if ch.isascii() and ch.isdigit():
        result = _number(cursor)
        text = result.value
        value = float(text) if "." in text else int(text)
        return Success(result.cursor, Number(value, offset=start))

    if ch == '"':
        result = _string(cursor)
        if isinstance(result, Failure):
            return result
        return Success(result.cursor, String(_unescape(result.value[1:-1]), offset=start))

    for word, value in (("true", True), ("false", False)):
        result = keyword(word)(cursor)
        if isinstance(result, Success):
            return Success(result.cursor, Bool(value, offset=start))

    if ch == "(":
        return delimited(
            sequence(literal("("), ws0),
            parser.expr,
            sequence(ws0, literal(")")),
        )(cursor)

    result = identifier(cursor)
    if isinstance(result, Success):
        return Success(result.cursor, Name(result.value, offset=start))

    if cursor.at_end:
        return fail(UnexpectedEndOfInput("expression"), start)
    return fail(ExpectedPattern("expression"), start)


def parse_postfix(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse calls and index accesses following a primary expression.

    Syntax:
        <primary> ( "(" <args> ")" | "[" <expression> "]" )*
    """
    result = parser.primary(cursor)
    if isinstance(result, Failure):
        return result
    node, cursor = result.value, result.cursor

    while True:
        after_ws = ws0(cursor).cursor
        if after_ws.startswith("("):
            call = delimited(
                sequence(literal("("), ws0),
                separated0(parser.expr, _comma),
                sequence(ws0, literal(")")),
            )(after_ws)
            if isinstance(call, Failure):
                return call
            node = Call(node, tuple(call.value), offset=node.offset)
            cursor = call.cursor
        elif after_ws.startswith("["):
            index = delimited(
                sequence(literal("["), ws0),
                parser.expr,
                sequence(ws0, literal("]")),
            )(after_ws)
            if isinstance(index, Failure):
                return index
            node = Index(node, index.value, offset=node.offset)
            cursor = index.cursor
        else:
            return Success(cursor, node)


def parse_unary(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse prefix negation and logical not.

    Syntax:
        ( "-" | "!" ) <unary> | <postfix>
    """
    for symbol, op in UNARY_OPERATORS:
        if cursor.startswith(symbol) and not cursor.startswith("!="):
            operand = parser.unary(ws0(cursor.advance(len(symbol))).cursor)
            if isinstance(operand, Failure):
                return operand
            return Success(operand.cursor, Unary(op, operand.value, offset=cursor.offset))
    return parser.postfix(cursor)


def parse_binary(parser: 'Parser', cursor: Cursor, level: int = 0) -> ParseResult:
    """
    Parse left-associative binary operators from precedence ``level`` up.

    Levels are listed lowest first in ``BINARY_PRECEDENCE``; once the list is
    exhausted this falls through to unary expressions.
    """
    if level >= len(BINARY_PRECEDENCE):
        return parser.unary(cursor)

    left = parse_binary(parser, cursor, level + 1)
    if isinstance(left, Failure):
        return left
    node, cursor = left.value, left.cursor

    while True:
        after_ws = ws0(cursor).cursor
        for symbol, op in BINARY_PRECEDENCE[level]:
            if after_ws.startswith(symbol):
                break
        else:
            return Success(cursor, node)

        right = parse_binary(parser, ws0(after_ws.advance(len(symbol))).cursor, level + 1)
        if isinstance(right, Failure):
            return right
        node = Binary(op, node, right.value, offset=node.offset)
        cursor = right.cursor


def parse_assignment(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a right-associative assignment.

    Syntax:
        <target> = <assignment> | <binary>

    Only names and index accesses are valid targets.
    """
    left = parse_binary(parser, cursor)
    if isinstance(left, Failure):
        return left

    after_ws = ws0(left.cursor).cursor
    op = _assign_op(after_ws)
    if isinstance(op, Failure):
        return left

    if not isinstance(left.value, (Name, Index)):
        return fail(ExpectedPattern("assignable target"), after_ws.offset)

    right = parse_assignment(parser, ws0(op.cursor).cursor)
    if isinstance(right, Failure):
        return right
    return Success(right.cursor, Assign(left.value, right.value, offset=left.value.offset))


def parse_expr(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a full expression.
    """
    return context("expression", lambda cur: parse_assignment(parser, cur))(cursor)
