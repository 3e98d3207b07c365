"""Statement parsing utilities for brisk.

These functions operate on a `brisklang.parser.parser.Parser` instance and a
cursor, and handle the various statement forms in the language such as
blocks, conditionals, loops, declarations and function definitions.

Every production is wrapped in a named context so failures carry a readable
trail. Productions that start with a keyword are committed once that keyword
has matched: a later mismatch is reported as-is and the statement dispatcher
does not try any other production.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from brisklang.cursor import Cursor
from brisklang.exceptions import ParseFailure, UnterminatedBlock
from brisklang.nodes import (
    Block, Break, Const, Continue, ExprStmt, For, Function, If, Let, Loop,
    Return, While,
)
from brisklang.parser.combinators import (
    Failure,
    ParseResult,
    ParserFn,
    Success,
    alternation,
    committed,
    context,
    cut,
    delimited,
    identifier,
    keyword,
    literal,
    map_value,
    maybe,
    optional,
    preceded,
    separated0,
    sequence,
    terminated,
    ws0,
)

if TYPE_CHECKING:
    from brisklang.parser import Parser


_continue = context(
    "continue_statement",
    committed(keyword("continue"), ws0, literal(";")),
)
_break = context(
    "break_statement",
    committed(keyword("break"), ws0, literal(";")),
)
_params = separated0(identifier, delimited(ws0, literal(","), ws0))


def parse_statements(parser: 'Parser', cursor: Cursor,
                     terminator: Optional[ParserFn] = None) -> ParseResult:
    """
    Parse statements until ``terminator`` matches or, when no terminator is
    given, until the input runs out.

    Args:
        parser: The parser instance.
        cursor: Where the statement sequence starts.
        terminator: Parser for the token that closes the sequence.

    Returns:
        Success holding the list of statements with the cursor past the
        terminator, or the first statement failure. Running out of input
        while a terminator is still expected fails with ``UnterminatedBlock``.
    """
    statements = []
    while True:
        cursor = ws0(cursor).cursor
        if terminator is not None:
            closed = terminator(cursor)
            if isinstance(closed, Success):
                return Success(closed.cursor, statements)
        if cursor.at_end:
            if terminator is None:
                return Success(cursor, statements)
            return Failure(ParseFailure(UnterminatedBlock(), cursor.offset), committed=True)
        result = parser.statement(cursor)
        if isinstance(result, Failure):
            return result
        statements.append(result.value)
        cursor = result.cursor


def parse_program(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a whole compilation unit into a top-level block.
    """
    result = parse_statements(parser, cursor)
    if isinstance(result, Failure):
        return result
    return Success(result.cursor, Block(tuple(result.value), offset=cursor.offset))


def parse_block(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Returns:
        ParseResult: yields a ``Block``.
    """
    rule = context("block", committed(
        literal("{"),
        lambda cur: parse_statements(parser, cur, terminator=literal("}")),
    ))
    return map_value(rule, lambda values: Block(tuple(values[1]), offset=cursor.offset))(cursor)


def parse_statement(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a single statement.

    Keyword productions are tried first; the expression statement accepts
    the widest input and so comes last.
    """
    return context("statement", alternation(
        parser.block,
        parser.parse_if,
        parser.parse_while,
        parser.parse_loop,
        parser.parse_for,
        parser.parse_continue,
        parser.parse_break,
        parser.parse_return,
        parser.parse_let,
        parser.parse_const,
        parser.parse_func_def,
        parser.parse_expression_statement,
    ))(cursor)


def parse_continue(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a 'continue' control statement.

    Syntax:
        continue ;
    """
    return map_value(_continue, lambda _: Continue(offset=cursor.offset))(cursor)


def parse_break(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a 'break' control statement.

    Syntax:
        break ;
    """
    return map_value(_break, lambda _: Break(offset=cursor.offset))(cursor)


def parse_return(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a 'return' statement.

    Syntax:
        return [<expression>] ;
    """
    rule = context("return_statement", committed(
        keyword("return"), ws0, maybe(parser.expr), ws0, literal(";"),
    ))
    return map_value(rule, lambda values: Return(values[2], offset=cursor.offset))(cursor)


def parse_if(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if <condition> { <block> }
        else if <condition> { <block> }
        else { <block> }

    An ``else if`` branch is stored as a block holding the nested ``If``.
    """
    else_branch = preceded(
        sequence(ws0, keyword("else")),
        cut(preceded(ws0, alternation(parser.block, parser.parse_if))),
    )
    rule = context("if_statement", committed(
        keyword("if"), ws0, parser.expr, ws0, parser.block, optional(else_branch),
    ))

    def build(values):
        _, _, condition, _, then_block, otherwise = values
        if isinstance(otherwise, If):
            otherwise = Block((otherwise,), offset=otherwise.offset)
        return If(condition, then_block, otherwise, offset=cursor.offset)

    return map_value(rule, build)(cursor)


def parse_while(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a 'while' loop.

    Syntax:
        while <condition> { <block> }
    """
    rule = context("while_statement", committed(
        keyword("while"), ws0, parser.expr, ws0, parser.block,
    ))
    return map_value(rule, lambda values: While(values[2], values[4], offset=cursor.offset))(cursor)


def parse_loop(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse an unconditional 'loop'.

    Syntax:
        loop { <block> }
    """
    rule = context("loop_statement", committed(keyword("loop"), ws0, parser.block))
    return map_value(rule, lambda values: Loop(values[2], offset=cursor.offset))(cursor)


def parse_for(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a 'for' loop over an iterable expression.

    Syntax:
        for <identifier> in <expression> { <block> }
    """
    rule = context("for_statement", committed(
        keyword("for"), ws0, identifier, ws0, keyword("in"), ws0,
        parser.expr, ws0, parser.block,
    ))
    return map_value(
        rule, lambda values: For(values[2], values[6], values[8], offset=cursor.offset),
    )(cursor)


def parse_let(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a `let` variable declaration.

    Syntax:
        let [mut] <identifier> = <expression> ;
    """
    rule = context("let_statement", committed(
        keyword("let"), ws0, optional(terminated(keyword("mut"), ws0)), identifier,
        ws0, literal("="), ws0, parser.expr, ws0, literal(";"),
    ))
    return map_value(
        rule,
        lambda values: Let(values[3], values[7], values[2] is not None, offset=cursor.offset),
    )(cursor)


def parse_const(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a `const` declaration.

    Syntax:
        const <identifier> = <expression> ;
    """
    rule = context("const_statement", committed(
        keyword("const"), ws0, identifier, ws0, literal("="), ws0, parser.expr,
        ws0, literal(";"),
    ))
    return map_value(rule, lambda values: Const(values[2], values[6], offset=cursor.offset))(cursor)


def parse_func_def(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse a function definition.

    Syntax:
        fn <name>(<params>) { <block> }
    """
    rule = context("function_declaration", committed(
        keyword("fn"), ws0, identifier, ws0, literal("("), ws0, _params, ws0,
        literal(")"), ws0, parser.block,
    ))
    return map_value(
        rule,
        lambda values: Function(values[2], tuple(values[6]), values[10], offset=cursor.offset),
    )(cursor)


def parse_expression_statement(parser: 'Parser', cursor: Cursor) -> ParseResult:
    """
    Parse an expression evaluated for its effect.

    Syntax:
        <expression> ;
    """
    rule = context("expression_statement", sequence(parser.expr, ws0, literal(";")))
    return map_value(rule, lambda values: ExprStmt(values[0], offset=cursor.offset))(cursor)
