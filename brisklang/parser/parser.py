"""
Main parser entry point for brisk.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`brisklang.parser.expressions` and `brisklang.parser.statements`; they reach
each other only through the methods below, so productions can refer to one
another regardless of definition order.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from brisklang.cursor import Cursor
from brisklang.exceptions import NestingTooDeep, ParseError, ParseFailure
from brisklang.nodes import Block
from brisklang.parser.combinators import Failure, ParseResult

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Parser:
    """brisk parser.

    A parser holds no parsing state, only configuration, so one instance can
    be shared between threads and reused for any number of sources.
    """

    def __init__(self, file: str = "<input>"):
        """
        Initialize the parser.

        Parameters:
            file (str): Name of the source, used in error messages.
        """
        self.source_file = file


    # Expression wrappers
    def primary(self, cursor: Cursor) -> ParseResult:
        """
        Parse a literal, name, or parenthesized expression.
        """
        return _expr.parse_primary(self, cursor)

    def postfix(self, cursor: Cursor) -> ParseResult:
        """
        Parse call and index suffixes.
        """
        return _expr.parse_postfix(self, cursor)

    def unary(self, cursor: Cursor) -> ParseResult:
        """
        Parse a prefix operator expression.
        """
        return _expr.parse_unary(self, cursor)

    def expr(self, cursor: Cursor) -> ParseResult:
        """
        Parse a full expression, including assignment.
        """
        return _expr.parse_expr(self, cursor)


    # Statement wrappers
    def block(self, cursor: Cursor) -> ParseResult:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self, cursor)

    def statement(self, cursor: Cursor) -> ParseResult:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self, cursor)

    def parse_if(self, cursor: Cursor) -> ParseResult:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self, cursor)

    def parse_while(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self, cursor)

    def parse_loop(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'loop' statement.
        """
        return _stmt.parse_loop(self, cursor)

    def parse_for(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'for' loop.
        """
        return _stmt.parse_for(self, cursor)

    def parse_continue(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'continue' statement.
        """
        return _stmt.parse_continue(self, cursor)

    def parse_break(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'break' statement for loop termination.
        """
        return _stmt.parse_break(self, cursor)

    def parse_return(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self, cursor)

    def parse_let(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'let' declaration.
        """
        return _stmt.parse_let(self, cursor)

    def parse_const(self, cursor: Cursor) -> ParseResult:
        """
        Parse a 'const' declaration.
        """
        return _stmt.parse_const(self, cursor)

    def parse_func_def(self, cursor: Cursor) -> ParseResult:
        """
        Parse a function definition statement.
        """
        return _stmt.parse_func_def(self, cursor)

    def parse_expression_statement(self, cursor: Cursor) -> ParseResult:
        """
        Parse an expression statement.
        """
        return _stmt.parse_expression_statement(self, cursor)


    def parse_result(self, source: str, offset: int = 0) -> ParseResult:
        """
        Parse the full input and return the raw result value.

        Parameters:
            source (str): The source text.
            offset (int): Where to start parsing.

        Returns:
            Success holding the top-level ``Block`` and the final cursor, or
            Failure. Input nested deeper than the interpreter stack allows
            fails with ``NestingTooDeep`` at ``offset``.
        """
        try:
            return _stmt.parse_program(self, Cursor(source, offset))
        except RecursionError:
            logger.debug("Recursion limit reached while parsing %s", self.source_file)
            return Failure(ParseFailure(NestingTooDeep(), offset), committed=True)

    def parse(self, source: str, offset: int = 0) -> Block:
        """
        Parse the full input into a top-level block.

        Raises:
            ParseError: If the source is not valid brisk.
        """
        logger.debug("Parsing %s (%d characters from offset %d)",
                     self.source_file, len(source), offset)
        result = self.parse_result(source, offset)
        if isinstance(result, Failure):
            error = ParseError(result.error, source, self.source_file)
            logger.debug("Parse of %s failed: %s", self.source_file, error)
            raise error
        logger.debug("Parsed %d top-level statements from %s",
                     len(result.value.body), self.source_file)
        return result.value
