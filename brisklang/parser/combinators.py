"""Parser combinators for brisk.

Every parser in this module is a plain function taking a
:class:`~brisklang.cursor.Cursor` and returning either :class:`Success`
(the advanced cursor plus a value) or :class:`Failure` (a
:class:`~brisklang.exceptions.ParseFailure` value). Nothing is raised and no
state is shared, so any parser can be retried from the same cursor.

A failure may be *committed*. Committed failures come from productions whose
leading keyword already matched; ``alternation``, ``optional``, ``maybe`` and
``many0`` pass them straight through instead of trying something else.


File: combinators.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from brisklang.cursor import Cursor
from brisklang.exceptions import (
    AllAlternativesFailed,
    ExpectedLiteral,
    ExpectedPattern,
    ParseFailure,
    UnexpectedEndOfInput,
)


@dataclass(frozen=True)
class Success:
    """
    A successful parse: the cursor after the match and the produced value.
    """
    cursor: Cursor
    value: Any


@dataclass(frozen=True)
class Failure:
    """
    A failed parse.
    """
    error: ParseFailure
    committed: bool = False

    @property
    def offset(self) -> int:
        return self.error.offset


ParseResult = Union[Success, Failure]
ParserFn = Callable[[Cursor], ParseResult]


KEYWORDS = frozenset({
    "break", "const", "continue", "else", "false", "fn", "for", "if",
    "in", "let", "loop", "mut", "return", "true", "while",
})

_IDENT_CHAR = re.compile(r"[A-Za-z0-9_]")
_WHITESPACE = re.compile(r"(?:\s+|//[^\n]*)*")


def fail(cause, offset: int, committed: bool = False) -> Failure:
    """
    Build a frameless failure.
    """
    return Failure(ParseFailure(cause, offset), committed)


# ---- Primitives ----

def literal(text: str) -> ParserFn:
    """
    Match ``text`` exactly.

    Syntax:
        <text>

    Returns:
        Parser: yields the matched text; fails with ``ExpectedLiteral(text)``.
    """
    def parse(cursor: Cursor) -> ParseResult:
        if cursor.startswith(text):
            return Success(cursor.advance(len(text)), text)
        return fail(ExpectedLiteral(text), cursor.offset)
    return parse


def keyword(word: str) -> ParserFn:
    """
    Match ``word`` only when it is not immediately followed by an
    identifier character, so ``continued`` never matches ``continue``.
    """
    def parse(cursor: Cursor) -> ParseResult:
        if cursor.startswith(word):
            after = cursor.advance(len(word))
            if not _IDENT_CHAR.match(after.peek()):
                return Success(after, word)
        return fail(ExpectedLiteral(word), cursor.offset)
    return parse


def pattern(regex: str, description: str) -> ParserFn:
    """
    Match a non-empty regular expression at the cursor.

    Args:
        regex: The expression to match.
        description: What the match represents, used in error messages.

    Returns:
        Parser: yields the matched text.
    """
    compiled = re.compile(regex)

    def parse(cursor: Cursor) -> ParseResult:
        match = compiled.match(cursor.source, cursor.offset)
        if match is None or match.end() == cursor.offset:
            if cursor.at_end:
                return fail(UnexpectedEndOfInput(description), cursor.offset)
            return fail(ExpectedPattern(description), cursor.offset)
        return Success(cursor.advance(match.end() - cursor.offset), match.group())
    return parse


_name = pattern(r"[A-Za-z_][A-Za-z0-9_]*", "identifier")


def identifier(cursor: Cursor) -> ParseResult:
    """
    Match an identifier that is not a reserved keyword.
    """
    result = _name(cursor)
    if isinstance(result, Success) and result.value in KEYWORDS:
        return fail(ExpectedPattern("identifier"), cursor.offset)
    return result


def ws0(cursor: Cursor) -> ParseResult:
    """
    Skip whitespace and ``//`` line comments. Never fails.
    """
    match = _WHITESPACE.match(cursor.source, cursor.offset)
    return Success(cursor.advance(match.end() - cursor.offset), None)


# ---- Combinators ----

def sequence(*parsers: ParserFn) -> ParserFn:
    """
    Run parsers one after another, threading the cursor.

    Returns:
        Parser: yields a tuple with one value per parser, or the first
        failure.
    """
    def parse(cursor: Cursor) -> ParseResult:
        values = []
        for parser in parsers:
            result = parser(cursor)
            if isinstance(result, Failure):
                return result
            values.append(result.value)
            cursor = result.cursor
        return Success(cursor, tuple(values))
    return parse


def committed(leading: ParserFn, *rest: ParserFn) -> ParserFn:
    """
    Like ``sequence``, but once ``leading`` matches every later failure is
    committed.
    """
    tail = cut(sequence(*rest))

    def parse(cursor: Cursor) -> ParseResult:
        head = leading(cursor)
        if isinstance(head, Failure):
            return head
        result = tail(head.cursor)
        if isinstance(result, Failure):
            return result
        return Success(result.cursor, (head.value,) + result.value)
    return parse


def alternation(*parsers: ParserFn) -> ParserFn:
    """
    Try parsers in order from the same cursor and return the first success.

    A committed failure ends the search immediately. When every alternative
    fails, the failure that got furthest into the input is reported, wrapped
    in ``AllAlternativesFailed``; ties go to the earlier alternative.
    """
    def parse(cursor: Cursor) -> ParseResult:
        best = None
        for parser in parsers:
            result = parser(cursor)
            if isinstance(result, Success) or result.committed:
                return result
            if best is None or result.offset > best.offset:
                best = result
        error = best.error
        return Failure(ParseFailure(
            AllAlternativesFailed(error.cause, len(parsers)),
            error.offset,
            error.frames,
        ))
    return parse


def optional(parser: ParserFn) -> ParserFn:
    """
    Yield ``None`` instead of failing. Committed failures still propagate.
    """
    def parse(cursor: Cursor) -> ParseResult:
        result = parser(cursor)
        if isinstance(result, Failure) and not result.committed:
            return Success(cursor, None)
        return result
    return parse


def maybe(parser: ParserFn) -> ParserFn:
    """
    Like ``optional``, but only a failure at the starting cursor becomes
    ``None``. A failure detected further in, after part of the input already
    matched, is returned as is.
    """
    def parse(cursor: Cursor) -> ParseResult:
        result = parser(cursor)
        if isinstance(result, Failure) and not result.committed:
            if result.offset == cursor.offset:
                return Success(cursor, None)
        return result
    return parse


def many0(parser: ParserFn) -> ParserFn:
    """
    Apply ``parser`` until it fails; yields the list of values.
    """
    def parse(cursor: Cursor) -> ParseResult:
        values = []
        while True:
            result = parser(cursor)
            if isinstance(result, Failure):
                if result.committed:
                    return result
                return Success(cursor, values)
            values.append(result.value)
            if result.cursor.offset == cursor.offset:
                return Success(cursor, values)
            cursor = result.cursor
    return parse


def separated0(parser: ParserFn, separator: ParserFn) -> ParserFn:
    """
    Zero or more ``parser`` matches separated by ``separator``. An item is
    required after every separator.
    """
    def parse(cursor: Cursor) -> ParseResult:
        first = parser(cursor)
        if isinstance(first, Failure):
            return first if first.committed else Success(cursor, [])
        values = [first.value]
        cursor = first.cursor
        while True:
            sep = separator(cursor)
            if isinstance(sep, Failure):
                if sep.committed:
                    return sep
                return Success(cursor, values)
            item = parser(sep.cursor)
            if isinstance(item, Failure):
                return item
            values.append(item.value)
            cursor = item.cursor
    return parse


def preceded(prefix: ParserFn, parser: ParserFn) -> ParserFn:
    """Match ``prefix`` then ``parser``; yield only the latter's value."""
    return map_value(sequence(prefix, parser), lambda values: values[1])


def terminated(parser: ParserFn, suffix: ParserFn) -> ParserFn:
    """Match ``parser`` then ``suffix``; yield only the former's value."""
    return map_value(sequence(parser, suffix), lambda values: values[0])


def delimited(left: ParserFn, parser: ParserFn, right: ParserFn) -> ParserFn:
    """Match ``left``, ``parser``, ``right``; yield the middle value."""
    return map_value(sequence(left, parser, right), lambda values: values[1])


def map_value(parser: ParserFn, fn: Callable[[Any], Any]) -> ParserFn:
    """
    Transform the value of a successful parse.
    """
    def parse(cursor: Cursor) -> ParseResult:
        result = parser(cursor)
        if isinstance(result, Failure):
            return result
        return Success(result.cursor, fn(result.value))
    return parse


def cut(parser: ParserFn) -> ParserFn:
    """
    Mark any failure of ``parser`` as committed.
    """
    def parse(cursor: Cursor) -> ParseResult:
        result = parser(cursor)
        if isinstance(result, Failure) and not result.committed:
            return Failure(result.error, committed=True)
        return result
    return parse


def context(label: str, parser: ParserFn) -> ParserFn:
    """
    Name a production in diagnostics.

    On failure, a frame holding ``label`` and the offset the production
    started at is pushed onto the failure. Successes pass through untouched.
    """
    def parse(cursor: Cursor) -> ParseResult:
        result = parser(cursor)
        if isinstance(result, Failure):
            return Failure(result.error.push(label, cursor.offset), result.committed)
        return result
    return parse
