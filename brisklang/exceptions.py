"""Errors.

Parse failures are plain values while parsing is in progress: combinators
return them, decorate them with context frames and compare them, but never
raise them. Only the public entry points turn a final failure into a
:class:`ParseError`.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Optional, Union

from brisklang.cursor import line_col


@dataclass(frozen=True)
class ExpectedLiteral:
    """
    A literal token or keyword did not match.
    """
    token: str

    def describe(self) -> str:
        return f"expected '{self.token}'"


@dataclass(frozen=True)
class ExpectedPattern:
    """
    A character class (identifier, number, ...) did not match.
    """
    description: str

    def describe(self) -> str:
        return f"expected {self.description}"


@dataclass(frozen=True)
class UnexpectedEndOfInput:
    """
    Input ended where more text was required.
    """
    description: str

    def describe(self) -> str:
        return f"unexpected end of input, expected {self.description}"


@dataclass(frozen=True)
class UnterminatedBlock:
    """
    Input ended inside a brace-delimited block.
    """

    def describe(self) -> str:
        return "unterminated block, expected '}'"


@dataclass(frozen=True)
class NestingTooDeep:
    """
    Blocks or expressions nest deeper than the interpreter stack allows.
    """

    def describe(self) -> str:
        return "nesting too deep"


@dataclass(frozen=True)
class AllAlternativesFailed:
    """
    Every alternative failed; ``best`` is the cause that got furthest.
    """
    best: 'Cause'
    attempts: int

    def describe(self) -> str:
        return self.best.describe()

    @property
    def root(self) -> 'Cause':
        """
        The underlying cause with any alternation wrappers removed.
        """
        cause = self.best
        while isinstance(cause, AllAlternativesFailed):
            cause = cause.best
        return cause


Cause = Union[
    ExpectedLiteral,
    ExpectedPattern,
    UnexpectedEndOfInput,
    UnterminatedBlock,
    NestingTooDeep,
    AllAlternativesFailed,
]


@dataclass(frozen=True)
class Frame:
    """
    A labeled production and the offset at which it started.
    """
    label: str
    offset: int


@dataclass(frozen=True)
class ParseFailure:
    """
    Why and where a parse failed.

    ``offset`` is where the cause was detected, i.e. how far the failing
    production got. ``frames`` are ordered innermost first.
    """
    cause: Cause
    offset: int
    frames: tuple = ()

    def push(self, label: str, offset: int) -> 'ParseFailure':
        """
        Return a copy with an outer context frame added.
        """
        return ParseFailure(self.cause, self.offset, self.frames + (Frame(label, offset),))

    @property
    def innermost(self) -> Optional[Frame]:
        return self.frames[0] if self.frames else None

    @property
    def outermost(self) -> Optional[Frame]:
        return self.frames[-1] if self.frames else None

    @property
    def labels(self) -> list[str]:
        """
        Frame labels, outermost first.
        """
        return [frame.label for frame in reversed(self.frames)]

    def render(self) -> str:
        """
        Format the failure as a breadcrumb trail.

        Example:
            ``block: statement: continue_statement: expected ';' at offset 12``
        """
        trail = "".join(f"{label}: " for label in self.labels)
        return f"{trail}{self.cause.describe()} at offset {self.offset}"


class ParseError(SyntaxError):
    """
    Raised by the public entry points when source text cannot be parsed.

    The location lives in ``file``, ``line`` and ``column`` and in the message.
    The ``SyntaxError`` location fields stay unset, since ``str()`` would
    otherwise repeat it.
    """
    def __init__(self, failure: ParseFailure, source: str, file: str = "<input>"):
        self.failure = failure
        self.file = file
        line, column = line_col(source, failure.offset)
        self.line = line
        self.column = column
        super().__init__(f"{failure.render()} (line {line}, column {column}) in {file}")
