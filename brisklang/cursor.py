"""Input cursor for brisk source text.

A :class:`Cursor` is an immutable view over the remaining source text. It
keeps a reference to the whole buffer plus an offset, so advancing never
copies the text and an old cursor is always still valid. Every parsing
function receives a cursor and, on success, hands back a new one.


File: cursor.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cursor:
    """
    Position within a source buffer.
    """
    source: str
    offset: int = 0

    def __post_init__(self):
        if not 0 <= self.offset <= len(self.source):
            raise ValueError(
                f"Offset {self.offset} is outside the source (length {len(self.source)})"
            )

    @property
    def rest(self) -> str:
        """
        Remaining, unconsumed text.
        """
        return self.source[self.offset:]

    @property
    def at_end(self) -> bool:
        """
        True when no input remains.
        """
        return self.offset >= len(self.source)

    def startswith(self, text: str) -> bool:
        """
        Check whether the remaining text begins with ``text``.
        """
        return self.source.startswith(text, self.offset)

    def peek(self, n: int = 1) -> str:
        """
        Return up to ``n`` characters without consuming them.
        """
        return self.source[self.offset:self.offset + n]

    def advance(self, n: int) -> 'Cursor':
        """
        Return a new cursor ``n`` characters further on.

        Parameters:
            n (int): Number of characters to consume.

        Raises:
            ValueError: If ``n`` is negative or runs past the end of input.
        """
        if n < 0:
            raise ValueError("A cursor cannot move backwards")
        return Cursor(self.source, self.offset + n)

    def line_col(self) -> tuple[int, int]:
        """
        Return the 1-based line and column of the cursor.
        """
        return line_col(self.source, self.offset)

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, rest={self.peek(16)!r})"


def line_col(source: str, offset: int) -> tuple[int, int]:
    """
    Translate a character offset into a 1-based (line, column) pair.
    """
    line = source.count("\n", 0, offset) + 1
    last_newline = source.rfind("\n", 0, offset)
    return line, offset - last_newline
