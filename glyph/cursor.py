"""
Glyph Cursor
============
A single-pass reader over validated source, one character at a time.
Every token in the language is a single character, so the cursor is the
whole lexer: the parser pulls characters from it on demand.
"""
from __future__ import annotations

from .errors import UnexpectedCharacter, UnexpectedEndOfInput

END = None  # Sentinel returned past the end of input


class Cursor:
    """
    Look-ahead-one reader over a source string.

    Usage:
        cursor = Cursor(source)
        ch = cursor.peek()
        cursor.expect(")")
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos >= len(self.source):
            return END
        return self.source[self.pos]

    def consume(self) -> str | None:
        if self.pos >= len(self.source):
            return END
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def expect(self, expected: str) -> str:
        """Consume one character and fail unless it is ``expected``."""
        pos = self.pos
        ch = self.consume()
        if ch is END:
            raise UnexpectedEndOfInput(pos, expected)
        if ch != expected:
            raise UnexpectedCharacter(ch, pos, expected)
        return ch

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def __repr__(self) -> str:
        return f"Cursor({self.source!r}, pos={self.pos})"
