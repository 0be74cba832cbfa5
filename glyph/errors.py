"""
Glyph Errors
============
The error taxonomy shared by every stage of the pipeline.

    GlyphError
    ├── GlyphSyntaxError        (also a builtin SyntaxError)
    │   ├── InvalidCharacter
    │   ├── UnexpectedEndOfInput
    │   ├── UnexpectedCharacter
    │   └── InvalidExpressionStart
    └── EvalError
        ├── UnboundVariable
        ├── GlyphArithmeticError (also a builtin ZeroDivisionError)
        └── DepthExceeded

Each error carries a ``kind`` (its class name), a human-readable ``detail``
and the character offset ``pos`` it refers to, when one is known.
"""
from __future__ import annotations


class GlyphError(Exception):
    """Base class for every failure the core can report."""

    def __init__(self, detail: str, pos: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.pos = pos

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.pos is None:
            return self.detail
        return f"{self.detail} (at position {self.pos})"


# ─────────────────────────────────────────────────────────────
#  Syntax errors (validation + parsing)
# ─────────────────────────────────────────────────────────────

class GlyphSyntaxError(GlyphError, SyntaxError):
    """Raised before evaluation starts: the source is not a valid program."""


class InvalidCharacter(GlyphSyntaxError):
    """A character outside the nine-symbol alphabet."""

    def __init__(self, char: str, pos: int):
        super().__init__(f"Invalid character: {char!r}", pos)
        self.char = char


class UnexpectedEndOfInput(GlyphSyntaxError):
    """The source ended while an expression was still open."""

    def __init__(self, pos: int, expected: str | None = None):
        detail = "Unexpected end of input"
        if expected is not None:
            detail += f", expected {expected!r}"
        super().__init__(detail, pos)
        self.expected = expected


class UnexpectedCharacter(GlyphSyntaxError):
    """A character that does not fit where the parser found it."""

    def __init__(self, actual: str, pos: int, expected: str | None = None):
        if expected is None:
            detail = f"Unexpected character: {actual!r}"
        else:
            detail = f"Expected {expected!r} but got {actual!r}"
        super().__init__(detail, pos)
        self.actual = actual
        self.expected = expected


class InvalidExpressionStart(GlyphSyntaxError):
    """An opening parenthesis not followed by an operator or ':'."""

    def __init__(self, actual: str | None, pos: int):
        found = "end of input" if actual is None else repr(actual)
        super().__init__(f"Invalid expression starting with '(': found {found}", pos)
        self.actual = actual


# ─────────────────────────────────────────────────────────────
#  Evaluation errors
# ─────────────────────────────────────────────────────────────

class EvalError(GlyphError):
    """Raised while a well-formed program is being evaluated."""


class UnboundVariable(EvalError):
    def __init__(self, key: int, pos: int | None = None):
        super().__init__(f"Unbound variable: {key}", pos)
        self.key = key


class GlyphArithmeticError(EvalError, ZeroDivisionError):
    """Modulo by zero."""


class DepthExceeded(EvalError):
    """Nesting deeper than the configured limit, in the parser or the evaluator."""

    def __init__(self, limit: int, pos: int | None = None, detail: str | None = None):
        super().__init__(detail or f"Maximum nesting depth of {limit} exceeded", pos)
        self.limit = limit

    @classmethod
    def stack_limit(cls, limit: int, pos: int | None = None) -> DepthExceeded:
        """The interpreter stack ran out before the configured limit was reached."""
        return cls(limit, pos, f"Nesting too deep for the interpreter stack "
                               f"(configured limit {limit})")
