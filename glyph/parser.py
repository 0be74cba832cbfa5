"""
Glyph Parser
============
Recursive-descent parser that builds an expression tree directly from a
Cursor. There is no separate tokenization pass: ``parse_expression`` pulls
characters as it needs them.

Grammar, by leading character:

    expr ::= "_"
           | "(" op expr expr ")"          op ∈ + - * ^
           | "(" "%" expr expr ")"         next char after % is not "("
           | "(" "%" expr expr expr ")"    next char after % is "("
           | "(" ":" expr expr expr ")"

The choice between modulo and conditional after ``%`` is made by peeking
at a single character, so a modulo whose left operand opens with "(" is
read as a conditional.
"""
from __future__ import annotations

import logging

from .alphabet import validate
from .config import DEFAULT_CONFIG, GlyphConfig
from .cursor import END, Cursor
from .errors import (
    DepthExceeded, InvalidExpressionStart, UnexpectedCharacter, UnexpectedEndOfInput,
)
from .nodes import BinaryOp, Conditional, Expression, Let, Literal

logger = logging.getLogger(__name__)

PLAIN_OPERATORS = frozenset("+-*^")


class Parser:
    """
    Recursive-descent parser for Glyph source.

    Usage:
        parser = Parser(source)
        tree = parser.parse()

    ``parse`` validates the alphabet, reads exactly one expression and
    rejects anything left over. ``parse_expression`` reads one expression
    from the current position and leaves the cursor after it.
    """

    def __init__(self, source: str, config: GlyphConfig | None = None):
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.cursor = Cursor(source)
        self._depth = 0

    def parse(self) -> Expression:
        """Parse the whole source as a single expression."""
        validate(self.source)
        tree = self.parse_expression()
        if not self.cursor.at_end():
            raise UnexpectedCharacter(self.cursor.peek(), self.cursor.pos, expected="end of input")
        logger.debug("parsed %r into %s", self.source, tree.node_type)
        return tree

    def parse_expression(self) -> Expression:
        """Read one expression from the current position."""
        try:
            return self._parse_nested()
        except RecursionError:
            raise DepthExceeded.stack_limit(self.config.max_depth, self.cursor.pos) from None

    def _parse_nested(self) -> Expression:
        self._depth += 1
        try:
            if self._depth > self.config.max_depth:
                raise DepthExceeded(self.config.max_depth, self.cursor.pos)
            return self._parse_expression()
        finally:
            self._depth -= 1

    # ─────────────────────────────────────────────────────────
    #  Expression forms
    # ─────────────────────────────────────────────────────────

    def _parse_expression(self) -> Expression:
        start = self.cursor.pos
        ch = self.cursor.peek()

        if ch is END:
            raise UnexpectedEndOfInput(start)

        if ch == "_":
            self.cursor.consume()
            return Literal(pos=start)

        if ch == "(":
            self.cursor.consume()
            return self._parse_compound(start)

        raise UnexpectedCharacter(ch, start)

    def _parse_compound(self, start: int) -> Expression:
        """Parse what follows an opening parenthesis."""
        head = self.cursor.peek()

        if head in PLAIN_OPERATORS:
            op = self.cursor.consume()
            left, right = self._parse_operands(2)
            return BinaryOp(op=op, left=left, right=right, pos=start)

        if head == "%":
            self.cursor.consume()
            if self.cursor.peek() == "(":
                condition, then, otherwise = self._parse_operands(3)
                return Conditional(condition=condition, then=then, otherwise=otherwise, pos=start)
            left, right = self._parse_operands(2)
            return BinaryOp(op="%", left=left, right=right, pos=start)

        if head == ":":
            self.cursor.consume()
            name, value, body = self._parse_operands(3)
            return Let(name=name, value=value, body=body, pos=start)

        raise InvalidExpressionStart(head, self.cursor.pos)

    def _parse_operands(self, count: int) -> list[Expression]:
        """Parse ``count`` sub-expressions followed by the closing parenthesis."""
        operands = [self._parse_nested() for _ in range(count)]
        self.cursor.expect(")")
        return operands


def parse(source: str, config: GlyphConfig | None = None) -> Expression:
    """Validate and parse ``source`` into an expression tree."""
    return Parser(source, config).parse()
