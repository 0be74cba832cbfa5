"""
Glyph Interpreter
=================
The pipeline a driver talks to: validate → parse → evaluate.

Two entry points share it:
  - ``evaluate_program`` returns a ``Result`` and never raises a GlyphError;
    failures come back as values.
  - ``Interpreter.run`` returns the integer and raises the GlyphError.

Both are stateless between calls: each evaluation builds its own tree and
starts from an empty environment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, GlyphConfig
from .environment import Environment
from .errors import GlyphError
from .evaluator import Evaluator
from .nodes import Expression
from .parser import Parser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """Outcome of one evaluation: exactly one of ``value`` and ``error`` is set."""

    source: str
    value: Optional[int] = None
    error: Optional[GlyphError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str:
        """Error kind, or "ok" for a successful evaluation."""
        return "ok" if self.error is None else self.error.kind

    def unwrap(self) -> int:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value


class Interpreter:
    """
    Runs Glyph programs.

    Usage:
        interp = Interpreter()
        interp.run("(+__)")          # 2
        interp.evaluate("(+__")      # Result(error=UnexpectedEndOfInput(...))
    """

    def __init__(self, config: GlyphConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def parse(self, source: str) -> Expression:
        return Parser(source, self.config).parse()

    def run(self, source: str) -> int:
        tree = self.parse(source)
        value = Evaluator(self.config).evaluate(tree, Environment.empty())
        logger.debug("evaluated %r to %d", source, value)
        return value

    def evaluate(self, source: str) -> Result:
        try:
            return Result(source, value=self.run(source))
        except GlyphError as e:
            logger.debug("evaluation of %r failed: %s: %s", source, e.kind, e)
            return Result(source, error=e)


def evaluate_program(source: str, config: GlyphConfig | None = None) -> Result:
    """Evaluate one line of Glyph source."""
    return Interpreter(config).evaluate(source)
