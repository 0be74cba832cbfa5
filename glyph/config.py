"""
Glyph Configuration
===================
Resource limits and numeric width for one evaluation.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

ENV_MAX_DEPTH = "GLYPH_MAX_DEPTH"
ENV_INT_BITS = "GLYPH_INT_BITS"


@dataclass(frozen=True)
class GlyphConfig:
    """Configuration shared by the parser and the evaluator.

    Only populate the fields you need to change; the defaults match the
    behaviour of a 32-bit build of the reference interpreter.
    """

    max_depth: int = 100        # Deepest nesting accepted by parser and evaluator
    int_bits: int = 32          # Width of the signed, wrapping integer type

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GlyphConfig:
        """Build a config from GLYPH_* environment variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        kwargs = {}
        if environ.get(ENV_MAX_DEPTH):
            kwargs["max_depth"] = _parse_int(ENV_MAX_DEPTH, environ[ENV_MAX_DEPTH])
        if environ.get(ENV_INT_BITS):
            kwargs["int_bits"] = _parse_int(ENV_INT_BITS, environ[ENV_INT_BITS])
        return cls(**kwargs)

    def wrap(self, value: int) -> int:
        """Reduce an integer to the configured two's-complement range."""
        modulus = 1 << self.int_bits
        value &= modulus - 1
        if value >= modulus >> 1:
            value -= modulus
        return value


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


DEFAULT_CONFIG = GlyphConfig()
