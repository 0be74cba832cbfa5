"""
Tests for the Glyph Environment and Configuration
==================================================

Usage:
    python -m pytest tests/test_environment.py -v
"""
import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from glyph.config import GlyphConfig
from glyph.environment import Environment
from glyph.errors import UnboundVariable


# ─────────────────────────────────────────────
#  Environment Tests
# ─────────────────────────────────────────────

class TestEnvironment(unittest.TestCase):

    def test_empty(self):
        env = Environment.empty()
        self.assertEqual(len(env), 0)
        self.assertNotIn(1, env)
        self.assertEqual(env.bindings(), {})

    def test_lookup_unbound(self):
        with self.assertRaises(UnboundVariable) as ctx:
            Environment.empty().lookup(3)
        self.assertEqual(ctx.exception.key, 3)
        self.assertIn("3", str(ctx.exception))

    def test_extend_leaves_receiver_untouched(self):
        outer = Environment.empty().extend(1, 10)
        inner = outer.extend(2, 20)
        self.assertEqual(inner.lookup(2), 20)
        self.assertEqual(inner.lookup(1), 10)
        self.assertNotIn(2, outer)
        self.assertEqual(outer.bindings(), {1: 10})

    def test_shadowing(self):
        outer = Environment.empty().extend(1, 10)
        inner = outer.extend(1, 11)
        self.assertEqual(inner.lookup(1), 11)
        self.assertEqual(outer.lookup(1), 10)
        self.assertEqual(inner.bindings(), {1: 11})
        self.assertEqual(len(inner), 2)

    def test_siblings_are_independent(self):
        base = Environment.empty().extend(0, 0)
        left = base.extend(1, 1)
        right = base.extend(2, 2)
        self.assertNotIn(2, left)
        self.assertNotIn(1, right)


# ─────────────────────────────────────────────
#  Config Tests
# ─────────────────────────────────────────────

class TestGlyphConfig(unittest.TestCase):

    def test_defaults(self):
        config = GlyphConfig()
        self.assertEqual(config.max_depth, 100)
        self.assertEqual(config.int_bits, 32)

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            GlyphConfig(max_depth=0)
        with self.assertRaises(ValueError):
            GlyphConfig(int_bits=1)

    def test_from_env(self):
        config = GlyphConfig.from_env({"GLYPH_MAX_DEPTH": "7", "GLYPH_INT_BITS": "16"})
        self.assertEqual(config, GlyphConfig(max_depth=7, int_bits=16))

    def test_from_env_ignores_missing_and_empty(self):
        self.assertEqual(GlyphConfig.from_env({"GLYPH_MAX_DEPTH": ""}), GlyphConfig())

    def test_from_env_rejects_non_integers(self):
        with self.assertRaises(ValueError) as ctx:
            GlyphConfig.from_env({"GLYPH_MAX_DEPTH": "deep"})
        self.assertIn("GLYPH_MAX_DEPTH", str(ctx.exception))

    def test_wrap(self):
        config = GlyphConfig()
        self.assertEqual(config.wrap(5), 5)
        self.assertEqual(config.wrap(-1), -1)
        self.assertEqual(config.wrap(2 ** 31 - 1), 2 ** 31 - 1)
        self.assertEqual(config.wrap(2 ** 31), -(2 ** 31))
        self.assertEqual(config.wrap(2 ** 32 + 5), 5)


if __name__ == "__main__":
    unittest.main()
