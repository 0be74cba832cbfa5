"""
Tests for the Glyph drivers
===========================
Diagnostics rendering, the file runner and the REPL loop.

Usage:
    python -m pytest tests/test_drivers.py -v
"""
import argparse
import sys
import os
import io
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from glyph.diagnostics import diagnose, format_error
from glyph.interpreter import Interpreter, evaluate_program
import repl
import run


# ─────────────────────────────────────────────
#  Diagnostics Tests
# ─────────────────────────────────────────────

class TestDiagnostics(unittest.TestCase):

    def test_caret_under_offending_character(self):
        text = diagnose("(+_x_)", 3, color=False)
        self.assertEqual(text, "  (+_x_)\n     ^")

    def test_caret_past_end(self):
        text = diagnose("(+__", 4, color=False)
        self.assertEqual(text, "  (+__\n      ^")

    def test_syntax_error_format(self):
        error = evaluate_program("(+_x_)").error
        text = format_error("(+_x_)", error, color=False)
        self.assertTrue(text.startswith("syntax error: InvalidCharacter: "))
        self.assertTrue(text.endswith("\n     ^"))

    def test_eval_error_format(self):
        error = evaluate_program("(%_(-__))").error
        text = format_error("(%_(-__))", error, color=False)
        self.assertTrue(text.startswith("error: GlyphArithmeticError: Modulo by zero"))

    def test_colored_output_keeps_text(self):
        error = evaluate_program("(+__").error
        self.assertIn("UnexpectedEndOfInput", format_error("(+__", error, color=True))


# ─────────────────────────────────────────────
#  File Runner Tests
# ─────────────────────────────────────────────

class TestRunFile(unittest.TestCase):

    def _write(self, text: str) -> str:
        handle = tempfile.NamedTemporaryFile("w", suffix=".glyph", delete=False, encoding="utf-8")
        with handle:
            handle.write(text)
        self.addCleanup(os.remove, handle.name)
        return handle.name

    def test_all_lines_succeed(self):
        path = self._write("_\n\n(+__)\n")
        out = io.StringIO()
        with redirect_stdout(out):
            code = run.run_file(path, Interpreter(), color=False)
        self.assertEqual(code, 0)
        self.assertIn("(+__) ⟹ 2", out.getvalue())

    def test_failing_line_reports_location(self):
        path = self._write("_\n(+__\n")
        out = io.StringIO()
        with redirect_stdout(out):
            code = run.run_file(path, Interpreter(), color=False)
        self.assertEqual(code, 1)
        self.assertIn(f"{os.path.basename(path)}:2: syntax error: UnexpectedEndOfInput", out.getvalue())

    def test_missing_file(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = run.run_file("/nonexistent/programs.glyph", Interpreter())
        self.assertEqual(code, 1)
        self.assertIn("File not found", out.getvalue())

    def test_demo(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = run.main(["--demo", "--no-color"])
        self.assertEqual(code, 0)
        self.assertIn("Result: 4", out.getvalue())

    def test_flags_override_config(self):
        args = argparse.Namespace(max_depth=3, int_bits=None)
        with patch.dict(os.environ, {"GLYPH_INT_BITS": "16"}):
            config = repl.build_config(args)
        self.assertEqual(config.max_depth, 3)
        self.assertEqual(config.int_bits, 16)


# ─────────────────────────────────────────────
#  REPL Tests
# ─────────────────────────────────────────────

class TestRepl(unittest.TestCase):

    def _session(self, *lines: str) -> str:
        out = io.StringIO()
        with patch("builtins.input", side_effect=[*lines, EOFError()]), redirect_stdout(out):
            repl.run_repl(Interpreter(), color=False)
        return out.getvalue()

    def test_evaluates_lines(self):
        output = self._session("(+__)", "", "(^(+__)(+__))", "quit")
        self.assertIn("⟹ 2", output)
        self.assertIn("⟹ 4", output)
        self.assertIn("Goodbye", output)

    def test_reports_errors_and_continues(self):
        output = self._session("(+ __)", "_", "exit")
        self.assertIn("InvalidCharacter", output)
        self.assertIn("⟹ 1", output)

    def test_help_and_demo(self):
        output = self._session("help", "demo", "q")
        self.assertIn("Commands: help, demo, exit", output)
        self.assertIn("Program: (:___)", output)

    def test_eof_exits(self):
        output = self._session()
        self.assertIn("Goodbye", output)


if __name__ == "__main__":
    unittest.main()
