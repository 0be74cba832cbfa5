"""
Glyph REPL
==========
Interactive Read-Eval-Print Loop for the Glyph language.
Each line is evaluated on its own; nothing carries over between lines.
"""
import argparse
import dataclasses
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from glyph.alphabet import describe_all
from glyph.config import GlyphConfig
from glyph.demo import DEMO_PROGRAMS
from glyph.diagnostics import format_error
from glyph.interpreter import Interpreter


BANNER = r"""
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║     _ ─── GLYPH ─── _                                        ║
║                                                              ║
║     Valid characters:  ( ) + - * ^ % _ :                     ║
║     Type 'help' for the symbol reference, 'demo' for samples ║
║     Type 'exit' or Ctrl+C to quit                            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

HELP_TEXT = """
Examples:
  _                        ⟹ 1
  (+__)                    ⟹ 2
  (^(+__)(+__))            ⟹ 4
  (%(-__)(+__)(+(+__)_))   ⟹ 3   (condition 0 takes the else branch)

Commands: help, demo, exit
"""

EXIT_COMMANDS = ("exit", "quit", "q")


def build_config(args: argparse.Namespace) -> GlyphConfig:
    """Environment defaults, overridden by any command-line flags given."""
    config = GlyphConfig.from_env()
    overrides = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.int_bits is not None:
        overrides["int_bits"] = args.int_bits
    return dataclasses.replace(config, **overrides)


def add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--max-depth", type=int, default=None,
                        help="maximum nesting depth (default: $GLYPH_MAX_DEPTH or 100)")
    parser.add_argument("--int-bits", type=int, default=None,
                        help="signed integer width (default: $GLYPH_INT_BITS or 32)")
    parser.add_argument("--no-color", action="store_true", help="disable coloured errors")
    parser.add_argument("-v", "--verbose", action="store_true", help="log pipeline stages")


def print_demo(interp: Interpreter, color: bool = True) -> bool:
    """Run every demo program; return True if all produced their expected value."""
    ok = True
    for demo in DEMO_PROGRAMS:
        result = interp.evaluate(demo.source)
        print(f"  Program: {demo.source}")
        print(f"    Desc: {demo.description}")
        if result.success:
            print(f"    Result: {result.value}")
            ok = ok and result.value == demo.expected
        else:
            print("    " + format_error(demo.source, result.error, color).replace("\n", "\n    "))
            ok = False
        print()
    return ok


def run_repl(interp: Interpreter, color: bool = True):
    """Run the interactive Glyph REPL."""
    print(BANNER)

    while True:
        try:
            line = input("  _⟩ ")
        except (EOFError, KeyboardInterrupt):
            print("\n  Goodbye.")
            break

        if not line:
            continue

        command = line.strip().lower()
        if command in EXIT_COMMANDS:
            print("  Goodbye.")
            break

        if command == "help":
            print(describe_all())
            print(HELP_TEXT)
            continue

        if command == "demo":
            print_demo(interp, color)
            continue

        result = interp.evaluate(line)
        if result.success:
            print(f"  ⟹ {result.value}")
        else:
            print("  " + format_error(line, result.error, color))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive Glyph interpreter")
    add_common_arguments(parser)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    run_repl(Interpreter(config), color=not args.no_color)


if __name__ == "__main__":
    main()
