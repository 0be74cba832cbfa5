"""
Glyph File Runner
=================
Evaluate Glyph programs from a file, one program per line.

Usage:
    python run.py <programs.glyph>
    python run.py --demo
    python run.py <programs.glyph> --max-depth 50 --no-color
"""
import argparse
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from glyph.diagnostics import format_error
from glyph.interpreter import Interpreter
from repl import add_common_arguments, build_config, print_demo


def run_file(filepath: str, interp: Interpreter, color: bool = True) -> int:
    """
    Evaluate every non-empty line of a file.

    Args:
        filepath: Path to the source file
        interp: Interpreter to evaluate each line with
        color: Colour error diagnostics

    Returns:
        0 if every line evaluated, 1 otherwise
    """
    if not os.path.exists(filepath):
        print(f"Error: File not found: {filepath}")
        return 1

    with open(filepath, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    failures = 0
    for line_num, line in enumerate(lines, start=1):
        if not line:
            continue
        result = interp.evaluate(line)
        if result.success:
            print(f"{line} ⟹ {result.value}")
        else:
            failures += 1
            print(f"{os.path.basename(filepath)}:{line_num}: " + format_error(line, result.error, color))

    return 1 if failures else 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run Glyph programs, one per line")
    parser.add_argument("file", nargs="?", help="file of Glyph programs")
    parser.add_argument("--demo", action="store_true", help="run the built-in demo programs")
    add_common_arguments(parser)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    interp = Interpreter(config)
    color = not args.no_color

    if args.demo:
        return 0 if print_demo(interp, color) else 1
    if args.file is None:
        parser.error("a file is required unless --demo is given")
    return run_file(args.file, interp, color)


if __name__ == "__main__":
    sys.exit(main())
