"""
Glyph Diagnostics
=================
Renders a GlyphError against the source it came from, with the offending
character highlighted and a caret underneath.
"""
from __future__ import annotations

from termcolor import colored

from .errors import GlyphError, GlyphSyntaxError

ERROR = "red"


def _paint(text: str, color: bool, *, fg: str | None = None) -> str:
    if not color:
        return text
    return colored(text, fg, attrs=["bold"])


def diagnose(source: str, pos: int, color: bool = True) -> str:
    """Return ``source`` with position ``pos`` highlighted and a caret below it."""
    end = min(pos + 1, len(source))
    line = "  " + source[:pos]
    line += _paint(source[pos:end], color, fg=ERROR)
    line += source[end:] + "\n"
    line += "  " + " " * pos + _paint("^", color, fg=ERROR)
    return line


def format_error(source: str, error: GlyphError, color: bool = True) -> str:
    """Format an error as a headline, plus the caret diagnosis when it has a position."""
    label = "syntax error" if isinstance(error, GlyphSyntaxError) else "error"
    message = _paint(f"{label}: ", color, fg=ERROR) + f"{error.kind}: {error.detail}"
    if error.pos is None:
        return message
    return message + "\n" + diagnose(source, error.pos, color)
