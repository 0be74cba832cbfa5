"""
Glyph Alphabet
==============
The nine symbols of the language and the validator that enforces them.
No character is insignificant: whitespace is rejected like anything else.
"""
from dataclasses import dataclass
from enum import Enum, auto
import logging

from .errors import InvalidCharacter

logger = logging.getLogger(__name__)


class SymbolRole(Enum):
    """What a symbol does in the grammar."""
    GROUP     = auto()  # ( )
    OPERATOR  = auto()  # + - * ^ %
    UNIT      = auto()  # _
    BIND      = auto()  # :


@dataclass(frozen=True)
class SymbolInfo:
    """
    One symbol of the alphabet.

      - symbol:  The character itself
      - name:    Human-readable name
      - role:    Grammatical role
      - arity:   Sub-expressions taken after the symbol inside ( ), 0 if none
      - meaning: Short description for the REPL reference
    """
    symbol: str
    name: str
    role: SymbolRole
    arity: int
    meaning: str


# ─────────────────────────────────────────────────────────────
#  THE SYMBOL REGISTRY
# ─────────────────────────────────────────────────────────────

SYMBOL_REGISTRY: dict[str, SymbolInfo] = {
    "(": SymbolInfo("(", "Open", SymbolRole.GROUP, 0, "Starts a compound expression"),
    ")": SymbolInfo(")", "Close", SymbolRole.GROUP, 0, "Ends a compound expression"),
    "+": SymbolInfo("+", "Add", SymbolRole.OPERATOR, 2, "(+ a b) = a + b"),
    "-": SymbolInfo("-", "Subtract", SymbolRole.OPERATOR, 2, "(- a b) = a - b"),
    "*": SymbolInfo("*", "Multiply", SymbolRole.OPERATOR, 2, "(* a b) = a * b"),
    "^": SymbolInfo("^", "Power", SymbolRole.OPERATOR, 2, "(^ a b) = a ** b, 1 if b <= 0"),
    "%": SymbolInfo("%", "Modulo / If", SymbolRole.OPERATOR, 2,
                    "(% a b) remainder; (%(c) t e) if-else"),
    "_": SymbolInfo("_", "Unit", SymbolRole.UNIT, 0, "The value 1"),
    ":": SymbolInfo(":", "Let", SymbolRole.BIND, 3, "(: name value body)"),
}

ALPHABET = frozenset(SYMBOL_REGISTRY)


def validate(source: str) -> str:
    """Reject the source if any character lies outside the alphabet.

    Returns the source unchanged so the call can be chained.
    """
    for pos, ch in enumerate(source):
        if ch not in ALPHABET:
            raise InvalidCharacter(ch, pos)
    logger.debug("validated %d characters", len(source))
    return source


def lookup(symbol: str) -> SymbolInfo | None:
    """Look up a symbol's registry entry."""
    return SYMBOL_REGISTRY.get(symbol)


def describe_all() -> str:
    """Return a formatted table of all symbols for REPL help."""
    lines = [
        "╔════════╦════════════╦══════════════════════════════════════════╗",
        "║ Symbol ║ Name       ║ Meaning                                  ║",
        "╠════════╬════════════╬══════════════════════════════════════════╣",
    ]
    for symbol, info in SYMBOL_REGISTRY.items():
        name = info.name.ljust(10)
        meaning = info.meaning[:40].ljust(40)
        lines.append(f"║   {symbol}    ║ {name} ║ {meaning} ║")
    lines.append("╚════════╩════════════╩══════════════════════════════════════════╝")
    return "\n".join(lines)
