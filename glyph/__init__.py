"""
Glyph: a nine-symbol prefix expression language.

    ( ) + - * ^ % _ :

One line of source in, one integer (or one error) out.
"""
from .alphabet import ALPHABET, SYMBOL_REGISTRY, SymbolInfo, validate
from .config import GlyphConfig
from .cursor import Cursor
from .environment import Environment
from .errors import (
    GlyphError, GlyphSyntaxError, EvalError,
    InvalidCharacter, UnexpectedEndOfInput, UnexpectedCharacter, InvalidExpressionStart,
    UnboundVariable, GlyphArithmeticError, DepthExceeded,
)
from .evaluator import Evaluator, evaluate
from .interpreter import Interpreter, Result, evaluate_program
from .nodes import Expression, Literal, VariableRef, BinaryOp, Let, Conditional
from .parser import Parser, parse

__version__ = "0.1.0"
__all__ = [
    "ALPHABET", "SYMBOL_REGISTRY", "SymbolInfo", "validate",
    "GlyphConfig",
    "Cursor",
    "Environment",
    "GlyphError", "GlyphSyntaxError", "EvalError",
    "InvalidCharacter", "UnexpectedEndOfInput", "UnexpectedCharacter",
    "InvalidExpressionStart",
    "UnboundVariable", "GlyphArithmeticError", "DepthExceeded",
    "Evaluator", "evaluate",
    "Interpreter", "Result", "evaluate_program",
    "Expression", "Literal", "VariableRef", "BinaryOp", "Let", "Conditional",
    "Parser", "parse",
]
