"""
Glyph Evaluator
===============
Tree-walking evaluation of an expression under an environment.

A pure function of (tree, environment): operands are evaluated left to
right before their operator is applied, ``Let`` evaluates its body under an
extended environment, and ``Conditional`` evaluates exactly one branch.
Every arithmetic result wraps to the configured signed integer width.
"""
from __future__ import annotations

from .config import DEFAULT_CONFIG, GlyphConfig
from .environment import Environment
from .errors import DepthExceeded, GlyphArithmeticError, UnboundVariable
from .nodes import BinaryOp, Conditional, Expression, Let, Literal, VariableRef


class Evaluator:
    """
    Evaluates expression trees.

    Usage:
        value = Evaluator(config).evaluate(tree, Environment.empty())
    """

    def __init__(self, config: GlyphConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self._depth = 0

    def evaluate(self, node: Expression, env: Environment) -> int:
        """Evaluate ``node`` under ``env``."""
        try:
            return self._evaluate(node, env)
        except RecursionError:
            raise DepthExceeded.stack_limit(self.config.max_depth, node.pos) from None

    def _evaluate(self, node: Expression, env: Environment) -> int:
        method = f"_eval_{node.node_type.lower()}"
        evaluator = getattr(self, method, None)
        if evaluator is None:
            raise TypeError(f"Unknown node type: {node.node_type}")

        self._depth += 1
        try:
            if self._depth > self.config.max_depth:
                raise DepthExceeded(self.config.max_depth, node.pos)
            return evaluator(node, env)
        finally:
            self._depth -= 1

    # ─────────────────────────────────────────────────────────
    #  Leaves
    # ─────────────────────────────────────────────────────────

    def _eval_literal(self, node: Literal, env: Environment) -> int:
        return 1

    def _eval_variableref(self, node: VariableRef, env: Environment) -> int:
        try:
            return env.lookup(node.key)
        except UnboundVariable:
            raise UnboundVariable(node.key, node.pos) from None

    # ─────────────────────────────────────────────────────────
    #  Operators
    # ─────────────────────────────────────────────────────────

    def _eval_binaryop(self, node: BinaryOp, env: Environment) -> int:
        left = self._evaluate(node.left, env)
        right = self._evaluate(node.right, env)

        match node.op:
            case "+":
                result = left + right
            case "-":
                result = left - right
            case "*":
                result = left * right
            case "^":
                result = self._power(left, right)
            case "%":
                result = self._remainder(left, right, node)
            case _:
                raise ValueError(f"Unknown operator: {node.op!r}")
        return self.config.wrap(result)

    def _power(self, base: int, exponent: int) -> int:
        """``base`` multiplied by itself ``exponent`` times; 1 for exponent <= 0."""
        if exponent <= 0:
            return 1
        return pow(base, exponent, 1 << self.config.int_bits)

    @staticmethod
    def _remainder(left: int, right: int, node: BinaryOp) -> int:
        """Truncating remainder: the sign follows the dividend."""
        if right == 0:
            raise GlyphArithmeticError(f"Modulo by zero: {left} % 0", node.pos)
        remainder = abs(left) % abs(right)
        return -remainder if left < 0 else remainder

    # ─────────────────────────────────────────────────────────
    #  Binding & Control
    # ─────────────────────────────────────────────────────────

    def _eval_let(self, node: Let, env: Environment) -> int:
        value = self._evaluate(node.value, env)
        key = self._evaluate(node.name, env)
        return self._evaluate(node.body, env.extend(key, value))

    def _eval_conditional(self, node: Conditional, env: Environment) -> int:
        if self._evaluate(node.condition, env) == 0:
            return self._evaluate(node.otherwise, env)
        return self._evaluate(node.then, env)


def evaluate(node: Expression, env: Environment | None = None,
             config: GlyphConfig | None = None) -> int:
    """Evaluate ``node`` under ``env`` (empty if omitted)."""
    if env is None:
        env = Environment.empty()
    return Evaluator(config).evaluate(node, env)
