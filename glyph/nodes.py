"""
Glyph Expression Tree
=====================
The closed set of expression variants produced by the Parser.

Each node owns its children outright: the tree is never shared and never
cyclic. ``pos`` is the offset of the node's first character in the source
(0 for nodes built by hand).
"""
from dataclasses import dataclass, field


@dataclass
class Expression:
    """Base class for all expression nodes."""
    node_type: str = field(default="", init=False)
    pos: int = field(default=0, kw_only=True)

    def children(self) -> tuple["Expression", ...]:
        return ()

    def depth(self) -> int:
        """Nesting depth of the tree rooted here (a leaf has depth 1)."""
        return 1 + max((child.depth() for child in self.children()), default=0)

    def to_source(self) -> str:
        raise NotImplementedError


@dataclass
class Literal(Expression):
    """The unit value ``_``."""

    def __post_init__(self):
        self.node_type = "Literal"

    def to_source(self) -> str:
        return "_"


@dataclass
class VariableRef(Expression):
    """A lookup of an integer key in the environment.

    The grammar has no syntax for this node; it exists for trees built
    programmatically.
    """
    key: int = 0

    def __post_init__(self):
        self.node_type = "VariableRef"

    def to_source(self) -> str:
        raise ValueError(f"VariableRef({self.key}) has no source form")


@dataclass(kw_only=True)
class BinaryOp(Expression):
    """An operator applied to two operands: (op left right)."""
    op: str
    left: Expression
    right: Expression

    def __post_init__(self):
        self.node_type = "BinaryOp"

    def children(self):
        return (self.left, self.right)

    def to_source(self) -> str:
        return f"({self.op}{self.left.to_source()}{self.right.to_source()})"


@dataclass(kw_only=True)
class Let(Expression):
    """A binding: (: name value body). ``name`` is itself an expression."""
    name: Expression
    value: Expression
    body: Expression

    def __post_init__(self):
        self.node_type = "Let"

    def children(self):
        return (self.name, self.value, self.body)

    def to_source(self) -> str:
        return f"(:{self.name.to_source()}{self.value.to_source()}{self.body.to_source()})"


@dataclass(kw_only=True)
class Conditional(Expression):
    """(% condition then otherwise): ``otherwise`` when condition is 0."""
    condition: Expression
    then: Expression
    otherwise: Expression

    def __post_init__(self):
        self.node_type = "Conditional"

    def children(self):
        return (self.condition, self.then, self.otherwise)

    def to_source(self) -> str:
        return (f"(%{self.condition.to_source()}"
                f"{self.then.to_source()}{self.otherwise.to_source()})")
