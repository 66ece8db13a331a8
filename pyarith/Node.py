from dataclasses import dataclass

from .SyntaxKind import SyntaxKind


@dataclass(frozen=True)
class Node:
    """Base class for AST nodes."""
    pass


@dataclass(frozen=True)
class Literal(Node):
    kind: SyntaxKind
    value: int
    raw: str


@dataclass(frozen=True)
class Expr(Node):
    kind: SyntaxKind
    left: Node
    op: SyntaxKind
    right: Node
