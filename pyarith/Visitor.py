from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .Node import Expr, Literal, Node

T = TypeVar('T')


class Visitor(ABC, Generic[T]):
    """
    Traversal over an AST.

    Subclasses decide what a literal and a binary expression produce; `visit`
    takes care of picking the right method for each node. New traversals are
    added by subclassing, the AST and the parser stay untouched.
    """

    def visit(self, node: Node) -> T:
        if isinstance(node, Literal):
            return self.visit_literal(node.value, node.raw)
        if isinstance(node, Expr):
            return self.visit_expr(node.left, node.op.text, node.right)
        raise TypeError(f"cannot visit {type(node).__name__}")

    @abstractmethod
    def visit_literal(self, value: int, raw: str) -> T:
        """Result for a numeric literal."""

    @abstractmethod
    def visit_expr(self, left: Node, op: str, right: Node) -> T:
        """Result for a binary expression. Must visit `left` before `right`."""
