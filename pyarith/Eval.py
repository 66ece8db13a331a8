from .Node import Node
from .Visitor import Visitor


def _div(x: int, y: int) -> int:
    # Integer division truncating toward zero
    if y == 0:
        raise ZeroDivisionError(f"division by zero in `{x} / {y}`")
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


class Evaluator(Visitor[int]):
    """Computes the integer value of an expression tree."""

    def eval(self, node: Node) -> int:
        return self.visit(node)

    def visit_literal(self, value: int, raw: str) -> int:
        return value

    def visit_expr(self, left: Node, op: str, right: Node) -> int:
        #        1 + 2 + 3
        #
        #            +
        #          /   \
        #         +     3
        #        / \
        #       1   2
        x = self.visit(left)
        y = self.visit(right)
        if op == "+":
            return x + y
        if op == "-":
            return x - y
        if op == "*":
            return x * y
        if op == "/":
            return _div(x, y)
        raise ValueError(f"unexpected operator: {op}")


def eval_ast(root: Node) -> int:
    """Evaluate an expression tree."""
    return Evaluator().eval(root)
