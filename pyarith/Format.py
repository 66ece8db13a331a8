from .Node import Expr, Node
from .SyntaxKind import SyntaxKind
from .Visitor import Visitor


def _priority(node: Expr) -> int:
    return SyntaxKind.op_priority(node.op.text)


def _is_product(node: Node) -> bool:
    """True if the node prints as a chain of '*' with no other top level operator."""
    # Right operands of '*' that are not products get wrapped, so only the
    # left spine decides.
    while isinstance(node, Expr) and _priority(node) == 2:
        if node.op != SyntaxKind.STAR:
            return False
        node = node.left
    return True


class Formatter(Visitor[str]):
    """
    Prints an expression tree back as text, with single spaces around
    operators and only the parentheses needed to keep its meaning.
    """

    def format(self, node: Node) -> str:
        return self.visit(node)

    def visit_literal(self, value: int, raw: str) -> str:
        return raw

    def visit_expr(self, left: Node, op: str, right: Node) -> str:
        lhs = self.visit(left)
        if self._wrap_left(op, left):
            lhs = f"({lhs})"
        rhs = self.visit(right)
        # `1 + -2 + 3` would read back as `(1 + -2) + 3`.
        if self._wrap_right(op, right) or rhs.startswith("-"):
            rhs = f"({rhs})"
        return f"{lhs} {op} {rhs}"

    @staticmethod
    def _wrap_left(op: str, left: Node) -> bool:
        return isinstance(left, Expr) and _priority(left) < SyntaxKind.op_priority(op)

    @staticmethod
    def _wrap_right(op: str, right: Node) -> bool:
        if not isinstance(right, Expr):
            return False
        current = SyntaxKind.op_priority(op)
        if _priority(right) != current:
            return _priority(right) < current
        # Same priority: `a + (b - c)` and `a * (b * c)` regroup exactly,
        # anything under '-' or '/' does not.
        if op == "+":
            return False
        if op == "*":
            return not _is_product(right)
        return True


def format_ast(root: Node) -> str:
    """Print an expression tree in canonical form."""
    return Formatter().format(root)
