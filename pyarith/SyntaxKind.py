import sys
from enum import Enum
from typing import Optional


class SyntaxKind(Enum):
    # node
    NUM = 5
    ADD_EXPR = 6
    SUB_EXPR = 7
    MUL_EXPR = 8
    DIV_EXPR = 9

    # token
    OPEN_PAREN = 100
    CLOSE_PAREN = 101
    PLUS = 102
    MINUS = 103
    STAR = 104
    SLASH = 105

    UNKNOWN = 65534

    @staticmethod
    def from_operator(text: str) -> Optional['SyntaxKind']:
        """Look up the token kind of an operator symbol, or None."""
        return _OPERATORS.get(text)

    @staticmethod
    def op_priority(text: str) -> int:
        """Binding strength of an operator symbol; higher binds tighter."""
        if text in ("*", "/"):
            return 2
        if text in ("+", "-"):
            return 1
        return sys.maxsize

    @property
    def text(self) -> str:
        return _SYMBOLS.get(self, "unknown")

    @property
    def expr_kind(self) -> 'SyntaxKind':
        """Node kind produced by a binary operator token."""
        return _EXPR_KINDS.get(self, SyntaxKind.UNKNOWN)

    def is_operator(self) -> bool:
        return self in _SYMBOLS


_OPERATORS = {
    "(": SyntaxKind.OPEN_PAREN,
    ")": SyntaxKind.CLOSE_PAREN,
    "+": SyntaxKind.PLUS,
    "-": SyntaxKind.MINUS,
    "*": SyntaxKind.STAR,
    "/": SyntaxKind.SLASH,
}

_SYMBOLS = {kind: text for text, kind in _OPERATORS.items()}

_EXPR_KINDS = {
    SyntaxKind.PLUS: SyntaxKind.ADD_EXPR,
    SyntaxKind.MINUS: SyntaxKind.SUB_EXPR,
    SyntaxKind.STAR: SyntaxKind.MUL_EXPR,
    SyntaxKind.SLASH: SyntaxKind.DIV_EXPR,
}
