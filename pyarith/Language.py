from dataclasses import dataclass, replace

from .SyntaxKind import SyntaxKind


@dataclass(frozen=True)
class LexerDef:
    """
    Defines the character classes the lexer works with.
    """
    operators: str = "+-*/()"       # every symbol must be a known operator
    whitespace: str = " \t\r\n"     # separates tokens, never kept in token text
    fold_signs: bool = True         # merge a unary '+'/'-' into the next number

    def __post_init__(self):
        unknown = [c for c in self.operators if SyntaxKind.from_operator(c) is None]
        if unknown:
            raise ValueError(f"LexerDef: unsupported operator symbols {''.join(unknown)!r}")
        overlap = set(self.operators) & set(self.whitespace)
        if overlap:
            raise ValueError(f"LexerDef: {''.join(sorted(overlap))!r} cannot be both operator and whitespace")


# The default definition: the four arithmetic operators, parentheses and
# ordinary whitespace, with unary signs folded into literals.
arith_def = LexerDef()

# Only the space character separates tokens.
strict_space_def = replace(arith_def, whitespace=" ")

# Every '+' and '-' stays a separate operator token.
unfolded_def = replace(arith_def, fold_signs=False)
