from functools import reduce
from typing import List, Optional, Tuple, Union

from .Combinators import between, either, eof
from .Language import LexerDef, arith_def
from .Lexer import LexError, TokenStream, lex
from .Node import Expr, Literal, Node
from .Parsec import Parsec, ParseError
from .Prim import lazy, run_parser, single_token, zero_or_more
from .SyntaxKind import SyntaxKind

OpList = List[Tuple[SyntaxKind, Node]]


def build_expr_node(left: Node, node_list: OpList) -> Node:
    """
    Fold [(op1, n1), (op2, n2), ...] onto `left` so the tree grows to the left:
    ((left op1 n1) op2 n2) ...
    """
    return reduce(lambda acc, pair: Expr(pair[0].expr_kind, acc, pair[0], pair[1]), node_list, left)


def _left_chain(operand: Parsec[Node], op1: SyntaxKind, op2: SyntaxKind) -> Parsec[Node]:
    # Left recursion is unusable top-down, so the tail is collected flat
    # and folded afterwards.
    operator = either(single_token(op1), single_token(op2)).map(lambda tok: tok.kind)
    tail = zero_or_more(operator & operand)
    return operand.and_then(lambda left: tail.map(lambda pairs: build_expr_node(left, pairs)))


# The rules are built once; nested parentheses reach back into `_expr`
# through `lazy` instead of rebuilding the grammar.
_literal = single_token(SyntaxKind.NUM).map(
    lambda tok: Literal(SyntaxKind.NUM, int(tok.text), tok.text))
_factor = either(_literal,
                 between(single_token(SyntaxKind.OPEN_PAREN),
                         single_token(SyntaxKind.CLOSE_PAREN),
                         lazy(lambda: _expr)))
_term = _left_chain(_factor, SyntaxKind.STAR, SyntaxKind.SLASH)
_expr = _left_chain(_term, SyntaxKind.PLUS, SyntaxKind.MINUS)
_syntax = _expr < eof()


def literal() -> Parsec[Node]:
    """Literal -> NUM"""
    return _literal


def factor() -> Parsec[Node]:
    """Factor -> Literal | "(" Expr ")" """
    return _factor


def term() -> Parsec[Node]:
    """Term -> Factor (("*" | "/") Factor)*"""
    return _term


def expr() -> Parsec[Node]:
    """Expr -> Term (("+" | "-") Term)*"""
    return _expr


def syntax(tokens: TokenStream) -> Tuple[Optional[Node], Optional[ParseError]]:
    """Build an AST from a token stream that must be consumed entirely."""
    return run_parser(_syntax, tokens)


def build_ast(text: str, lang: LexerDef = arith_def) -> Tuple[Optional[Node], Optional[Union[LexError, ParseError]]]:
    """Lex and parse `text`, returning (root, None) or (None, error)."""
    tokens, err = lex(text, lang)
    if err:
        return None, err
    return syntax(tokens)
