import sys

from pyarith.Grammar import build_ast
from pyarith.Node import Expr


def test_long_chain_does_not_recurse():
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    n = 3000
    try:
        root, err = build_ast(" + ".join(["1"] * n))
    finally:
        sys.setrecursionlimit(old_limit)
    assert err is None
    depth = 0
    node = root
    while isinstance(node, Expr):
        node = node.left
        depth += 1
    assert depth == n - 1


def test_moderate_nesting():
    n = 30
    root, err = build_ast("(" * n + "1" + ")" * n)
    assert err is None
