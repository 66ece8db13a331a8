# tests/conftest.py
import pytest
from hypothesis import strategies as st

from pyarith.Lexer import Token, lex
from pyarith.SyntaxKind import SyntaxKind


def num(text):
    return Token(SyntaxKind.NUM, text)


def op(text):
    return Token(SyntaxKind.from_operator(text), text)


def expressions():
    """Random well formed expressions, with or without redundant parentheses."""
    leaves = st.integers(min_value=-99, max_value=99).map(str)

    def extend(children):
        binary = st.tuples(children, st.sampled_from("+-*/"), children).map(lambda t: "".join(t))
        return binary | children.map(lambda s: f"({s})")

    return st.recursive(leaves, extend, max_leaves=12)


@pytest.fixture
def tokens():
    """Lex a string that is known to be valid."""
    def _make(text):
        toks, err = lex(text)
        assert err is None, str(err)
        return toks

    return _make
