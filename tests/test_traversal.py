import pytest

from pyarith.Eval import Evaluator, eval_ast
from pyarith.Format import Formatter, format_ast
from pyarith.Grammar import build_ast
from pyarith.Node import Expr, Literal, Node
from pyarith.SyntaxKind import SyntaxKind as K
from pyarith.Visitor import Visitor


def parse(text):
    root, err = build_ast(text)
    assert err is None, str(err)
    return root


def calc(text):
    return eval_ast(parse(text))


def fmt(text):
    return format_ast(parse(text))


# --- Visitor ---

class Recorder(Visitor[str]):
    """Records the order in which literals are visited."""

    def __init__(self):
        self.seen = []

    def visit_literal(self, value, raw):
        self.seen.append(raw)
        return raw

    def visit_expr(self, left, op, right):
        return f"[{self.visit(left)}{op}{self.visit(right)}]"


def test_visitor_dispatch_and_order():
    rec = Recorder()
    assert rec.visit(parse("1 + 2 * 3 - 4")) == "[[1+[2*3]]-4]"
    assert rec.seen == ["1", "2", "3", "4"]


def test_visitor_rejects_unknown_node():
    class Stray(Node):
        pass

    with pytest.raises(TypeError):
        Recorder().visit(Stray())


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()


# --- Evaluator ---

def test_eval_smoke():
    assert calc("2 + 1") == 3
    assert calc("2 - 1") == 1
    assert calc("2 * 1") == 2
    assert calc("2 / 1") == 2

    assert calc("1 + 2 * 3") == 7
    assert calc("(1 + 2) * 3") == 9
    assert calc("1 * ( 2 + 3 )") == 5
    assert calc("1 * ( 2 * ( 3 + 4 ))") == 14


def test_eval_left_associativity():
    assert calc("1-2-3") == -4
    assert calc("100/10/5") == 2


def test_eval_negative_literals():
    assert calc("-1 + 1") == 0
    assert calc("1 + (-1)") == 0
    assert calc("2 * -3") == -6
    assert calc("-0") == 0


@pytest.mark.parametrize("text, value", [
    ("7 / 2", 3),
    ("-7 / 2", -3),
    ("7 / -2", -3),
    ("-7 / -2", 3),
    ("1 / 3", 0),
    ("-1 / 3", 0),
])
def test_eval_division_truncates_toward_zero(text, value):
    assert calc(text) == value


def test_eval_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calc("1 / (2 - 2)")


def test_eval_evaluates_both_sides_before_dividing():
    with pytest.raises(ZeroDivisionError):
        calc("(1 / 0) * 0")


def test_eval_unknown_operator():
    bad = Expr(K.UNKNOWN, Literal(K.NUM, 1, "1"), K.UNKNOWN, Literal(K.NUM, 2, "2"))
    with pytest.raises(ValueError):
        eval_ast(bad)


def test_eval_large_values():
    assert calc("99999999999 * 99999999999") == 99999999999 ** 2


def test_evaluator_object():
    assert Evaluator().eval(parse("6 * 7")) == 42


# --- Formatter ---

def test_format_smoke():
    assert fmt("1*(2+3)") == "1 * (2 + 3)"
    assert fmt("1*2+3") == "1 * 2 + 3"
    assert fmt("1*(2+3)*4") == "1 * (2 + 3) * 4"
    assert fmt("1* ( 2 * ( 3 + 4))") == "1 * 2 * (3 + 4)"


def test_format_negative():
    assert fmt("1+(-1)") == "1 + (-1)"
    assert fmt("-1+1") == "-1 + 1"
    assert fmt("1--1") == "1 - (-1)"


def test_format_left_associativity():
    assert fmt("1-2-3") == "1 - 2 - 3"
    assert fmt("((1-2)-3)") == "1 - 2 - 3"


def test_format_drops_redundant_parens():
    assert fmt("((1))") == "1"
    assert fmt("(1*2)+(3*4)") == "1 * 2 + 3 * 4"
    assert fmt("1+(2*3)") == "1 + 2 * 3"
    assert fmt("1+(2+3)") == "1 + 2 + 3"
    assert fmt("1+(2-3)") == "1 + 2 - 3"


def test_format_keeps_needed_parens():
    assert fmt("(1+2)*3") == "(1 + 2) * 3"
    assert fmt("1-(2-3)") == "1 - (2 - 3)"
    assert fmt("1-(2+3)") == "1 - (2 + 3)"
    assert fmt("8/(4/2)") == "8 / (4 / 2)"
    assert fmt("8/(4*2)") == "8 / (4 * 2)"
    assert fmt("2*(3/2)") == "2 * (3 / 2)"
    assert fmt("2*(3*(5/2))") == "2 * 3 * (5 / 2)"


def test_format_wraps_right_operand_starting_with_sign():
    assert fmt("1+(-2+3)") == "1 + (-2 + 3)"
    assert fmt("1+(-2-3)") == "1 + (-2 - 3)"
    assert fmt("1*(-2*3)") == "1 * (-2 * 3)"
    assert fmt("1+(-2*3)") == "1 + (-2 * 3)"
    assert fmt("1+((-2+3)+4)") == "1 + (-2 + 3 + 4)"


@pytest.mark.parametrize("text", ["1+(-2+3)", "1*(-2*3)", "1+(-2-3)", "0+(-1+0)", "1 + -2 * 3"])
def test_format_sign_after_operator_is_stable(text):
    once = fmt(text)
    assert fmt(once) == once
    assert eval_ast(parse(once)) == eval_ast(parse(text))


def test_format_preserves_raw_text():
    assert fmt("-0 * 10") == "-0 * 10"
    assert fmt("+7") == "7"


def test_format_smoke_end_to_end():
    root = parse("1 * 2 + (3 / (4  + (-5)))")
    assert eval_ast(root) == -1
    assert format_ast(root) == "1 * 2 + 3 / (4 + (-5))"


def test_formatter_object():
    assert Formatter().format(parse("(1)")) == "1"
