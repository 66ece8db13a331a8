from pyarith.Eval import eval_ast
from pyarith.Format import format_ast
from pyarith.Grammar import build_ast, syntax
from pyarith.Lexer import lex


class TimeParse:
    def setup(self):
        self.flat = " + ".join(["12"] * 1000)
        self.mixed = " - ".join(["(1 + 2 * -3) / 4"] * 200)
        self.nested = "(" * 30 + "1" + ")" * 30
        self.flat_tokens, _ = lex(self.flat)
        self.mixed_root, _ = build_ast(self.mixed)

    def time_lex_flat(self):
        lex(self.flat)

    def time_syntax_flat(self):
        syntax(self.flat_tokens)

    def time_build_ast_mixed(self):
        build_ast(self.mixed)

    def time_build_ast_nested(self):
        build_ast(self.nested)

    def time_eval_mixed(self):
        eval_ast(self.mixed_root)

    def time_format_mixed(self):
        format_ast(self.mixed_root)
