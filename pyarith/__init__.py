# Core
from .SyntaxKind import SyntaxKind
from .Parsec import Parsec, Ok, Error, ParseResult, ParseError, show_tokens
from .Prim import run_parser, pure, fail, atom, judge, single_token, zero_or_more, lazy

# Lexer
from .Language import LexerDef, arith_def, strict_space_def, unfolded_def
from .Lexer import Token, TokenStream, LexError, LexState, Lexer, lex

# Combinators
from .Combinators import (
    map, and_then, either, choice, between, eof,
    parser_trace, parser_traced
)

# Grammar
from .Node import Node, Literal, Expr
from .Grammar import literal, factor, term, expr, build_expr_node, syntax, build_ast

# Traversals
from .Visitor import Visitor
from .Eval import Evaluator, eval_ast
from .Format import Formatter, format_ast
