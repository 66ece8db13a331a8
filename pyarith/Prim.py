from typing import Any, Callable, List, Optional, Tuple

from .Lexer import Token, TokenStream
from .Parsec import Error, Ok, Parsec, ParseError, ParseResult, T
from .SyntaxKind import SyntaxKind


def pure(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(tokens: TokenStream) -> ParseResult[T]:
        return Ok(tokens, value)
    return Parsec(parse)


def fail() -> Parsec[Any]:
    """A parser that always fails without consuming input."""
    def parse(tokens: TokenStream) -> ParseResult[Any]:
        return Error(tokens)
    return Parsec(parse)


def atom() -> Parsec[Token]:
    """Consume exactly one token, whatever its kind."""
    def parse(tokens: TokenStream) -> ParseResult[Token]:
        if not tokens:
            return Error(tokens)
        return Ok(tokens[1:], tokens[0])
    return Parsec(parse)


def judge(parser: Parsec[T], pred: Callable[[T], bool]) -> Parsec[T]:
    """Run `parser` and accept its value only if `pred` holds for it."""
    return parser.judge(pred)


def single_token(kind: SyntaxKind) -> Parsec[Token]:
    """Consume one token of the given kind."""
    return judge(atom(), lambda tok: tok.kind == kind)


def zero_or_more(parser: Parsec[T]) -> Parsec[List[T]]:
    """Parse zero or more occurrences of `parser`. Never fails."""
    def parse(tokens: TokenStream) -> ParseResult[List[T]]:
        items: List[T] = []
        while True:
            res = parser(tokens)
            if isinstance(res, Error):
                break
            # A parser that succeeds without consuming would loop forever
            if len(res.rest) == len(tokens):
                break
            items.append(res.value)
            tokens = res.rest
        return Ok(tokens, items)
    return Parsec(parse)


def lazy(thunk: Callable[[], Parsec[T]]) -> Parsec[T]:
    """Build the parser on first use; lets grammar rules refer to each other."""
    cache: List[Parsec[T]] = []

    def parse(tokens: TokenStream) -> ParseResult[T]:
        if not cache:
            cache.append(thunk())
        return cache[0](tokens)
    return Parsec(parse)


def run_parser(parser: Parsec[T], tokens: TokenStream) -> Tuple[Optional[T], Optional[ParseError]]:
    result = parser(tokens)
    if isinstance(result, Error):
        return None, ParseError(result.deepest)
    return result.value, None
