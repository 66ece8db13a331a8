from typing import Any, Callable, List

from .Lexer import TokenStream
from .Parsec import Error, Ok, Parsec, ParseResult, T, U, show_tokens
from .Prim import fail


# 1. map: Transform the value of a successful parse
def map(p: Parsec[T], f: Callable[[T], U]) -> Parsec[U]:
    """
    Runs p and applies f to its value. Failures pass through untouched.
    """
    return p.map(f)

# 2. and_then: Sequence a parser with one built from its value
def and_then(p: Parsec[T], f: Callable[[T], Parsec[U]]) -> Parsec[U]:
    """
    Runs p, builds the next parser from its value with f and runs it on the
    remaining tokens. A failure reports the tokens where the failing stage began.
    """
    return p.bind(f)

# 3. either: Ordered choice with backtracking
def either(p1: Parsec[T], p2: Parsec[T]) -> Parsec[T]:
    """
    Tries p1; if it fails, tries p2 on the original input. If both fail the
    original input is returned unconsumed.
    """
    return p1 | p2

# 4. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Parsec[T]]) -> Parsec[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or fails if none succeed.
    """
    if not parsers:
        return fail()
    result = parsers[0]
    for p in parsers[1:]:
        result = either(result, p)
    return result

# 5. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parsec[Any], close: Parsec[Any], p: Parsec[T]) -> Parsec[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return (open > p) < close

# 6. eof: Succeeds only at the end of input
def eof() -> Parsec[None]:
    def parse(tokens: TokenStream) -> ParseResult[None]:
        if tokens:
            return Error(tokens)
        return Ok(tokens, None)
    return Parsec(parse)

# 7. parserTrace: Debugging parser that prints the upcoming tokens
def parser_trace(label_str: str) -> Parsec[None]:
    def parse(tokens: TokenStream) -> ParseResult[None]:
        text = show_tokens(tokens)
        print(f"{label_str}: \"{text[:30]}{'...' if len(text) > 30 else ''}\"")
        return Ok(tokens, None)
    return Parsec(parse)

# 8. parserTraced: Debugging parser that traces execution and backtracking
def parser_traced(label_str: str, p: Parsec[T]) -> Parsec[T]:
    trace_enter = parser_trace(label_str)
    backtracked = parser_trace(f"{label_str} backtracked") > fail()
    return trace_enter > either(p, backtracked)
