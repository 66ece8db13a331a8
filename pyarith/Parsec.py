from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Tuple, TypeVar, Union

from .Lexer import TokenStream

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


def show_tokens(tokens: TokenStream) -> str:
    """Concatenated text of a token stream."""
    return "".join(tok.text for tok in tokens)


@dataclass
class Ok(Generic[T]):
    """Successful reply: the tokens left over and the parsed value."""
    rest: TokenStream
    value: T


@dataclass
class Error:
    """
    Failed reply. `rest` holds the tokens that could not be consumed.
    `farthest` is where the deepest abandoned alternative got stuck; it
    only feeds error messages and is ignored when comparing replies.
    """
    rest: TokenStream
    farthest: Optional[TokenStream] = field(default=None, compare=False, repr=False)

    @property
    def deepest(self) -> TokenStream:
        return self.rest if self.farthest is None else self.farthest


ParseResult = Union[Ok[T], Error]


@dataclass
class ParseError:
    """Represents a syntactic error with the tokens left unconsumed."""
    rest: TokenStream = field(default_factory=list)
    message: str = ""

    def __post_init__(self):
        if not self.message:
            self.message = f"unexpected `{show_tokens(self.rest)}`" if self.rest else "unexpected end of input"

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


class Parsec(Generic[T]):
    """A parser over a token stream that yields a ParseResult."""
    def __init__(self, parse_fn: Callable[[TokenStream], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, tokens: TokenStream) -> ParseResult[T]:
        return self.parse_fn(tokens)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        def parse(tokens: TokenStream) -> ParseResult[U]:
            res = self(tokens)
            if isinstance(res, Error):
                return res
            return Ok(res.rest, f(res.value))
        return Parsec(parse)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        def parse(tokens: TokenStream) -> ParseResult[U]:
            res = self(tokens)
            if isinstance(res, Error):
                return res
            # The failing stage reports where it started.
            return f(res.value)(res.rest)
        return Parsec(parse)

    and_then = bind

    # Keep the value only if it satisfies a predicate
    def judge(self, pred: Callable[[T], bool]) -> 'Parsec[T]':
        def parse(tokens: TokenStream) -> ParseResult[T]:
            res = self(tokens)
            if isinstance(res, Ok) and pred(res.value):
                return res
            return Error(tokens)
        return Parsec(parse)

    # Alternative (<|>), with full backtracking
    def __or__(self, other: 'Parsec[T]') -> 'Parsec[T]':
        def parse(tokens: TokenStream) -> ParseResult[T]:
            res = self(tokens)
            if isinstance(res, Ok):
                return res
            alt = other(tokens)
            if isinstance(alt, Ok):
                return alt
            # Both failed: give the input back untouched
            return Error(tokens, min(res.deepest, alt.deepest, key=len))
        return Parsec(parse)

    # Sequence (&)
    # self: Parsec[T], other: Parsec[U] -> result: Parsec[Tuple[T, U]]
    def __and__(self, other: 'Parsec[U]') -> 'Parsec[Tuple[T, U]]':
        return self.bind(lambda x: other.map(lambda y: (x, y)))

    # Sequence (*>)
    def __gt__(self, other: 'Parsec[U]') -> 'Parsec[U]':
        return self.bind(lambda _: other)

    # Sequence (<*)
    def __lt__(self, other: 'Parsec[U]') -> 'Parsec[T]':
        return self.bind(lambda x: other.map(lambda _: x))

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        return self.bind(f)
