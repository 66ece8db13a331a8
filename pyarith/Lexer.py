from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from .Language import LexerDef, arith_def
from .SyntaxKind import SyntaxKind


@dataclass(frozen=True)
class Token:
    """A lexical unit: its kind and the exact text it was read from."""
    kind: SyntaxKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"


TokenStream = List[Token]


@dataclass
class LexError:
    """Represents a lexing failure and where it happened."""
    pos: int
    message: str
    cache: str = ""

    def __str__(self) -> str:
        return f"Lex error at position {self.pos}: {self.message}"


class LexState(IntEnum):
    ERROR = 0
    START = 1
    OPERATOR = 2
    ZERO = 3
    NUM = 4


ACCEPTING = frozenset({LexState.OPERATOR, LexState.ZERO, LexState.NUM})

# |          | op | ws | 0 | 1-9 |
# |----------|----|----|---|-----|
# | ERROR    | E  | E  | E | E   |
# | START    | 2  | 1  | 3 | 4   |
# | OPERATOR | 2  | 1  | 3 | 4   |
# | ZERO     | 2  | 1  | E | E   |
# | NUM      | 2  | 1  | 4 | 4   |
_E, _S, _O, _Z, _N = LexState
STATE_TABLE: Tuple[Tuple[LexState, LexState, LexState, LexState], ...] = (
    (_E, _E, _E, _E),  # ERROR
    (_O, _S, _Z, _N),  # START
    (_O, _S, _Z, _N),  # OPERATOR
    (_O, _S, _E, _E),  # ZERO
    (_O, _S, _N, _N),  # NUM
)

# A sign directly after one of these (or at the very start) is unary.
_SIGN_CONTEXT = frozenset({
    SyntaxKind.PLUS, SyntaxKind.MINUS, SyntaxKind.STAR,
    SyntaxKind.SLASH, SyntaxKind.OPEN_PAREN,
})
_SIGNS = frozenset({SyntaxKind.PLUS, SyntaxKind.MINUS})


def transition(c: str, state: LexState, lang: LexerDef = arith_def) -> LexState:
    """Next DFA state after reading `c` in `state`."""
    row = STATE_TABLE[state]
    if c in lang.operators:
        return row[0]
    if c in lang.whitespace:
        return row[1]
    if c == '0':
        return row[2]
    if '1' <= c <= '9':
        return row[3]
    return LexState.ERROR


class Lexer:
    """
    Deterministic finite automaton turning a character string into tokens.

    Characters are fed one at a time through `transition`; the pending text is
    flushed as a token whenever the automaton leaves an accepting state for a
    different one, or after every operator character.
    """
    def __init__(self, code: str, lang: LexerDef = arith_def):
        self.code = code
        self.lang = lang
        self._tokens: TokenStream = []

    def token_stream(self) -> TokenStream:
        return list(self._tokens)

    def run(self) -> Optional[LexError]:
        """Tokenize the whole input. Returns None on success, else the error."""
        if not self.code:
            return LexError(0, "an empty string was received")

        self._tokens = []
        state = LexState.START
        prev_state = LexState.ERROR
        cache = ""

        for idx, c in enumerate(self.code):
            state = transition(c, state, self.lang)

            if state == LexState.ERROR:
                self._tokens = []
                return LexError(idx, f"unexpected character {c!r}, current cache: {cache!r}", cache)

            if prev_state in ACCEPTING and (state != prev_state or prev_state == LexState.OPERATOR):
                self._push_token(cache)
                cache = ""

            if c not in self.lang.whitespace:
                cache += c
            prev_state = state

        if cache:
            self._push_token(cache)
        return None

    def _push_token(self, text: str) -> None:
        kind = SyntaxKind.from_operator(text)
        if kind is not None:
            self._tokens.append(Token(kind, text))
        else:
            self._tokens.append(Token(SyntaxKind.NUM, self._try_merge(text)))

    def _try_merge(self, text: str) -> str:
        # [ 1, +, - ] <- 1   gives   [ 1, +, -1 ]
        # [ - ] <- 1         gives   [ -1 ]
        # [ 1, - ] <- 1      stays binary
        if not self.lang.fold_signs or not self._tokens:
            return text
        sign = self._tokens[-1].kind
        if sign not in _SIGNS:
            return text
        if len(self._tokens) >= 2 and self._tokens[-2].kind not in _SIGN_CONTEXT:
            return text
        self._tokens.pop()
        return "-" + text if sign == SyntaxKind.MINUS else text


def lex(text: str, lang: LexerDef = arith_def) -> Tuple[Optional[TokenStream], Optional[LexError]]:
    """Tokenize `text`, returning (tokens, None) or (None, error)."""
    lexer = Lexer(text, lang)
    err = lexer.run()
    if err:
        return None, err
    return lexer.token_stream(), None
