"""Lexical analysis for arithmetic expressions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from .errors import LexError, LexErrorKind
from .span import Span
from .token import SYMBOLS, Token, number, symbol

DIGITS = "0123456789"
WHITESPACE = " \n\t"
U64_MAX = 2**64 - 1


#transforms raw characters into a list of located tokens consumed by the parser
@dataclass(slots=True)
class Lexer:
    """Scans ASCII source text left to right.

    Offsets are byte offsets; the lexer stops at the first byte outside
    ASCII, so every span it produces is also a character offset into the
    Python string.
    """

    source: str
    _length: int = field(init=False)
    _index: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._length = len(self.source)
        self._index = 0

    def lex(self) -> List[Token]:
        tokens: List[Token] = []
        while not self._is_at_end():
            char = self._peek()
            if char in DIGITS:
                tokens.append(self._number())
            elif char in SYMBOLS:
                tokens.append(self._symbol(char))
            elif char in WHITESPACE:
                self._skip_while(lambda c: c in WHITESPACE)
            else:
                span = Span(self._index, self._index + 1)
                raise LexError(LexErrorKind.INVALID_CHAR, span, char=char)
        return tokens

    # Internal helpers -------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._index >= self._length

    def _peek(self) -> str:
        return self.source[self._index]

    #consumes a maximal run and returns where it started
    def _skip_while(self, predicate: Callable[[str], bool]) -> int:
        start = self._index
        while not self._is_at_end() and predicate(self._peek()):
            self._index += 1
        return start

    def _symbol(self, char: str) -> Token:
        start = self._index
        self._index += 1
        return symbol(SYMBOLS[char], Span(start, self._index))

    def _number(self) -> Token:
        start = self._skip_while(lambda c: c in DIGITS)
        span = Span(start, self._index)
        digits = self.source[start:self._index].lstrip("0") or "0"
        #u64 has at most 20 digits; longer runs would also trip int()'s digit limit
        if len(digits) > 20 or int(digits) > U64_MAX:
            raise LexError(LexErrorKind.LITERAL_OVERFLOW, span)
        return number(int(digits), span)


#stateless entry point; each call scans with a fresh lexer
def lex(source: str) -> List[Token]:
    return Lexer(source).lex()


__all__ = ["Lexer", "lex"]
