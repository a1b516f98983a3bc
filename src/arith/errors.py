"""Error taxonomy for every stage of the pipeline, with diagnostic support."""
from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Any, Optional, TextIO

from .diagnostics import print_annotation
from .span import Located, Span
from .token import Token


#normalizes the base exception for lexer, parser and interpreter
class ArithError(Exception):
    """Base class for errors that can be pointed at in the source text.

    Subclasses must override ``diagnostic_span`` (what to highlight) and
    ``_key`` (the fields that define equality); this base only supplies
    ``show_diagnostic`` and comparison on top of them.
    """

    message: str

    def diagnostic_span(self, source: str) -> Span:
        """Return the span to highlight when reporting against ``source``."""

        raise NotImplementedError

    def show_diagnostic(self, source: str, file: Optional[TextIO] = None) -> None:
        """Write the message, the source line and a caret underline."""

        stream = file if file is not None else sys.stderr
        print(self.message, file=stream)
        print_annotation(source, self.diagnostic_span(source), file=stream)

    def _key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


#errors raised before an AST exists; `parse_source` raises one of these
class FrontendError(ArithError):
    """Failure during lexing or parsing; the subclass tags the stage."""


# Lexing -----------------------------------------------------------------------


class LexErrorKind(Enum):
    INVALID_CHAR = auto()
    EOF = auto()
    LITERAL_OVERFLOW = auto()


#lexer raises this on the first byte it cannot turn into a token
class LexError(FrontendError):
    def __init__(self, kind: LexErrorKind, span: Span, char: Optional[str] = None) -> None:
        self.kind = kind
        self.span = span
        self.char = char
        self.message = self._describe()
        super().__init__(self.message)

    @property
    def located(self) -> Located[LexErrorKind]:
        return Located(self.kind, self.span)

    def diagnostic_span(self, source: str) -> Span:
        return self.span

    def _describe(self) -> str:
        match self.kind:
            case LexErrorKind.INVALID_CHAR:
                return f"{self.span}: invalid char {self.char!r}"
            case LexErrorKind.EOF:
                return "End of file"
            case LexErrorKind.LITERAL_OVERFLOW:
                return f"{self.span}: number literal does not fit in 64 bits"
            case _:
                raise AssertionError(f"unknown lex error {self.kind!r}")

    def _key(self) -> tuple[Any, ...]:
        return (self.kind, self.span, self.char)

    def __repr__(self) -> str:
        return f"LexError({self.kind.name}, {self.span}, char={self.char!r})"


# Parsing ----------------------------------------------------------------------


class ParseErrorKind(Enum):
    # Declared for completeness; the expression grammar never produces these two
    UNEXPECTED_TOKEN = auto()
    NOT_OPERATOR = auto()

    NOT_EXPRESSION = auto()
    UNCLOSED_OPEN_PAREN = auto()
    REDUNDANT_EXPRESSION = auto()
    NESTING_TOO_DEEP = auto()
    EOF = auto()


#parser uses this to surface syntax errors anchored on the offending token
class ParseError(FrontendError):
    def __init__(self, kind: ParseErrorKind, token: Optional[Token] = None) -> None:
        if (token is None) != (kind is ParseErrorKind.EOF):
            raise ValueError(f"{kind.name} requires {'a' if token is None else 'no'} token")
        self.kind = kind
        self.token = token
        self.message = self._describe()
        super().__init__(self.message)

    @classmethod
    def eof(cls) -> ParseError:
        return cls(ParseErrorKind.EOF)

    def diagnostic_span(self, source: str) -> Span:
        match self.kind:
            case (
                ParseErrorKind.UNEXPECTED_TOKEN
                | ParseErrorKind.NOT_EXPRESSION
                | ParseErrorKind.NOT_OPERATOR
                | ParseErrorKind.UNCLOSED_OPEN_PAREN
                | ParseErrorKind.NESTING_TOO_DEEP
            ):
                assert self.token is not None
                return self.token.span
            case ParseErrorKind.REDUNDANT_EXPRESSION:
                #everything from the leftover token to the end is highlighted
                assert self.token is not None
                return Span(self.token.span.start, max(len(source), self.token.span.end))
            case ParseErrorKind.EOF:
                return Span(len(source), len(source) + 1)
            case _:
                raise AssertionError(f"unknown parse error {self.kind!r}")

    def _describe(self) -> str:
        token = self.token
        match self.kind:
            case ParseErrorKind.UNEXPECTED_TOKEN:
                return f"{token.span}: {token.value} is not expected"
            case ParseErrorKind.NOT_EXPRESSION:
                return f"{token.span}: '{token.value}' is not a start of expression"
            case ParseErrorKind.NOT_OPERATOR:
                return f"{token.span}: '{token.value}' is not an operator"
            case ParseErrorKind.UNCLOSED_OPEN_PAREN:
                return f"{token.span}: '{token.value}' is not closed"
            case ParseErrorKind.NESTING_TOO_DEEP:
                return f"{token.span}: parentheses nested too deeply"
            case ParseErrorKind.REDUNDANT_EXPRESSION:
                return f"{token.span}: expression after '{token.value}' is redundant"
            case ParseErrorKind.EOF:
                return "End of file"
            case _:
                raise AssertionError(f"unknown parse error {self.kind!r}")

    def _key(self) -> tuple[Any, ...]:
        return (self.kind, self.token)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.token!r})"


# Evaluation -------------------------------------------------------------------


class InterpreterErrorKind(Enum):
    DIVISION_BY_ZERO = auto()


#runtime failures point at the whole node whose evaluation failed
class InterpreterError(ArithError):
    def __init__(self, kind: InterpreterErrorKind, span: Span) -> None:
        self.kind = kind
        self.span = span
        self.message = self._describe()
        super().__init__(self.message)

    @property
    def located(self) -> Located[InterpreterErrorKind]:
        return Located(self.kind, self.span)

    @property
    def description(self) -> str:
        match self.kind:
            case InterpreterErrorKind.DIVISION_BY_ZERO:
                return "the right hand expression of the division evaluates to zero"
            case _:
                raise AssertionError(f"unknown interpreter error {self.kind!r}")

    def diagnostic_span(self, source: str) -> Span:
        return self.span

    def _describe(self) -> str:
        match self.kind:
            case InterpreterErrorKind.DIVISION_BY_ZERO:
                return "division by zero"
            case _:
                raise AssertionError(f"unknown interpreter error {self.kind!r}")

    def _key(self) -> tuple[Any, ...]:
        return (self.kind, self.span)

    def __repr__(self) -> str:
        return f"InterpreterError({self.kind.name}, {self.span})"


__all__ = [
    "ArithError",
    "FrontendError",
    "InterpreterError",
    "InterpreterErrorKind",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
]
