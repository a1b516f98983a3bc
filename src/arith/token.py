"""Token definitions for arithmetic expressions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Optional

from .span import Located, Span


#enumerates every lexical category produced by the lexer
class TokenType(Enum):
    NUMBER = auto()

    # Single-character tokens
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    LPAREN = auto()
    RPAREN = auto()


#single-byte lookup so the lexer can dispatch operators and parentheses quickly
SYMBOLS: Final[dict[str, TokenType]] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_TEXT: Final[dict[TokenType, str]] = {token_type: char for char, token_type in SYMBOLS.items()}


#token payload: the kind plus the literal value for numbers
@dataclass(frozen=True, slots=True)
class TokenKind:
    type: TokenType
    literal: Optional[int] = None

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return str(self.literal)
        return _TEXT[self.type]


Token = Located[TokenKind]


def number(value: int, span: Span) -> Token:
    return Located(TokenKind(TokenType.NUMBER, value), span)


def symbol(token_type: TokenType, span: Span) -> Token:
    if token_type is TokenType.NUMBER:
        raise ValueError("number tokens need a literal; use number()")
    return Located(TokenKind(token_type), span)


__all__ = ["SYMBOLS", "Token", "TokenKind", "TokenType", "number", "symbol"]
