"""Parser that turns arithmetic tokens into a located AST."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from . import ast
from .errors import ParseError, ParseErrorKind
from .lexer import lex
from .span import Located
from .token import Token, TokenType

#deepest parenthesis nesting accepted before NESTING_TOO_DEEP
MAX_NESTING = 100

_ADDITIVE = {
    TokenType.PLUS: ast.BinaryOpKind.ADD,
    TokenType.MINUS: ast.BinaryOpKind.SUB,
}
_MULTIPLICATIVE = {
    TokenType.ASTERISK: ast.BinaryOpKind.MUL,
    TokenType.SLASH: ast.BinaryOpKind.DIV,
}
_UNARY = {
    TokenType.PLUS: ast.UnaryOpKind.PLUS,
    TokenType.MINUS: ast.UnaryOpKind.MINUS,
}


#navigates the token list via recursive descent
@dataclass(slots=True)
class Parser:
    """Recursive-descent parser for the grammar::

        Expr  := Term (('+' | '-') Term)*
        Term  := Unary (('*' | '/') Unary)*
        Unary := ('+' | '-')? Atom
        Atom  := Number | '(' Expr ')'

    Binary levels are left-associative. The first error aborts parsing.
    """

    tokens: List[Token]
    _current: int = field(init=False, default=0)
    _depth: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._current = 0
        self._depth = 0

    def parse(self) -> ast.Ast:
        expr = self._expression()
        if not self._is_at_end():
            raise ParseError(ParseErrorKind.REDUNDANT_EXPRESSION, self._advance())
        return expr

    # Expressions ---------------------------------------------------------------

    #handles `+` and `-` with left-associativity
    def _expression(self) -> ast.Ast:
        return self._left_binop(self._term, lambda: self._binary_operator(_ADDITIVE))

    #handles `*` and `/` precedence level
    def _term(self) -> ast.Ast:
        return self._left_binop(self._unary, lambda: self._binary_operator(_MULTIPLICATIVE))

    #a sign binds to a single atom, not to a whole term
    def _unary(self) -> ast.Ast:
        token = self._peek()
        if token is not None and token.value.type in _UNARY:
            self._advance()
            op = Located(_UNARY[token.value.type], token.span)
            return ast.unary(op, self._atom())
        return self._atom()

    #atoms are numbers or parenthesized expressions
    def _atom(self) -> ast.Ast:
        token = self._advance()
        match token.value.type:
            case TokenType.NUMBER:
                assert token.value.literal is not None
                return ast.num(token.value.literal, token.span)
            case TokenType.LPAREN:
                #each group costs several Python frames, so depth is capped below the recursion limit
                if self._depth >= MAX_NESTING:
                    raise ParseError(ParseErrorKind.NESTING_TOO_DEEP, token)
                self._depth += 1
                expr = self._expression()
                self._depth -= 1
                if self._is_at_end():
                    raise ParseError(ParseErrorKind.UNCLOSED_OPEN_PAREN, token)
                closing = self._advance()
                if closing.value.type is not TokenType.RPAREN:
                    raise ParseError(ParseErrorKind.REDUNDANT_EXPRESSION, closing)
                return expr
            case _:
                raise ParseError(ParseErrorKind.NOT_EXPRESSION, token)

    #folds `operand (op operand)*` into a left-leaning tree
    def _left_binop(
        self,
        operand: Callable[[], ast.Ast],
        operator: Callable[[], Optional[ast.BinaryOp]],
    ) -> ast.Ast:
        expr = operand()
        while (op := operator()) is not None:
            right = operand()
            expr = ast.binary(op, expr, right)
        return expr

    #consumes the next token only when it is one of the level's operators
    def _binary_operator(self, operators: dict[TokenType, ast.BinaryOpKind]) -> Optional[ast.BinaryOp]:
        token = self._peek()
        if token is None or token.value.type not in operators:
            return None
        self._advance()
        return Located(operators[token.value.type], token.span)

    # Utilities ----------------------------------------------------------------

    #running out of tokens where one is required is an EOF error
    def _advance(self) -> Token:
        if self._is_at_end():
            raise ParseError.eof()
        token = self.tokens[self._current]
        self._current += 1
        return token

    def _is_at_end(self) -> bool:
        return self._current >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        if self._is_at_end():
            return None
        return self.tokens[self._current]


def parse(tokens: List[Token]) -> ast.Ast:
    return Parser(list(tokens)).parse()


#lexes then parses; raises LexError or ParseError depending on the failing stage
def parse_source(source: str) -> ast.Ast:
    return parse(lex(source))


__all__ = ["Parser", "parse", "parse_source"]
