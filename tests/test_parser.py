import pytest

from arith import ast
from arith.errors import LexError, ParseError, ParseErrorKind
from arith.lexer import lex
from arith.parser import MAX_NESTING, parse, parse_source
from arith.span import Located, Span
from arith.token import TokenType, number, symbol


def binop(kind: ast.BinaryOpKind, start: int, end: int) -> ast.BinaryOp:
    return Located(kind, Span(start, end))


def uniop(kind: ast.UnaryOpKind, start: int, end: int) -> ast.UnaryOp:
    return Located(kind, Span(start, end))


#operands and operator spans are kept, node spans are merged
def test_parse_precedence_and_unary() -> None:
    expected = ast.binary(
        binop(ast.BinaryOpKind.SUB, 10, 11),
        ast.binary(
            binop(ast.BinaryOpKind.ADD, 2, 3),
            ast.num(1, Span(0, 1)),
            ast.binary(
                binop(ast.BinaryOpKind.MUL, 6, 7),
                ast.num(2, Span(4, 5)),
                ast.num(3, Span(8, 9)),
            ),
        ),
        ast.unary(uniop(ast.UnaryOpKind.MINUS, 12, 13), ast.num(10, Span(14, 16))),
    )
    result = parse(lex("1 + 2 * 3 - - 10"))
    assert result == expected
    assert result.span == Span(0, 16)
    assert result.value.left.span == Span(0, 9)
    assert result.value.left.value.right.span == Span(4, 9)
    assert result.value.right.span == Span(12, 16)


#same-precedence operators fold to the left
def test_parse_left_associative() -> None:
    result = parse_source("8 - 3 - 2")
    assert isinstance(result.value, ast.BinaryExpr)
    assert result.value.op.value is ast.BinaryOpKind.SUB
    left = result.value.left
    assert isinstance(left.value, ast.BinaryExpr)
    assert left.span == Span(0, 5)
    assert result.value.right == ast.num(2, Span(8, 9))


#parentheses group without widening the inner node's span
def test_parse_parenthesized_group() -> None:
    result = parse_source("(1 + 2) * 3")
    assert isinstance(result.value, ast.BinaryExpr)
    assert result.value.op.value is ast.BinaryOpKind.MUL
    assert result.value.left.span == Span(1, 6)
    assert result.span == Span(1, 11)


#a sign applies to a whole parenthesized atom
def test_parse_unary_on_group() -> None:
    result = parse_source("-(2 + 3)")
    assert isinstance(result.value, ast.UnaryExpr)
    assert result.value.op.value is ast.UnaryOpKind.MINUS
    assert result.span == Span(0, 7)


#a lone number is a complete expression
def test_parse_single_number() -> None:
    assert parse_source("42") == ast.num(42, Span(0, 2))


def test_parse_error_redundant() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("(+ 1 3)")
    assert excinfo.value == ParseError(
        ParseErrorKind.REDUNDANT_EXPRESSION, number(3, Span(5, 6))
    )


def test_parse_error_unclosed_open_paren() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("1 + (2 - 3")
    assert excinfo.value == ParseError(
        ParseErrorKind.UNCLOSED_OPEN_PAREN, symbol(TokenType.LPAREN, Span(4, 5))
    )


def test_parse_error_not_expression() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("1 + 2 - * 3")
    assert excinfo.value == ParseError(
        ParseErrorKind.NOT_EXPRESSION, symbol(TokenType.ASTERISK, Span(8, 9))
    )
    assert str(excinfo.value) == "8-9: '*' is not a start of expression"


def test_parse_error_eof() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("1 +")
    assert excinfo.value == ParseError.eof()
    assert excinfo.value.token is None


#lexical failures surface from parse_source unchanged
def test_parse_source_invalid_char() -> None:
    with pytest.raises(LexError) as excinfo:
        parse_source("aiueo")
    assert excinfo.value.char == "a"
    assert excinfo.value.span == Span(0, 1)


#trailing tokens after a complete expression are rejected
def test_parse_error_trailing_tokens() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("1 2 3")
    assert excinfo.value.kind is ParseErrorKind.REDUNDANT_EXPRESSION
    assert excinfo.value.token == number(2, Span(2, 3))


#a stray closing paren at top level is redundant input
def test_parse_error_stray_close_paren() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("1)")
    assert excinfo.value.kind is ParseErrorKind.REDUNDANT_EXPRESSION


#unary signs bind to an atom only, so they cannot be stacked
def test_parse_error_double_sign() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("--1")
    assert excinfo.value.kind is ParseErrorKind.NOT_EXPRESSION
    assert excinfo.value.token == symbol(TokenType.MINUS, Span(1, 2))


@pytest.mark.parametrize("source", ["", "(", "-", "2 *"])
def test_parse_error_eof_variants(source: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source(source)
    assert excinfo.value.kind is ParseErrorKind.EOF


#an empty group has nothing to parse inside
def test_parse_error_empty_parens() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("()")
    assert excinfo.value.kind is ParseErrorKind.NOT_EXPRESSION
    assert excinfo.value.token.span == Span(1, 2)


#error kinds that need a token refuse to be built without one
def test_parse_error_requires_token() -> None:
    with pytest.raises(ValueError):
        ParseError(ParseErrorKind.NOT_EXPRESSION)
    with pytest.raises(ValueError):
        ParseError(ParseErrorKind.EOF, number(1, Span(0, 1)))


#nesting up to the limit parses to the inner expression
def test_parse_nesting_at_limit() -> None:
    source = "(" * MAX_NESTING + "1" + ")" * MAX_NESTING
    assert parse_source(source) == ast.num(1, Span(MAX_NESTING, MAX_NESTING + 1))


#one level past the limit is a located error on the offending paren
def test_parse_error_nesting_too_deep() -> None:
    source = "(" * 200 + "1" + ")" * 200
    with pytest.raises(ParseError) as excinfo:
        parse_source(source)
    error = excinfo.value
    assert error.kind is ParseErrorKind.NESTING_TOO_DEEP
    assert error.token == symbol(TokenType.LPAREN, Span(MAX_NESTING, MAX_NESTING + 1))
    assert error.diagnostic_span(source) == Span(MAX_NESTING, MAX_NESTING + 1)
    assert str(error) == f"{MAX_NESTING}-{MAX_NESTING + 1}: parentheses nested too deeply"


#long flat chains are folded iteratively, not recursively
def test_parse_long_chain() -> None:
    result = parse_source(" * ".join(["2"] * 5000))
    assert result.span == Span(0, 5000 + 4999 * 3)
