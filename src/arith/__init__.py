"""Arith: located lexing, parsing and evaluation of integer arithmetic."""

#makes package exports explicit for downstream imports
from . import ast, diagnostics, emitter, errors, interpreter, lexer, parser, rpncalc, span, token
from .emitter import RpnEmitter, to_rpn
from .errors import ArithError, FrontendError, InterpreterError, LexError, ParseError
from .interpreter import Interpreter, evaluate
from .lexer import lex
from .parser import parse, parse_source
from .span import Located, Span

__all__ = [
    "ArithError",
    "FrontendError",
    "Interpreter",
    "InterpreterError",
    "LexError",
    "Located",
    "ParseError",
    "RpnEmitter",
    "Span",
    "ast",
    "diagnostics",
    "emitter",
    "errors",
    "evaluate",
    "interpreter",
    "lex",
    "lexer",
    "parse",
    "parse_source",
    "parser",
    "rpncalc",
    "span",
    "to_rpn",
    "token",
]
