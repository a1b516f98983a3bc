"""Command-line entry point for the arithmetic toolchain."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .emitter import RpnEmitter
from .errors import ArithError
from .interpreter import Interpreter
from .lexer import lex
from .parser import parse_source
from .rpncalc import RpnCalculator, RpnCalculatorError


#reads the expression from --file when given, else from the positional argument
def read_source(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text().rstrip("\n")
    if args.expression is None:
        raise SystemExit(f"{args.command} requires an expression or --file")
    return args.expression


#handles the `arith eval` subcommand
def cmd_eval(args: argparse.Namespace, source: str) -> int:
    ast = parse_source(source)
    print(Interpreter().eval(ast))
    return 0


#handles the `arith rpn` subcommand
def cmd_rpn(args: argparse.Namespace, source: str) -> int:
    ast = parse_source(source)
    print(RpnEmitter().compile(ast))
    return 0


#prints a human-readable token listing, one per line
def cmd_tokens(args: argparse.Namespace, source: str) -> int:
    for token in lex(source):
        print(f"{str(token.span):<9} {token.value.type.name:<9} {token.value}")
    return 0


#runs the standalone postfix calculator
def cmd_calc(args: argparse.Namespace) -> int:
    calculator = RpnCalculator(verbose=args.verbose)
    try:
        result = calculator.eval(args.formula)
    except RpnCalculatorError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    print(result)
    return 0


#any pipeline error is rendered against the source before failing
def run_pipeline(args: argparse.Namespace) -> int:
    source = read_source(args)
    try:
        return args.handler(args, source)
    except ArithError as exc:
        exc.show_diagnostic(source)
        return 1


#configures the CLI surface across eval/rpn/tokens/calc
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arith", description="Arithmetic expression tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("eval", cmd_eval, "evaluate an expression to an integer"),
        ("rpn", cmd_rpn, "print an expression in reverse Polish notation"),
        ("tokens", cmd_tokens, "list the tokens of an expression"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("expression", nargs="?", help="expression text")
        sub.add_argument("-f", "--file", help="read the expression from a file")
        sub.set_defaults(func=run_pipeline, handler=handler)

    p_calc = subparsers.add_parser("calc", help="evaluate a whitespace-separated postfix formula")
    p_calc.add_argument("formula", help="postfix formula, e.g. '2 3 +'")
    p_calc.add_argument("-v", "--verbose", action="store_true", help="print the stack after each token")
    p_calc.set_defaults(func=cmd_calc)

    return parser


#entry point used by both console script and module execution
def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
