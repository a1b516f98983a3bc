"""Standalone whitespace-delimited RPN calculator.

This evaluates postfix formulas such as ``2 3 +`` directly against a value
stack. It shares no types with the lexer/parser pipeline and carries no
span information: errors report the 1-based position of the offending
token instead.
"""
from __future__ import annotations

import re
from typing import Callable, List

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


#base for calculator failures so callers can react cleanly
class RpnCalculatorError(Exception):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


#raised for missing operands, unknown operators and leftover values
class InvalidSyntax(RpnCalculatorError):
    def __init__(self, position: int) -> None:
        super().__init__(f"invalid syntax at {position}", position)


class DivisionByZero(RpnCalculatorError):
    def __init__(self, position: int) -> None:
        super().__init__(f"division by zero at {position}", position)


def _wrap_i32(value: int) -> int:
    return (value - _I32_MIN) % 2**32 + _I32_MIN


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


#remainder takes the sign of the dividend, pairing with truncating division
def _truncating_rem(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "%": _truncating_rem,
}


#evaluates postfix formulas with 32-bit wrapping arithmetic
class RpnCalculator:
    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def eval(self, formula: str) -> int:
        tokens = formula.split()
        stack: List[int] = []
        for position, token in enumerate(tokens, start=1):
            value = self._parse_operand(token)
            if value is not None:
                stack.append(value)
            else:
                self._apply(token, stack, position)
            if self.verbose:
                self._trace(tokens[position:], stack)

        if len(stack) != 1:
            raise InvalidSyntax(-1)
        return stack[0]

    # Helpers -----------------------------------------------------------------

    #only decimal literals that fit in 32 bits are operands
    def _parse_operand(self, token: str) -> int | None:
        if not _INTEGER.fullmatch(token):
            return None
        value = int(token)
        if not _I32_MIN <= value <= _I32_MAX:
            return None
        return value

    #pops two operands, applies the operator and pushes the result
    def _apply(self, token: str, stack: List[int], position: int) -> None:
        if len(stack) < 2:
            raise InvalidSyntax(position)
        b = stack.pop()
        a = stack.pop()
        op = _OPERATORS.get(token)
        if op is None:
            raise InvalidSyntax(position)
        if token in ("/", "%") and b == 0:
            raise DivisionByZero(position)
        stack.append(_wrap_i32(op(a, b)))

    def _trace(self, remaining: List[str], stack: List[int]) -> None:
        self._log(f"tokens={remaining} stack={stack}")

    def _log(self, message: str) -> None:
        print(f"[trace] {message}")


__all__ = ["DivisionByZero", "InvalidSyntax", "RpnCalculator", "RpnCalculatorError"]
