"""Tree-walking evaluator over the located AST."""
from __future__ import annotations

from typing import List, Tuple

from . import ast
from .errors import InterpreterError, InterpreterErrorKind

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


#reduces any integer to the i64 value with the same low 64 bits
def wrap_i64(value: int) -> int:
    value &= _MASK
    return value - (1 << 64) if value & _SIGN else value


#evaluates an AST to a signed 64-bit integer with wrapping arithmetic
class Interpreter:
    """Stateless evaluator; one instance may be reused for any number of trees.

    Literals, negation, ``+``, ``-``, ``*`` and ``/`` all wrap to 64-bit
    two's complement, so division by zero is the only failure.
    """

    def eval(self, expr: ast.Ast) -> int:
        #postorder walk with explicit stacks; left-leaning trees can be arbitrarily deep
        values: List[int] = []
        pending: List[Tuple[ast.Ast, bool]] = [(expr, False)]
        while pending:
            node, operands_done = pending.pop()
            match node.value:
                case ast.Num(value):
                    values.append(wrap_i64(value))
                case ast.UnaryExpr(op, operand):
                    if operands_done:
                        values.append(self._eval_unary(op, values.pop()))
                    else:
                        pending.append((node, True))
                        pending.append((operand, False))
                case ast.BinaryExpr(op, left, right):
                    if operands_done:
                        rhs = values.pop()
                        lhs = values.pop()
                        if op.value is ast.BinaryOpKind.DIV and rhs == 0:
                            #points at the whole division, not the operator
                            raise InterpreterError(InterpreterErrorKind.DIVISION_BY_ZERO, node.span)
                        values.append(self._eval_binary(op, lhs, rhs))
                    else:
                        pending.append((node, True))
                        pending.append((right, False))
                        pending.append((left, False))
                case _:
                    raise AssertionError(f"unknown node {node.value!r}")
        return values.pop()

    def _eval_unary(self, op: ast.UnaryOp, value: int) -> int:
        match op.value:
            case ast.UnaryOpKind.PLUS:
                return value
            case ast.UnaryOpKind.MINUS:
                return wrap_i64(-value)
            case _:
                raise AssertionError(f"unknown unary operator {op.value!r}")

    def _eval_binary(self, op: ast.BinaryOp, lhs: int, rhs: int) -> int:
        match op.value:
            case ast.BinaryOpKind.ADD:
                return wrap_i64(lhs + rhs)
            case ast.BinaryOpKind.SUB:
                return wrap_i64(lhs - rhs)
            case ast.BinaryOpKind.MUL:
                return wrap_i64(lhs * rhs)
            case ast.BinaryOpKind.DIV:
                return wrap_i64(_div_toward_zero(lhs, rhs))
            case _:
                raise AssertionError(f"unknown binary operator {op.value!r}")


def _div_toward_zero(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


#convenience wrapper mirroring the module-level lex/parse functions
def evaluate(expr: ast.Ast) -> int:
    return Interpreter().eval(expr)


__all__ = ["Interpreter", "evaluate", "wrap_i64"]
