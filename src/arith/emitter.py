"""Reverse-Polish code generation for the located AST."""
from __future__ import annotations

from typing import List, Union

from . import ast

#pending work is either a subtree still to walk or text ready to emit
_Item = Union[ast.Ast, str]


#walks the AST in postorder and emits operands before operators
class RpnEmitter:
    def compile(self, expr: ast.Ast) -> str:
        buffer: List[str] = []
        self._compile_expr(expr, buffer)
        return "".join(buffer)

    #explicit stack instead of recursion; items are pushed in reverse emit order
    def _compile_expr(self, expr: ast.Ast, buffer: List[str]) -> None:
        pending: List[_Item] = [expr]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                buffer.append(item)
                continue
            match item.value:
                case ast.Num(value):
                    buffer.append(str(value))
                case ast.UnaryExpr(op, operand):
                    #sign is glued to its operand, e.g. `-10`
                    buffer.append(str(op.value))
                    pending.append(operand)
                case ast.BinaryExpr(op, left, right):
                    pending.extend((str(op.value), " ", right, " ", left))
                case _:
                    raise AssertionError(f"unknown node {item.value!r}")


def to_rpn(expr: ast.Ast) -> str:
    return RpnEmitter().compile(expr)


__all__ = ["RpnEmitter", "to_rpn"]
