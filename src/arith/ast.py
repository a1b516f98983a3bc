"""Abstract syntax tree definitions for arithmetic expressions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .span import Located, Span


#prefix sign operators; the value is the symbol used when rendering
class UnaryOpKind(Enum):
    PLUS = "+"
    MINUS = "-"

    def __str__(self) -> str:
        return self.value


#infix operators; the value is the symbol used when rendering
class BinaryOpKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


UnaryOp = Located[UnaryOpKind]
BinaryOp = Located[BinaryOpKind]


# Node kinds -------------------------------------------------------------------


#integer literals store their unsigned value directly
@dataclass(frozen=True, slots=True)
class Num:
    value: int


#unary operators apply to a single atom
@dataclass(frozen=True, slots=True)
class UnaryExpr:
    op: UnaryOp
    operand: "Ast"


#binary operations own both sub-trees
@dataclass(frozen=True, slots=True)
class BinaryExpr:
    op: BinaryOp
    left: "Ast"
    right: "Ast"


AstKind = Union[Num, UnaryExpr, BinaryExpr]
Ast = Located[AstKind]


# Constructors -----------------------------------------------------------------


def num(value: int, span: Span) -> Ast:
    return Located(Num(value), span)


#the node span always covers the operator and its operand
def unary(op: UnaryOp, operand: Ast) -> Ast:
    return Located(UnaryExpr(op, operand), op.span.merge(operand.span))


#the node span covers both operands; the operator lies between them
def binary(op: BinaryOp, left: Ast, right: Ast) -> Ast:
    return Located(BinaryExpr(op, left, right), left.span.merge(right.span))


__all__ = [
    "Ast",
    "AstKind",
    "BinaryExpr",
    "BinaryOp",
    "BinaryOpKind",
    "Num",
    "UnaryExpr",
    "UnaryOp",
    "UnaryOpKind",
    "binary",
    "num",
    "unary",
]
