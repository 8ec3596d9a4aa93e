"""Prints expressions back as infix text, one per line."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from minicc.expr.ast_nodes import BinaryExpr, FactorExpr, OpCode, Program, Visitor

_SYMBOLS = {
    OpCode.add: " + ",
    OpCode.sub: " - ",
    OpCode.mul: " * ",
    OpCode.div: " / ",
}


class PrintVisitor(Visitor):
    """Writes each expression of a program to a stream, without parentheses."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream

    def visit_program(self, program: Program) -> None:
        for expr in program.exprs:
            expr.accept(self)
            self.stream.write("\n")

    def visit_binary_expr(self, expr: BinaryExpr) -> None:
        expr.left.accept(self)
        self.stream.write(_SYMBOLS[expr.op])
        expr.right.accept(self)

    def visit_factor_expr(self, expr: FactorExpr) -> None:
        self.stream.write(str(expr.number))


def render(program: Program) -> str:
    """The printed form of a program as a string."""
    buffer = io.StringIO()
    PrintVisitor(buffer).visit_program(program)
    return buffer.getvalue()