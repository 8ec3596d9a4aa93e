"""Prints a program back as text, one node per line."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from minicc.var.ast_nodes import (
    AssignExpr,
    BinaryExpr,
    NumberExpr,
    OpCode,
    Program,
    VariableAccessExpr,
    VariableDecl,
    Visitor,
)
from minicc.var.ctype import int_type

_SYMBOLS = {
    OpCode.add: " + ",
    OpCode.sub: " - ",
    OpCode.mul: " * ",
    OpCode.div: " / ",
}


class PrintVisitor(Visitor):
    """Writes each node of a program to a stream, without parentheses."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream

    def visit_program(self, program: Program) -> None:
        for node in program.exprs:
            node.accept(self)
            self.stream.write("\n")

    def visit_variable_decl(self, decl: VariableDecl) -> None:
        if decl.ty == int_type():
            self.stream.write(f"int {decl.name};")

    def visit_assign_expr(self, expr: AssignExpr) -> None:
        expr.left.accept(self)
        self.stream.write(" = ")
        expr.right.accept(self)

    def visit_binary_expr(self, expr: BinaryExpr) -> None:
        expr.left.accept(self)
        self.stream.write(_SYMBOLS[expr.op])
        expr.right.accept(self)

    def visit_number_expr(self, expr: NumberExpr) -> None:
        self.stream.write(str(expr.number))

    def visit_variable_access_expr(self, expr: VariableAccessExpr) -> None:
        self.stream.write(expr.name)


def render(program: Program) -> str:
    """The printed form of a program as a string."""
    buffer = io.StringIO()
    PrintVisitor(buffer).visit_program(program)
    return buffer.getvalue()