"""Generates an IR module whose main prints the value of each expression."""

from __future__ import annotations

from minicc.expr.ast_nodes import BinaryExpr, FactorExpr, OpCode, Program, Visitor
from minicc.ir import IRBuilder, Module, Value


class CodeGen(Visitor):
    """Lowers a program into the module ``expr``."""

    def __init__(self) -> None:
        self.module = Module("expr")
        self.builder = IRBuilder()

    def visit_program(self, program: Program) -> Value:
        printf = self.module.declare_function("printf", "i32", ["ptr"], True)
        main_function = self.module.define_function("main", "i32")
        self.builder.position_at_end(main_function.append_block("entry"))

        for expr in program.exprs:
            value = expr.accept(self)
            fmt = self.builder.global_string_ptr("expr val: %d\n")
            self.builder.call(printf, [fmt, value])

        return self.builder.ret(self.builder.const_int(32, 0))

    def visit_binary_expr(self, expr: BinaryExpr) -> Value:
        left = expr.left.accept(self)
        right = expr.right.accept(self)
        builder = self.builder
        operations = {
            OpCode.add: builder.nsw_add,
            OpCode.sub: builder.nsw_sub,
            OpCode.mul: builder.nsw_mul,
            OpCode.div: builder.sdiv,
        }
        return operations[expr.op](left, right)

    def visit_factor_expr(self, expr: FactorExpr) -> Value:
        return self.builder.const_int(32, expr.number)


def generate(program: Program) -> Module:
    """Build the IR module for a program."""
    codegen = CodeGen()
    codegen.visit_program(program)
    return codegen.module