"""Generates an IR module whose main prints the value of the last expression."""

from __future__ import annotations

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
from minicc.ir import IRBuilder, Module, Value


class CodeGen(Visitor):
    """Lowers a program into the module ``expr``, keeping variables in stack slots."""

    def __init__(self) -> None:
        self.module = Module("expr")
        self.builder = IRBuilder()
        self.var_addr_map: dict[str, Value] = {}

    def visit_program(self, program: Program) -> Value:
        printf = self.module.declare_function("printf", "i32", ["ptr"], True)
        main_function = self.module.define_function("main", "i32")
        self.builder.position_at_end(main_function.append_block("entry"))

        last_value: Value | None = None
        for node in program.exprs:
            last_value = node.accept(self)
        if last_value is None:
            raise ValueError("program has no value to print")
        if last_value.type == "void":
            raise ValueError("the last statement of the program has no value")

        fmt = self.builder.global_string_ptr("expr val: %d\n")
        self.builder.call(printf, [fmt, last_value])
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

    def visit_number_expr(self, expr: NumberExpr) -> Value:
        return self.builder.const_int(32, expr.number)

    def visit_variable_decl(self, decl: VariableDecl) -> Value:
        address = self.builder.alloca(decl.name)
        return self.var_addr_map.setdefault(decl.name, address)

    def _address_of(self, name: str) -> Value:
        try:
            return self.var_addr_map[name]
        except KeyError:
            raise ValueError(f"no storage for variable {name}") from None

    def visit_assign_expr(self, expr: AssignExpr) -> Value:
        if not isinstance(expr.left, VariableAccessExpr):
            raise ValueError("must be left value")
        address = self._address_of(expr.left.name)
        value = expr.right.accept(self)
        return self.builder.store(value, address)

    def visit_variable_access_expr(self, expr: VariableAccessExpr) -> Value:
        address = self._address_of(expr.name)
        return self.builder.load(address, expr.name)


def generate(program: Program) -> Module:
    """Build the IR module for a program."""
    codegen = CodeGen()
    codegen.visit_program(program)
    return codegen.module