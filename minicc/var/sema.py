"""Semantic checks that build syntax tree nodes for the parser."""

from __future__ import annotations

from minicc.var.ast_nodes import (
    AssignExpr,
    AstNode,
    BinaryExpr,
    NumberExpr,
    OpCode,
    VariableAccessExpr,
    VariableDecl,
)
from minicc.var.ctype import CType
from minicc.var.scope import Scope, SymbolKind


class SemaError(ValueError):
    """Raised when a construct breaks the language's rules."""


class Sema:
    """Checks each construct against the symbol table and builds its node."""

    def __init__(self) -> None:
        self.scope = Scope()

    def variable_decl_node(self, name: str, ty: CType) -> VariableDecl:
        """Declare a variable; declaring a name twice in one scope is an error."""
        if self.scope.find_var_symbol_in_cur_env(name) is not None:
            raise SemaError(f"re defined variable {name}")
        self.scope.add_symbol(SymbolKind.LOCAL_VARIABLE, ty, name)
        return VariableDecl(name, ty)

    def variable_access_node(self, name: str) -> VariableAccessExpr:
        """Refer to a declared variable, taking its type from the symbol table."""
        symbol = self.scope.find_var_symbol(name)
        if symbol is None:
            raise SemaError(f"use undefined symbol: {name}")
        return VariableAccessExpr(name, symbol.ty)

    def number_expr_node(self, number: int, ty: CType | None) -> NumberExpr:
        return NumberExpr(number, ty)

    def assign_expr_node(self, left: AstNode | None, right: AstNode | None) -> AssignExpr:
        """Assign to a variable; the left side must be a variable access."""
        if left is None or right is None:
            raise SemaError("left or right can't not nullptr")
        if not isinstance(left, VariableAccessExpr):
            raise SemaError("must be left value")
        return AssignExpr(left, right)

    def binary_expr_node(self, left: AstNode, right: AstNode, op: OpCode) -> BinaryExpr:
        return BinaryExpr(op, left, right)