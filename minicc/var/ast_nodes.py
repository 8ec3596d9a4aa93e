"""Syntax tree of the variable language and the visitor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar

from minicc.var.ctype import CType


class Visitor(ABC):
    """Walks a program; each visit returns whatever the visitor produces."""

    @abstractmethod
    def visit_program(self, program: Program) -> Any: ...

    @abstractmethod
    def visit_variable_decl(self, decl: VariableDecl) -> Any: ...

    @abstractmethod
    def visit_assign_expr(self, expr: AssignExpr) -> Any: ...

    @abstractmethod
    def visit_number_expr(self, expr: NumberExpr) -> Any: ...

    @abstractmethod
    def visit_binary_expr(self, expr: BinaryExpr) -> Any: ...

    @abstractmethod
    def visit_variable_access_expr(self, expr: VariableAccessExpr) -> Any: ...


class NodeKind(Enum):
    VARIABLE_DECL = auto()
    BINARY_EXPR = auto()
    NUMBER_EXPR = auto()
    VARIABLE_ACCESS_EXPR = auto()
    ASSIGN_EXPR = auto()


class AstNode:
    """Base of all nodes; every node has a kind and may carry a type."""

    kind: ClassVar[NodeKind]
    ty: CType | None = None

    def accept(self, visitor: Visitor) -> Any:
        return None


@dataclass
class VariableDecl(AstNode):
    name: str
    ty: CType | None = None
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECL

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_variable_decl(self)


class OpCode(Enum):
    add = auto()
    sub = auto()
    mul = auto()
    div = auto()


@dataclass
class BinaryExpr(AstNode):
    op: OpCode
    left: AstNode
    right: AstNode
    ty: CType | None = None
    kind: ClassVar[NodeKind] = NodeKind.BINARY_EXPR

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass
class NumberExpr(AstNode):
    number: int
    ty: CType | None = None
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_EXPR

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_number_expr(self)


@dataclass
class VariableAccessExpr(AstNode):
    name: str
    ty: CType | None = None
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_ACCESS_EXPR

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_variable_access_expr(self)


@dataclass
class AssignExpr(AstNode):
    left: AstNode
    right: AstNode
    ty: CType | None = None
    kind: ClassVar[NodeKind] = NodeKind.ASSIGN_EXPR

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass
class Program:
    exprs: list[AstNode] = field(default_factory=list)