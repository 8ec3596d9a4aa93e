"""Syntax tree of the expression language and the visitor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class Visitor(ABC):
    """Walks a program; each visit returns whatever the visitor produces."""

    @abstractmethod
    def visit_program(self, program: Program) -> Any: ...

    @abstractmethod
    def visit_binary_expr(self, expr: BinaryExpr) -> Any: ...

    @abstractmethod
    def visit_factor_expr(self, expr: FactorExpr) -> Any: ...


class OpCode(Enum):
    add = auto()
    sub = auto()
    mul = auto()
    div = auto()


class Expr:
    """Base of all expression nodes."""

    def accept(self, visitor: Visitor) -> Any:
        return None


@dataclass
class BinaryExpr(Expr):
    op: OpCode
    left: Expr
    right: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass
class FactorExpr(Expr):
    number: int

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_factor_expr(self)


@dataclass
class Program:
    exprs: list[Expr] = field(default_factory=list)