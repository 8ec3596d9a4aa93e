import pytest

from minicc.var.ast_nodes import (
    AssignExpr,
    AstNode,
    BinaryExpr,
    NodeKind,
    NumberExpr,
    OpCode,
    Program,
    VariableAccessExpr,
    VariableDecl,
    Visitor,
)
from minicc.var.ctype import int_type


class Recorder(Visitor):
    def visit_program(self, program):
        return [node.accept(self) for node in program.exprs]

    def visit_variable_decl(self, decl):
        return ("decl", decl.name)

    def visit_assign_expr(self, expr):
        return ("assign", expr.left.accept(self), expr.right.accept(self))

    def visit_number_expr(self, expr):
        return ("number", expr.number)

    def visit_binary_expr(self, expr):
        return ("binary", expr.op, expr.left.accept(self), expr.right.accept(self))

    def visit_variable_access_expr(self, expr):
        return ("access", expr.name)


def test_accept_dispatches_to_matching_visit():
    program = Program([
        VariableDecl("a", int_type()),
        AssignExpr(VariableAccessExpr("a"), BinaryExpr(OpCode.add, NumberExpr(1), NumberExpr(2))),
    ])
    assert Recorder().visit_program(program) == [
        ("decl", "a"),
        ("assign", ("access", "a"), ("binary", OpCode.add, ("number", 1), ("number", 2))),
    ]


@pytest.mark.parametrize(
    "node, kind",
    [
        (VariableDecl("x"), NodeKind.VARIABLE_DECL),
        (BinaryExpr(OpCode.mul, NumberExpr(1), NumberExpr(2)), NodeKind.BINARY_EXPR),
        (NumberExpr(5), NodeKind.NUMBER_EXPR),
        (VariableAccessExpr("x"), NodeKind.VARIABLE_ACCESS_EXPR),
        (AssignExpr(VariableAccessExpr("x"), NumberExpr(1)), NodeKind.ASSIGN_EXPR),
    ],
)
def test_node_kinds(node, kind):
    assert node.kind is kind


def test_type_defaults_to_none_and_can_be_set():
    node = NumberExpr(3)
    assert node.ty is None
    typed = NumberExpr(3, int_type())
    assert typed.ty is int_type()


def test_base_node_accepts_nothing():
    assert AstNode().accept(Recorder()) is None


def test_program_starts_empty():
    assert Program().exprs == []
    assert Recorder().visit_program(Program()) == []


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()