import pytest

from minicc.expr.ast_nodes import BinaryExpr, FactorExpr, OpCode, Program
from minicc.expr.lexer import Lexer
from minicc.expr.parser import ParseError, Parser, parse


def F(n):
    return FactorExpr(n)


def test_simple_addition():
    assert parse("1+2;") == Program([BinaryExpr(OpCode.add, F(1), F(2))])


def test_left_associative():
    expected = BinaryExpr(OpCode.sub, BinaryExpr(OpCode.sub, F(1), F(2)), F(3))
    assert parse("1-2-3").exprs == [expected]


def test_multiplication_binds_tighter():
    expected = BinaryExpr(OpCode.add, F(1), BinaryExpr(OpCode.mul, F(2), F(3)))
    assert parse("1+2*3").exprs == [expected]


def test_parentheses_group():
    expected = BinaryExpr(OpCode.mul, BinaryExpr(OpCode.add, F(1), F(2)), F(3))
    assert parse("(1+2)*3").exprs == [expected]


def test_division_chain():
    expected = BinaryExpr(OpCode.div, BinaryExpr(OpCode.div, F(8), F(4)), F(2))
    assert parse("8/4/2;").exprs == [expected]


def test_empty_statements_are_skipped():
    assert parse(";;;").exprs == []
    assert parse("1;;2;").exprs == [F(1), F(2)]


def test_parser_class_matches_parse():
    source = "(4 - 1) * 2; 9 / 3;"
    assert Parser(Lexer(source)).parse_program() == parse(source)


def test_missing_close_paren():
    with pytest.raises(ParseError):
        parse("(1+2")


def test_leading_operator_is_rejected():
    with pytest.raises(ParseError):
        parse("+1")


def test_unknown_character_is_rejected():
    with pytest.raises(ParseError):
        parse("1 @")


def test_error_position():
    with pytest.raises(ParseError) as info:
        parse("1;\n(2")
    assert info.value.row == 2