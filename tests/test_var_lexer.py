import pytest

from minicc.var.ctype import int_type
from minicc.var.lexer import Lexer, Token, TokenType


def types(source):
    return [token.token_type for token in Lexer(source)]


def test_declaration_token_types():
    assert types("int a, b = 3;") == [
        TokenType.kw_int,
        TokenType.identifier,
        TokenType.comma,
        TokenType.identifier,
        TokenType.equal,
        TokenType.number,
        TokenType.semi,
    ]


def test_arithmetic_token_types():
    assert types("(a+1)-b*2/c") == [
        TokenType.l_parent,
        TokenType.identifier,
        TokenType.plus,
        TokenType.number,
        TokenType.r_parent,
        TokenType.minus,
        TokenType.identifier,
        TokenType.star,
        TokenType.number,
        TokenType.slash,
        TokenType.identifier,
    ]


def test_number_token_has_value_and_int_type():
    tokens = list(Lexer("42 7"))
    assert [t.value for t in tokens] == [int(t.content) for t in tokens]
    assert all(t.ty is int_type() for t in tokens)


def test_identifiers_allow_underscore_and_digits():
    tokens = list(Lexer("_x1 y2z"))
    assert [t.content for t in tokens] == ["_x1", "y2z"]
    assert all(t.token_type is TokenType.identifier for t in tokens)


def test_keyword_only_when_whole_word():
    tokens = list(Lexer("int integer"))
    assert [t.token_type for t in tokens] == [TokenType.kw_int, TokenType.identifier]
    assert tokens[0].ty is None


@pytest.mark.parametrize("source", ["int a = 3;", "a  =  b + 12 ;"])
def test_columns_point_at_content_on_one_line(source):
    for token in Lexer(source):
        assert token.row == 1
        start = token.col - 1
        assert source[start:start + len(token.content)] == token.content


def test_rows_and_columns_across_lines():
    source = "int a;\r\n  a = 1;\nb"
    lines = source.split("\n")
    tokens = list(Lexer(source))
    assert tokens[-1].row == len(lines)
    for token in tokens:
        assert lines[token.row - 1][token.col - 1:].startswith(token.content)


def test_eof_repeats():
    lexer = Lexer("a ")
    assert lexer.next_token().token_type is TokenType.identifier
    assert lexer.next_token().token_type is TokenType.eof
    assert lexer.next_token().token_type is TokenType.eof


def test_unknown_character():
    tokens = list(Lexer("#a"))
    assert tokens[0].token_type is TokenType.unknown
    assert tokens[0].content == "#"
    assert tokens[1].content == "a"


def test_dump_format():
    token = Token(TokenType.identifier, 1, 5, content="a")
    assert token.dump() == "{ a, row = 1, col = 5}"


def test_default_token():
    token = Token()
    assert (token.row, token.col, token.value) == (-1, -1, -1)
    assert token.token_type is TokenType.unknown