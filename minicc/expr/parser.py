"""Recursive-descent parser for the expression language.

Grammar::

    prog   : (expr? ";")*
    expr   : term (("+" | "-") term)*
    term   : factor (("*" | "/") factor)*
    factor : number | "(" expr ")"
"""

from __future__ import annotations

from minicc.expr.ast_nodes import BinaryExpr, Expr, FactorExpr, OpCode, Program
from minicc.expr.lexer import Lexer, Token, TokenType


class ParseError(ValueError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(f"{token.row}:{token.col}: {message}")
        self.row = token.row
        self.col = token.col


_ADDITIVE = {TokenType.plus: OpCode.add, TokenType.minus: OpCode.sub}
_MULTIPLICATIVE = {TokenType.star: OpCode.mul, TokenType.slash: OpCode.div}


class Parser:
    """Builds a Program from the tokens of a lexer."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._tok = lexer.next_token()

    def parse_program(self) -> Program:
        exprs: list[Expr] = []
        while self._tok.token_type is not TokenType.eof:
            if self._consume(TokenType.semi):
                continue
            exprs.append(self._parse_expr())
        return Program(exprs)

    def _parse_binary(self, operators, operand) -> Expr:
        left = operand()
        while self._tok.token_type in operators:
            op = operators[self._tok.token_type]
            self._advance()
            left = BinaryExpr(op, left, operand())
        return left

    def _parse_expr(self) -> Expr:
        return self._parse_binary(_ADDITIVE, self._parse_term)

    def _parse_term(self) -> Expr:
        return self._parse_binary(_MULTIPLICATIVE, self._parse_factor)

    def _parse_factor(self) -> Expr:
        tok = self._tok
        if tok.token_type is TokenType.l_parent:
            self._advance()
            expr = self._parse_expr()
            if not self._consume(TokenType.r_parent):
                raise ParseError("expected ')'", self._tok)
            return expr
        if tok.token_type is TokenType.number:
            self._advance()
            return FactorExpr(tok.value)
        if tok.token_type is TokenType.eof:
            raise ParseError("unexpected end of input", tok)
        raise ParseError(f"unexpected token {tok.content!r}", tok)

    def _expect(self, token_type: TokenType) -> bool:
        return self._tok.token_type is token_type

    def _consume(self, token_type: TokenType) -> bool:
        if self._expect(token_type):
            self._advance()
            return True
        return False

    def _advance(self) -> None:
        self._tok = self._lexer.next_token()


def parse(source: str) -> Program:
    """Parse source text into a Program."""
    return Parser(Lexer(source)).parse_program()