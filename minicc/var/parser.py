"""Recursive-descent parser for the language with integer variables.

Grammar::

    prog   : (decl | expr? ";")*
    decl   : "int" ident ("=" expr)? ("," ident ("=" expr)?)* ";"
    expr   : term (("+" | "-") term)*
    term   : factor (("*" | "/") factor)*
    factor : number | ident | "(" expr ")"

A declaration with an initialiser, ``int a = 3;``, becomes a declaration
node followed by an assignment node.
"""

from __future__ import annotations

from minicc.var.ast_nodes import AstNode, OpCode, Program
from minicc.var.ctype import int_type
from minicc.var.lexer import Lexer, Token, TokenType
from minicc.var.sema import Sema


class ParseError(ValueError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(f"{token.row}:{token.col}: {message}")
        self.row = token.row
        self.col = token.col


_ADDITIVE = {TokenType.plus: OpCode.add, TokenType.minus: OpCode.sub}
_MULTIPLICATIVE = {TokenType.star: OpCode.mul, TokenType.slash: OpCode.div}


class Parser:
    """Builds a Program from the tokens of a lexer, checking it with a Sema."""

    def __init__(self, lexer: Lexer, sema: Sema | None = None) -> None:
        self._lexer = lexer
        self._sema = Sema() if sema is None else sema
        self._tok = lexer.next_token()

    def parse_program(self) -> Program:
        nodes: list[AstNode] = []
        while self._tok.token_type is not TokenType.eof:
            if self._consume(TokenType.semi):
                continue
            if self._expect(TokenType.kw_int):
                nodes.extend(self._parse_decl())
            else:
                nodes.append(self._parse_expr())
        return Program(nodes)

    def _parse_decl(self) -> list[AstNode]:
        self._consume(TokenType.kw_int)
        base_type = int_type()
        nodes: list[AstNode] = []
        first = True
        while not self._expect(TokenType.semi):
            if not first:
                self._consume(TokenType.comma)
            first = False
            tok = self._tok
            if tok.token_type is TokenType.eof:
                raise ParseError("unexpected end of input", tok)
            if tok.token_type is not TokenType.identifier:
                raise ParseError(f"expected identifier, got {tok.content!r}", tok)
            nodes.append(self._sema.variable_decl_node(tok.content, base_type))
            self._advance()
            if self._consume(TokenType.equal):
                left = self._sema.variable_access_node(tok.content)
                right = self._parse_expr()
                nodes.append(self._sema.assign_expr_node(left, right))
        self._consume(TokenType.semi)
        return nodes

    def _parse_binary(self, operators, operand) -> AstNode:
        left = operand()
        while self._tok.token_type in operators:
            op = operators[self._tok.token_type]
            self._advance()
            right = operand()
            left = self._sema.binary_expr_node(left, right, op)
        return left

    def _parse_expr(self) -> AstNode:
        return self._parse_binary(_ADDITIVE, self._parse_term)

    def _parse_term(self) -> AstNode:
        return self._parse_binary(_MULTIPLICATIVE, self._parse_factor)

    def _parse_factor(self) -> AstNode:
        tok = self._tok
        if tok.token_type is TokenType.l_parent:
            self._advance()
            expr = self._parse_expr()
            if not self._consume(TokenType.r_parent):
                raise ParseError("expected ')'", self._tok)
            return expr
        if tok.token_type is TokenType.identifier:
            expr = self._sema.variable_access_node(tok.content)
            self._advance()
            return expr
        if tok.token_type is TokenType.number:
            self._advance()
            return self._sema.number_expr_node(tok.value, tok.ty)
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
    """Parse source text into a checked Program."""
    return Parser(Lexer(source)).parse_program()