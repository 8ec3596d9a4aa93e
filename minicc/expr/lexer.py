"""Tokenizer for the arithmetic expression language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    unknown = auto()
    number = auto()
    minus = auto()
    plus = auto()
    star = auto()
    slash = auto()
    l_parent = auto()
    r_parent = auto()
    semi = auto()
    eof = auto()


_WHITESPACE = frozenset(" \r\n")

_PUNCTUATION = {
    "+": TokenType.plus,
    "-": TokenType.minus,
    "*": TokenType.star,
    "/": TokenType.slash,
    ";": TokenType.semi,
    "(": TokenType.l_parent,
    ")": TokenType.r_parent,
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


@dataclass
class Token:
    """A token with its 1-based position in the source."""

    token_type: TokenType = TokenType.unknown
    row: int = -1
    col: int = -1
    value: int = -1
    content: str = ""

    def dump(self) -> str:
        """The token as one line of the token listing."""
        return f"{{ {self.content}, row = {self.row}, col = {self.col}}}"


class Lexer:
    """Turns source text into tokens, one call to next_token at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line_head = 0
        self._row = 1

    def _skip_whitespace(self) -> None:
        source = self._source
        while self._pos < len(source) and source[self._pos] in _WHITESPACE:
            if source[self._pos] == "\n":
                self._row += 1
                self._line_head = self._pos + 1
            self._pos += 1

    def next_token(self) -> Token:
        """Return the next token; at the end of input, an eof token every time."""
        self._skip_whitespace()
        source = self._source
        row = self._row
        col = self._pos - self._line_head + 1

        if self._pos >= len(source):
            return Token(TokenType.eof, row, col)

        start = self._pos
        ch = source[start]
        if _is_digit(ch):
            end = start
            while end < len(source) and _is_digit(source[end]):
                end += 1
            self._pos = end
            text = source[start:end]
            return Token(TokenType.number, row, col, int(text), text)

        self._pos += 1
        return Token(_PUNCTUATION.get(ch, TokenType.unknown), row, col, content=ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before eof."""
        while True:
            token = self.next_token()
            if token.token_type is TokenType.eof:
                return
            yield token