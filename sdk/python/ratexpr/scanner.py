"""Scanner for arithmetic expressions: characters to tokens."""

from typing import Iterator

from .errors import LexError
from .types import Token, TokenType

_SINGLE = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "*": TokenType.MUL,
    "/": TokenType.QUO,
    "%": TokenType.MODULO,
}


class Scanner:
    __slots__ = ("src", "pos")

    def __init__(self, src: str):
        self.src = src
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.scan()
            yield tok
            if tok.typ is TokenType.EOF:
                return

    def _digit_at(self, i: int) -> bool:
        return i < len(self.src) and self.src[i].isdecimal()

    def _skip_digits(self) -> None:
        while self._digit_at(self.pos):
            self.pos += 1

    def scan(self) -> Token:
        src = self.src
        start = self.pos
        if start >= len(src):
            return Token(TokenType.EOF, "", start)

        ch = src[start]
        if ch.isspace():
            while self.pos < len(src) and src[self.pos].isspace():
                self.pos += 1
            return Token(TokenType.WS, src[start:self.pos], start)

        if src.startswith("**", start):
            self.pos += 2
            return Token(TokenType.POWER, "**", start)

        if ch.isdecimal():
            self._skip_digits()
            if self.pos < len(src) and src[self.pos] == ".":
                # "1." is rejected as a whole rather than split into "1" and "."
                if not self._digit_at(self.pos + 1):
                    self.pos += 1
                    return Token(TokenType.ILLEGAL, src[start:self.pos], start)
                self.pos += 1
                self._skip_digits()
            return Token(TokenType.NUM, src[start:self.pos], start)

        if ch == ".":
            self.pos += 1
            if not self._digit_at(self.pos):
                return Token(TokenType.ILLEGAL, ch, start)
            self._skip_digits()
            return Token(TokenType.NUM, src[start:self.pos], start)

        self.pos += 1
        return Token(_SINGLE.get(ch, TokenType.ILLEGAL), ch, start)


def scan_all(src: str) -> list[Token]:
    """Drain a Scanner into a list, dropping whitespace.

    The returned list always ends with the EOF token. Raises LexError on the
    first illegal token.
    """
    tokens: list[Token] = []
    for tok in Scanner(src):
        if tok.typ is TokenType.ILLEGAL:
            raise LexError(
                f"illegal token {tok.value!r} near position {tok.pos}",
                position=tok.pos,
            )
        if tok.typ is not TokenType.WS:
            tokens.append(tok)
    return tokens
