from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"
    WS = "WS"
    NUM = "NUM"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    QUO = "QUO"
    POWER = "POWER"
    MODULO = "MODULO"


@dataclass(frozen=True)
class Token:
    typ: TokenType
    value: str = ""
    pos: int = 0

    def __str__(self) -> str:
        return f"Token({self.typ.value}, {self.value!r})"


@dataclass(frozen=True)
class Expr:
    """A numerator/denominator pair of expression strings."""
    num: str
    denom: str = ""

    def __str__(self) -> str:
        return f"Expr(Num: {self.num!r}, Denom: {self.denom!r})"


DEFAULT_MAX_DEPTH = 256


@dataclass
class Limits:
    max_depth: int = DEFAULT_MAX_DEPTH
    # None disables the exponent bound
    max_exponent: Optional[int] = None
