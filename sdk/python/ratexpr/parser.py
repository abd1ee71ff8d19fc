"""Recursive-descent parser that evaluates as it parses.

Each precedence level returns a Fraction directly; no syntax tree is built.

    expression = term { ("+"|"-") term }
    term       = power { ("*"|"/"|"%") power }
    power      = unary [ "**" power ]
    unary      = ("+"|"-") unary | atom
    atom       = NUMBER | "(" expression ")"
"""

import logging
from fractions import Fraction
from typing import Optional

from .errors import DepthExceeded, EmptyExpression, ExprError, LexError, ParseError
from .evaluator import divide, format_rat, from_literal, modulo, power
from .scanner import scan_all
from .types import Limits, Token, TokenType

logger = logging.getLogger(__name__)


class Parser:
    __slots__ = ("tokens", "pos", "depth", "limits")

    def __init__(self, tokens: list[Token], limits: Optional[Limits] = None):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.limits = limits or Limits()

    def peek(self) -> Token:
        if self.pos >= len(self.tokens):
            end = self.tokens[-1].pos if self.tokens else 0
            return Token(TokenType.EOF, "", end)
        return self.tokens[self.pos]

    def consume(self, expected: TokenType) -> Token:
        t = self.peek()
        if t.typ is TokenType.EOF and expected is not TokenType.EOF:
            raise ParseError(f"unexpected EOF, expected {expected.value}", position=t.pos)
        if t.typ is not expected:
            raise ParseError(
                f"unexpected {t} at position {t.pos}, expected {expected.value}",
                position=t.pos,
            )
        self.pos += 1
        return t

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > self.limits.max_depth:
            raise DepthExceeded(
                f"max nesting depth of {self.limits.max_depth} exceeded",
                position=self.peek().pos,
            )

    def _leave(self) -> None:
        self.depth -= 1

    def parse_expression(self) -> Fraction:
        self._enter()
        try:
            lhs = self.parse_term()
            while True:
                t = self.peek()
                if t.typ is TokenType.ADD:
                    self.consume(t.typ)
                    lhs = lhs + self.parse_term()
                elif t.typ is TokenType.SUB:
                    self.consume(t.typ)
                    lhs = lhs - self.parse_term()
                else:
                    return lhs
        finally:
            self._leave()

    def parse_term(self) -> Fraction:
        lhs = self.parse_power()
        while True:
            t = self.peek()
            if t.typ is TokenType.MUL:
                self.consume(t.typ)
                lhs = lhs * self.parse_power()
            elif t.typ is TokenType.QUO:
                self.consume(t.typ)
                lhs = self._apply(divide, lhs, self.parse_power(), t)
            elif t.typ is TokenType.MODULO:
                self.consume(t.typ)
                lhs = self._apply(modulo, lhs, self.parse_power(), t)
            else:
                return lhs

    def parse_power(self) -> Fraction:
        self._enter()
        try:
            lhs = self.parse_unary()
            t = self.peek()
            if t.typ is not TokenType.POWER:
                return lhs
            self.consume(TokenType.POWER)
            rhs = self.parse_power()
            try:
                return power(lhs, rhs, self.limits.max_exponent)
            except ExprError as err:
                err.position = t.pos
                raise
        finally:
            self._leave()

    def parse_unary(self) -> Fraction:
        t = self.peek()
        if t.typ not in (TokenType.ADD, TokenType.SUB):
            return self.parse_atom()
        self.consume(t.typ)
        self._enter()
        try:
            val = self.parse_unary()
        finally:
            self._leave()
        return -val if t.typ is TokenType.SUB else val

    def parse_atom(self) -> Fraction:
        t = self.peek()
        if t.typ is TokenType.NUM:
            self.consume(t.typ)
            try:
                return from_literal(t.value)
            except (ArithmeticError, ValueError) as err:
                raise LexError(f"invalid number literal {t.value!r}", position=t.pos) from err
        if t.typ is TokenType.LPAREN:
            self.consume(t.typ)
            val = self.parse_expression()
            try:
                self.consume(TokenType.RPAREN)
            except ParseError as err:
                raise ParseError(
                    f"missing closing parenthesis for '(' at position {t.pos}: {err.message}",
                    position=err.position,
                ) from err
            return val
        if t.typ is TokenType.EOF:
            raise ParseError("unexpected EOF, expected a number or parenthesis", position=t.pos)
        raise ParseError(
            f"unexpected token in atom: {t} at position {t.pos} (expected number or '(')",
            position=t.pos,
        )

    @staticmethod
    def _apply(op, lhs: Fraction, rhs: Fraction, t: Token) -> Fraction:
        try:
            return op(lhs, rhs)
        except ExprError as err:
            err.position = t.pos
            raise


def parse(src: str, limits: Optional[Limits] = None) -> Fraction:
    """Scan, parse and evaluate a single expression to an exact Fraction."""
    try:
        tokens = scan_all(src)
        if len(tokens) <= 1:
            raise EmptyExpression("no evaluatable expression")
        p = Parser(tokens, limits)
        result = p.parse_expression()
        t = p.peek()
        if t.typ is not TokenType.EOF:
            raise ParseError(
                f"unexpected trailing tokens starting with {t} at position {t.pos}",
                position=t.pos,
            )
    except ExprError as err:
        if err.source is None:
            err.source = src
        raise
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parsed %r -> %s", src, format_rat(result))
    return result
