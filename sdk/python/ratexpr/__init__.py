from .errors import (
    DepthExceeded,
    DivisionByZero,
    EmptyExpression,
    ExponentError,
    ExponentTooLarge,
    ExprError,
    LexError,
    MathError,
    ModuloOperandError,
    ParseError,
    ZeroToNegativePower,
)
from .parser import parse
from .ratio import format_rat, rat_from_expr, ratio, try_rat_from_expr
from .scanner import Scanner, scan_all
from .types import Expr, Limits, Token, TokenType

__all__ = [
    "parse", "rat_from_expr", "ratio", "try_rat_from_expr", "format_rat",
    "Scanner", "scan_all", "Expr", "Limits", "Token", "TokenType",
    "ExprError", "LexError", "ParseError", "EmptyExpression", "DepthExceeded",
    "MathError", "DivisionByZero", "ModuloOperandError", "ExponentError",
    "ExponentTooLarge", "ZeroToNegativePower",
]
