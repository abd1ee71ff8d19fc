"""Exception hierarchy for expression evaluation.

Every error is an ExprError, so callers can catch one class or match on
the specific kind. ``source`` holds the text being evaluated and
``position`` the offset of the offending fragment, when known.
"""

from typing import Optional


class ExprError(ValueError):
    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.source = source
        self.position = position

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"{self.message} (in {self.source!r})"


class LexError(ExprError):
    pass


class ParseError(ExprError, SyntaxError):
    pass


class EmptyExpression(ExprError):
    pass


class DepthExceeded(ExprError):
    pass


class MathError(ExprError, ArithmeticError):
    pass


class DivisionByZero(MathError, ZeroDivisionError):
    pass


class ModuloOperandError(MathError):
    pass


class ExponentError(MathError):
    pass


class ExponentTooLarge(MathError):
    pass


class ZeroToNegativePower(MathError, ZeroDivisionError):
    pass
