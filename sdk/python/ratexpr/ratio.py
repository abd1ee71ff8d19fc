"""Top-level API: evaluate numerator/denominator expression pairs."""

import logging
from fractions import Fraction
from typing import Any, Optional

from .errors import DivisionByZero, EmptyExpression, ExprError
from .evaluator import format_rat
from .parser import parse
from .types import Expr, Limits

logger = logging.getLogger(__name__)

# Denominators that need no evaluation
_IDENTITY_DENOMS = ("", "1")


def rat_from_expr(expr: Expr, limits: Optional[Limits] = None) -> Fraction:
    """Evaluate ``expr.num / expr.denom`` to an exact, reduced Fraction.

    A blank denominator, or the literal "1", is not evaluated.

    Raises:
        EmptyExpression: the numerator is blank
        DivisionByZero: the denominator evaluates to zero
        ExprError: any lex, parse or arithmetic error in either side
    """
    if not expr.num.strip():
        raise EmptyExpression("numerator is empty")

    num = parse(expr.num, limits)
    if expr.denom.strip() in _IDENTITY_DENOMS:
        return num

    den = parse(expr.denom, limits)
    if den == 0:
        raise DivisionByZero("divide by zero", source=expr.denom)
    result = num / den
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("evaluated %s -> %s", expr, format_rat(result))
    return result


def ratio(numerator: str, denominator: str = "", limits: Optional[Limits] = None) -> Fraction:
    return rat_from_expr(Expr(numerator, denominator), limits)


def try_rat_from_expr(expr: Expr, limits: Optional[Limits] = None) -> dict[str, Any]:
    """Like rat_from_expr, but reports errors in the result instead of raising.

    Returns:
        {"ok": bool, "value": Fraction | None, "error": str | None, "kind": str | None}
    """
    try:
        value = rat_from_expr(expr, limits)
    except ExprError as err:
        logger.debug("evaluation of %s failed: %s", expr, err)
        return {"ok": False, "value": None, "error": str(err), "kind": type(err).__name__}
    return {"ok": True, "value": value, "error": None, "kind": None}

