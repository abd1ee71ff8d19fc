"""Exact rational operations applied by the parser. Power, division, modulo."""

from decimal import Decimal
from fractions import Fraction
from typing import Optional

from .errors import (
    DivisionByZero,
    ExponentError,
    ExponentTooLarge,
    ModuloOperandError,
    ZeroToNegativePower,
)


def _is_int(x: Fraction) -> bool:
    return x.denominator == 1


# int() and str() on integers are capped by sys.get_int_max_str_digits();
# Decimal converts without that cap.
def from_literal(text: str) -> Fraction:
    return Fraction(Decimal(text))


def format_rat(value: Fraction) -> str:
    """Canonical rendering: "n" when the denominator is 1, else "n/d"."""
    num = str(Decimal(value.numerator))
    if value.denominator == 1:
        return num
    return f"{num}/{Decimal(value.denominator)}"


def divide(lhs: Fraction, rhs: Fraction) -> Fraction:
    if rhs == 0:
        raise DivisionByZero("division by zero in expression")
    return lhs / rhs


def modulo(lhs: Fraction, rhs: Fraction) -> Fraction:
    """Truncated integer remainder: the sign follows the dividend.

    Python's ``%`` floors, so ``-7 % 2 == 1``; here ``-7 % 2`` is ``-1``.
    """
    if not _is_int(lhs) or not _is_int(rhs):
        raise ModuloOperandError("modulo operator requires integer operands")
    a, b = lhs.numerator, rhs.numerator
    if b == 0:
        raise DivisionByZero("modulo by zero in expression")
    rem = abs(a) % abs(b)
    return Fraction(-rem if a < 0 else rem)


def power(base: Fraction, exponent: Fraction, max_exponent: Optional[int] = None) -> Fraction:
    """Raise a rational to an integer power exactly.

    Negative exponents invert the base: ``(n/d) ** -k == d**k / n**k``.
    Any base to the 0th power is 1, including 0.
    """
    if not _is_int(exponent):
        raise ExponentError("exponent must be integer for power operation")
    exp = exponent.numerator
    if base == 0 and exp < 0:
        raise ZeroToNegativePower("math error: 0 raised to a negative power")
    if max_exponent is not None and abs(exp) > max_exponent:
        raise ExponentTooLarge(f"exponent {exp} exceeds limit of {max_exponent}")

    num, den = base.numerator, base.denominator
    if exp >= 0:
        final_num, final_den = num ** exp, den ** exp
    else:
        final_num, final_den = den ** -exp, num ** -exp
    if final_den == 0:
        raise ZeroToNegativePower("math error: division by zero in power calculation")
    return Fraction(final_num, final_den)
