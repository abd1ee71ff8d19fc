from fractions import Fraction as F

import pytest
from ratexpr.errors import (
    DivisionByZero,
    EmptyExpression,
    ExponentError,
    LexError,
    ModuloOperandError,
    ParseError,
    ZeroToNegativePower,
)
from ratexpr.parser import parse


def test_parse_integer():
    assert parse("42") == 42


def test_parse_decimal_is_exact():
    assert parse("0.1 + 0.2") == F(3, 10)


def test_parse_leading_dot():
    assert parse(".5") == F(1, 2)


def test_parse_big_integer():
    assert parse("123456789012345678901234567890 * 10") == 1234567890123456789012345678900


def test_addition_and_subtraction_left_assoc():
    assert parse("10 - 3 - 2") == 5
    assert parse("1 - 2 + 3") == 2


def test_multiplicative_left_assoc():
    assert parse("8 / 4 / 2") == 1
    assert parse("2 * 5 % 3") == 1
    assert parse("17 % 5 * 2") == 4


def test_precedence():
    assert parse("10 * 5 + 2") == 52
    assert parse("2 + 3 * 4") == 14
    assert parse("2 * 3 ** 2") == 18
    assert parse("2 ** 3 % 5") == 3


def test_power_right_assoc():
    assert parse("2 ** 3 ** 2") == 512


def test_unary_binds_as_power_operand():
    assert parse("-2 ** 2") == 4
    assert parse("2 ** -1") == F(1, 2)


def test_unary_chain():
    assert parse("--1") == 1
    assert parse("+-+1") == -1
    assert parse(".01*-0.01") == F(-1, 10000)


def test_parentheses():
    assert parse("((10 + 100)) * (3)") == 330
    assert parse("-(1 - 3)") == 2


def test_result_in_lowest_terms():
    r = parse("6 / -4")
    assert (r.numerator, r.denominator) == (-3, 2)


def test_canonical_rendering_round_trips():
    for src in ("1/3", "10.5 / 0.5", ".01*-0.01", "2 ** -3", "7 % 3 - 1/9"):
        value = parse(src)
        assert parse(str(value)) == value


def test_zero_power_zero():
    assert parse("0 ** 0") == 1


def test_fractional_exponent():
    with pytest.raises(ExponentError):
        parse("4 ** 0.5")


def test_zero_to_negative_power():
    with pytest.raises(ZeroToNegativePower):
        parse("0 ** -2")


def test_division_by_zero():
    with pytest.raises(DivisionByZero, match="division by zero") as exc:
        parse("1 / (2 - 2)")
    assert exc.value.position == 2
    assert exc.value.source == "1 / (2 - 2)"


def test_modulo_by_zero():
    with pytest.raises(DivisionByZero):
        parse("5 % 0")


def test_modulo_non_integer():
    with pytest.raises(ModuloOperandError):
        parse("5.5 % 2")


def test_unterminated_paren():
    with pytest.raises(ParseError, match="missing closing parenthesis") as exc:
        parse("(1+2")
    assert isinstance(exc.value.__cause__, ParseError)
    assert "unexpected EOF" in str(exc.value.__cause__)


def test_parse_error_is_syntax_error():
    with pytest.raises(SyntaxError):
        parse("(1+2")


def test_trailing_tokens():
    with pytest.raises(ParseError, match="unexpected trailing tokens") as exc:
        parse("1 2")
    assert exc.value.position == 2


def test_unexpected_close_paren():
    with pytest.raises(ParseError, match="unexpected token in atom"):
        parse(")")


def test_dangling_operator():
    with pytest.raises(ParseError, match="unexpected EOF"):
        parse("1 +")


def test_lex_errors():
    with pytest.raises(LexError):
        parse("1.")
    with pytest.raises(LexError):
        parse(".a")


def test_error_message_names_source():
    with pytest.raises(LexError, match=r"in '2 \$ 3'"):
        parse("2 $ 3")


def test_empty_expression():
    with pytest.raises(EmptyExpression):
        parse("")
    with pytest.raises(EmptyExpression):
        parse("   ")


def test_parse_literal_beyond_int_str_digit_limit():
    repunit = (10 ** 5000 - 1) // 9
    assert parse("1" * 5000) == repunit
    assert parse("1" * 5000 + ".5") == F(2 * repunit + 1, 2)
