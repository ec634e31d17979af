import pytest

from harbol.lex.decimal import lex_c_decimal, lex_go_decimal
from harbol.lex.errors import LexCode

OK = LexCode.NO_ERROR


@pytest.mark.parametrize(
    "source, code, text",
    [
        ("1'000", OK, "1'000"),
        ("1''0", LexCode.EXTRA_DIGIT_SEPS, "1''"),
        ("1'", LexCode.DIGIT_SEP_NOT_SEP_DIGITS, "1'"),
        ("1.5e", LexCode.NO_NUM_AFTER_EXP, "1.5e"),
        ("1..2", LexCode.EXTRA_FLT_DOT, "1.."),
        ("1ee", LexCode.EXTRA_EXP, "1ee"),
        ("1.0fe", LexCode.EXP_AFTER_FLT_SUFFIX, "1.0fe"),
        ("1.0ff", LexCode.EXTRA_FLT_SUFFIX, "1.0ff"),
        ("5uu", LexCode.TOO_MANY_US, "5uu"),
        ("5lul", LexCode.U_BETWEEN_LS, "5lu"),
        ("5lll", LexCode.TOO_MANY_LS, "5lll"),
        ("5u1", LexCode.INT_EXTRA_SUFFIX, "5u1"),
        ("1.0f1", LexCode.FLT_EXTRA_SUFFIX, "1.0f1"),
        ("12g", LexCode.BAD_GLYPH, "12g"),
        ("1'.5", LexCode.DIGIT_SEP_NEAR_DOT, "1'."),
        ("1.'5", LexCode.DIGIT_SEP_NEAR_DOT, "1."),
        ("1e'5", LexCode.DIGIT_SEP_NOT_SEP_DIGITS, "1e"),
        ("1e+", LexCode.NO_NUM_AFTER_EXP, "1e+"),
        ("1e5+", OK, "1e5"),
        ("1.0e+001L", OK, "1.0e+001L"),
    ],
)
def test_c_decimal_more_cases(source, code, text):
    result = lex_c_decimal(source)
    assert result.code == code
    assert result.text == text


def test_c_decimal_starting_offset():
    result = lex_c_decimal("x = 12;", 4)
    assert (result.code, result.text, result.end) == (OK, "12", 6)


def test_c_decimal_eof():
    assert lex_c_decimal("").code == LexCode.EOF
    assert lex_c_decimal("12", 2).code == LexCode.EOF


def test_c_decimal_message():
    assert lex_c_decimal("0f").message == "Missing dot/exponent mark."
    assert lex_c_decimal("33").ok is True


@pytest.mark.parametrize(
    "source, code, text, is_float",
    [
        ("0.", OK, "0.", True),
        ("72.40", OK, "72.40", True),
        ("072.40", OK, "072.40", True),
        ("2.71828", OK, "2.71828", True),
        ("1.e+0", OK, "1.e+0", True),
        ("6.67428e-11", OK, "6.67428e-11", True),
        ("1E6", OK, "1E6", True),
        (".25", OK, ".25", True),
        (".12345E+5", OK, ".12345E+5", True),
        ("1_5.", OK, "1_5.", True),
        ("0.15e+0_2", OK, "0.15e+0_2", True),
        ("1_.5", LexCode.DIGIT_SEP_NEAR_DOT, "1_.", True),
        ("1._5", LexCode.DIGIT_SEP_NEAR_DOT, "1.", True),
        ("1.5_e1", LexCode.DIGIT_SEP_NOT_SEP_DIGITS, "1.5_e", True),
        ("1.5e_1", LexCode.DIGIT_SEP_NOT_SEP_DIGITS, "1.5e", True),
        ("1.5e1_", LexCode.DIGIT_SEP_NOT_SEP_DIGITS, "1.5e1_", True),
    ],
)
def test_go_decimal_source_cases(source, code, text, is_float):
    result = lex_go_decimal(source)
    assert result.code == code
    assert result.text == text
    assert result.is_float == is_float


@pytest.mark.parametrize(
    "source, code, text, end",
    [
        ("1__2", LexCode.EXTRA_DIGIT_SEPS, "1__", 2),
        ("12a", LexCode.BAD_GLYPH, "12a", 2),
        ("1ee", LexCode.EXTRA_EXP, "1ee", 2),
        ("1e+", LexCode.NO_NUM_AFTER_EXP, "1e+", 2),
        ("1e", LexCode.NO_NUM_AFTER_EXP, "1e", 2),
        ("1..2", LexCode.EXTRA_FLT_DOT, "1..", 2),
        ("5+3", OK, "5", 1),
        ("1.5+3", OK, "1.5+3", 5),
        ("1_000", OK, "1_000", 5),
    ],
)
def test_go_decimal_more_cases(source, code, text, end):
    result = lex_go_decimal(source)
    assert result.code == code
    assert result.text == text
    assert result.end == end


def test_go_decimal_integer_is_not_float():
    result = lex_go_decimal("42")
    assert result.ok
    assert result.is_float is False


def test_go_decimal_eof():
    assert lex_go_decimal("").code == LexCode.EOF