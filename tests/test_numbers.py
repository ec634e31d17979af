import pytest

from harbol.lex.errors import LexCode
from harbol.lex.numbers import (
    lex_c_binary,
    lex_c_number,
    lex_c_octal,
    lex_go_binary,
    lex_go_number,
    lex_go_octal,
)

OK = LexCode.NO_ERROR


@pytest.mark.parametrize(
    "source, code, text",
    [
        ("0553", OK, "0553"),
        ("0553ULL", OK, "0553ULL"),
        ("0553u", OK, "0553u"),
        ("0553llu", OK, "0553llu"),
        ("0777", OK, "0777"),
        ("0553LUL", LexCode.U_BETWEEN_LS, "0553LU"),
        ("553", LexCode.MISSING_0, "5"),
        ("078", LexCode.BAD_GLYPH, "078"),
    ],
)
def test_c_octal(source, code, text):
    result = lex_c_octal(source)
    assert result.code == code
    assert result.text == text
    assert result.is_float is False


def test_c_octal_dot_continues_as_decimal():
    result = lex_c_octal("01.5")
    assert result.code == OK
    assert result.text == "01.5"
    assert result.is_float is True
    assert result.end == 4


@pytest.mark.parametrize(
    "source, code, text",
    [
        ("0o553", OK, "0o553"),
        ("0o777", OK, "0o777"),
        ("0o78", LexCode.BAD_GLYPH, "0o78"),
        ("0o553ULL", LexCode.BAD_GLYPH, "0o553U"),
        ("0o553LUL", LexCode.BAD_GLYPH, "0o553L"),
        ("0o553ull", LexCode.BAD_GLYPH, "0o553u"),
        ("553", LexCode.MISSING_0, "5"),
        ("0553", LexCode.MISSING_O, "05"),
    ],
)
def test_go_octal(source, code, text):
    result = lex_go_octal(source)
    assert result.code == code
    assert result.text == text


@pytest.mark.parametrize(
    "source, code, text",
    [
        ("0b11101", OK, "0b11101"),
        ("0b101ULL", OK, "0b101ULL"),
        ("0b1u", OK, "0b1u"),
        ("0b101llu", OK, "0b101llu"),
        ("b1101010", LexCode.MISSING_0, "b"),
        ("0b10002", LexCode.BAD_GLYPH, "0b10002"),
        ("011101010", LexCode.MISSING_B, "01"),
    ],
)
def test_c_binary(source, code, text):
    result = lex_c_binary(source)
    assert result.code == code
    assert result.text == text


@pytest.mark.parametrize(
    "source, code, text",
    [
        ("0b11101", OK, "0b11101"),
        ("0b110_101", OK, "0b110_101"),
        ("b1101010", LexCode.MISSING_0, "b"),
        ("0b10002", LexCode.BAD_GLYPH, "0b10002"),
        ("011101010", LexCode.MISSING_B, "01"),
    ],
)
def test_go_binary(source, code, text):
    result = lex_go_binary(source)
    assert result.code == code
    assert result.text == text


def test_trailing_separator_is_an_error():
    assert lex_go_binary("0b1_").code == LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    assert lex_c_binary("0b1''1").code == LexCode.EXTRA_DIGIT_SEPS


@pytest.mark.parametrize("lexer", [lex_c_octal, lex_go_octal, lex_c_binary, lex_go_binary])
def test_empty_input_is_eof(lexer):
    assert lexer("").code == LexCode.EOF


@pytest.mark.parametrize(
    "source, code, text, is_float",
    [
        ("0X5'5", OK, "0X5'5", False),
        ("0X5fl", OK, "0X5fl", False),
        ("0x55LLU", OK, "0x55LLU", False),
        ("0X5full", OK, "0X5full", False),
        ("0X'CAFE'BABE", OK, "0X'CAFE'BABE", False),
        ("0x0.3p10", OK, "0x0.3p10", True),
        ("0x1.2p3", OK, "0x1.2p3", True),
        ("0x1p+1", OK, "0x1p+1", True),
        ("0x1.b7p-1", OK, "0x1.b7p-1", True),
        ("0x3.3333333333334p-5", OK, "0x3.3333333333334p-5", True),
        ("0x1.f", LexCode.HEX_FLT_NO_EXP, "0x1.f", True),
        ("0553", OK, "0553", False),
        ("05'53ULL", OK, "05'53ULL", False),
        ("0553u", OK, "0553u", False),
        ("0553llu", OK, "0553llu", False),
        ("07'77", OK, "07'77", False),
        ("0553LUL", LexCode.U_BETWEEN_LS, "0553LU", False),
        ("55'3", OK, "55'3", False),
        ("078", LexCode.BAD_GLYPH, "078", False),
        (".llu", LexCode.INT_SUFFIX_ON_FLT, ".llu", True),
        ("1.0e+001L", OK, "1.0e+001L", True),
        ("0ullll", LexCode.TOO_MANY_LS, "0ulll", False),
        ("1.401608261624146e-15+", OK, "1.401608261624146e-15", True),
        ("2.289e1+", OK, "2.289e1", True),
    ],
)
def test_c_number(source, code, text, is_float):
    result = lex_c_number(source)
    assert result.code == code
    assert result.text == text
    assert result.is_float is is_float


def test_c_number_stops_before_extra_sign():
    assert lex_c_number("2.289e1+").end == 7


def test_c_number_on_non_number():
    result = lex_c_number("abc")
    assert result.code == OK
    assert result.text == ""
    assert result.end == 0


@pytest.mark.parametrize(
    "source, text, is_float",
    [
        ("0xBadFace", "0xBadFace", False),
        ("0o17", "0o17", False),
        ("0b101", "0b101", False),
        ("1_000", "1_000", False),
        ("0", "0", False),
        (".5", ".5", True),
        ("0x15e-2", "0x15e", False),
    ],
)
def test_go_number(source, text, is_float):
    result = lex_go_number(source)
    assert result.code == OK
    assert result.text == text
    assert result.is_float is is_float


def test_go_number_at_offset():
    result = lex_go_number("x = 0o7;", 4)
    assert result.text == "0o7"
    assert result.end == 7