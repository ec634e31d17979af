"""Result codes and the result record shared by the lexing functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DIGIT_SEP_C = "'"
DIGIT_SEP_GO = "_"


class LexCode(IntEnum):
    NO_ERROR = 0
    EOF = 1
    MISSING_0 = 2
    MISSING_X = 3
    MISSING_O = 4
    MISSING_B = 5
    MISSING_HEX_BEFORE_DOT = 6
    TOO_MANY_PS = 7
    BAD_PLUS_MINUS_PLACE = 8
    NO_NUM_AFTER_EXP = 9
    TOO_MANY_US = 10
    TOO_MANY_LS = 11
    U_BETWEEN_LS = 12
    HEX_FLT_EXP_NO_DIGITS = 13
    HEX_FLT_BAD_SUFFIX = 14
    INT_EXTRA_SUFFIX = 15
    FLT_EXTRA_SUFFIX = 16
    BAD_GLYPH = 17
    HEX_MISSING_DIGITS = 18
    HEX_NO_DIGITS_BEFORE_EXP = 19
    DIGIT_SEP_NEAR_DOT = 20
    DIGIT_SEP_NEAR_EXP = 21
    EXTRA_DIGIT_SEPS = 22
    HEX_FLT_NO_EXP = 23
    DIGIT_SEP_MISSING_DIGITS = 24
    EXTRA_FLT_DOT = 25
    EXTRA_FLT_SUFFIX = 26
    EXTRA_EXP = 27
    MISSING_DOT_OR_EXP = 28
    EXP_AFTER_FLT_SUFFIX = 29
    FLT_SUFFIX_AFTER_EXP_NO_DIGITS = 30
    INT_SUFFIX_ON_FLT = 31
    BAD_OCTAL_CHAR = 32
    BAD_HEX_CHAR = 33
    BAD_UNICODE_CHAR = 34
    SUDDEN_EOF_STR = 35
    DIGIT_SEP_NOT_SEP_DIGITS = 36


_MESSAGES = {
    LexCode.NO_ERROR: "No Lexing Error.",
    LexCode.EOF: "Sudden End of File/Str.",
    LexCode.MISSING_0: "Missing initial '0'.",
    LexCode.MISSING_X: "Missing hex notation 'x'.",
    LexCode.MISSING_O: "Missing octal notation 'o'.",
    LexCode.MISSING_B: "Missing binary notation 'b'.",
    LexCode.MISSING_HEX_BEFORE_DOT: "Missing hex digit before dot.",
    LexCode.TOO_MANY_PS: "Too many P marks in hex literal.",
    LexCode.BAD_PLUS_MINUS_PLACE: "Bad +/- placement.",
    LexCode.NO_NUM_AFTER_EXP: "Missing digits after exponent.",
    LexCode.TOO_MANY_US: "Too many 'U' suffixes.",
    LexCode.TOO_MANY_LS: "Too many 'L' suffixes.",
    LexCode.U_BETWEEN_LS: "'U' suffix between 'L' suffixes.",
    LexCode.HEX_FLT_EXP_NO_DIGITS: "Hex Float exponent missing digits.",
    LexCode.HEX_FLT_BAD_SUFFIX: "Hex Float with bad suffix.",
    LexCode.INT_EXTRA_SUFFIX: "Extraneous integer suffix.",
    LexCode.FLT_EXTRA_SUFFIX: "Extraneous float suffix.",
    LexCode.BAD_GLYPH: "Bad digit/gylph.",
    LexCode.HEX_MISSING_DIGITS: "Hex literal missing digits.",
    LexCode.HEX_NO_DIGITS_BEFORE_EXP: "Missing at least one hex digit before exponent.",
    LexCode.DIGIT_SEP_NEAR_DOT: "Digit Separator near dot.",
    LexCode.DIGIT_SEP_NEAR_EXP: "Digit Separator near exponent mark.",
    LexCode.EXTRA_DIGIT_SEPS: "Too many digit separators.",
    LexCode.HEX_FLT_NO_EXP: "Hex float with no exponent.",
    LexCode.DIGIT_SEP_MISSING_DIGITS: "Digit Saperator without digits.",
    LexCode.EXTRA_FLT_DOT: "Too many float dots.",
    LexCode.EXTRA_FLT_SUFFIX: "Extra float suffix.",
    LexCode.EXTRA_EXP: "Extra exponent mark.",
    LexCode.MISSING_DOT_OR_EXP: "Missing dot/exponent mark.",
    LexCode.EXP_AFTER_FLT_SUFFIX: "Exponent mark after float suffix.",
    LexCode.FLT_SUFFIX_AFTER_EXP_NO_DIGITS: "No digits between exponent mark and float suffix.",
    LexCode.INT_SUFFIX_ON_FLT: "Integer suffix on a float literal.",
    LexCode.BAD_OCTAL_CHAR: "Bad octal escape character.",
    LexCode.BAD_HEX_CHAR: "Bad hex escape character.",
    LexCode.BAD_UNICODE_CHAR: "Bad unicode escape character.",
    LexCode.SUDDEN_EOF_STR: "Sudden EoF in string.",
    LexCode.DIGIT_SEP_NOT_SEP_DIGITS: "Digit Separator not separating digits.",
}

_UNKNOWN = "Unknown Lex error."


def describe(code: int) -> str:
    """Human-readable text for a lexing result code."""
    try:
        return _MESSAGES[LexCode(code)]
    except ValueError:
        return _UNKNOWN


@dataclass
class Lexeme:
    """Outcome of lexing one token: its text, where lexing stopped, and a code."""

    code: LexCode = LexCode.NO_ERROR
    text: str = ""
    end: int = 0
    is_float: bool = False

    @property
    def ok(self) -> bool:
        return self.code == LexCode.NO_ERROR

    @property
    def message(self) -> str:
        return describe(self.code)