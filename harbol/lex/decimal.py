"""Lexers for C-style and Go-style decimal integer and float literals."""

from __future__ import annotations

from .errors import DIGIT_SEP_C, DIGIT_SEP_GO, LexCode, Lexeme
from .text import is_decimal

_U = 1 << 0
_L1 = 1 << 1
_L2 = 1 << 2
_DOT = 1 << 3
_F_SUFFIX = 1 << 4
_EXP = 1 << 5
_EXP_DIGITS = 1 << 6
_SIGN = 1 << 7
_SEP = 1 << 8


def _peek(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _accepts(ch: str, sep: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in ".+-" or ch == sep


def lex_c_decimal(text: str, pos: int = 0) -> Lexeme:
    """Lex a C decimal literal (with ' separators and U/L/F suffixes) at ``pos``."""
    if pos >= len(text) or text[pos] == "\0":
        return Lexeme(LexCode.EOF, "", pos)

    buf: list[str] = []
    flags = 0
    is_float = False
    code = LexCode.NO_ERROR
    i = pos
    while i < len(text) and _accepts(text[i], DIGIT_SEP_C):
        ch = text[i]
        nxt = _peek(text, i + 1)
        if ch == ".":
            if flags & _DOT:
                buf.append(ch)
                code = LexCode.EXTRA_FLT_DOT
                break
            if flags & _SEP or nxt == DIGIT_SEP_C:
                buf.append(ch)
                code = LexCode.DIGIT_SEP_NEAR_DOT
                break
            flags |= _DOT
            buf.append(ch)
            is_float = True
        elif ch in "+-":
            if flags & (_SIGN | _EXP_DIGITS) or flags == 0:
                break
            if flags & (_EXP | _DOT):
                buf.append(ch)
                if not is_decimal(nxt):
                    code = LexCode.NO_NUM_AFTER_EXP
                    break
                flags |= _SIGN
        elif ch in "Ff":
            buf.append(ch)
            if not flags & (_DOT | _EXP):
                code = LexCode.MISSING_DOT_OR_EXP
                break
            if flags & _F_SUFFIX:
                code = LexCode.EXTRA_FLT_SUFFIX
                break
            if flags & _EXP and not flags & _EXP_DIGITS:
                code = LexCode.FLT_SUFFIX_AFTER_EXP_NO_DIGITS
                break
            flags |= _F_SUFFIX
        elif ch in "Ee":
            buf.append(ch)
            if flags & _EXP:
                code = LexCode.EXTRA_EXP
                break
            if flags & _F_SUFFIX:
                code = LexCode.EXP_AFTER_FLT_SUFFIX
                break
            if flags & _SEP or nxt == DIGIT_SEP_C:
                code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
                break
            flags |= _EXP
            is_float = True
        elif ch in "Uu":
            buf.append(ch)
            if flags & _U:
                code = LexCode.TOO_MANY_US
                break
            if flags & _L1 and nxt in "Ll":
                code = LexCode.U_BETWEEN_LS
                break
            if flags & (_DOT | _F_SUFFIX | _EXP):
                code = LexCode.INT_SUFFIX_ON_FLT
                break
            flags |= _U
        elif ch in "Ll":
            buf.append(ch)
            if flags & _L2:
                code = LexCode.TOO_MANY_LS
                break
            if flags & (_DOT | _F_SUFFIX | _EXP) and flags & (_L2 | _U):
                code = LexCode.INT_SUFFIX_ON_FLT
                break
            flags |= _L2 if flags & _L1 else _L1
        elif ch.isdigit():
            if flags & _EXP:
                flags |= _EXP_DIGITS
            buf.append(ch)
            if flags & (_U | _L1 | _L2):
                code = LexCode.INT_EXTRA_SUFFIX
                break
            if flags & _F_SUFFIX:
                code = LexCode.FLT_EXTRA_SUFFIX
                break
            flags &= ~_SEP
        elif ch == DIGIT_SEP_C:
            buf.append(ch)
            if flags & _SEP:
                code = LexCode.EXTRA_DIGIT_SEPS
                break
            flags |= _SEP
        else:
            buf.append(ch)
            code = LexCode.BAD_GLYPH
            break
        i += 1
    else:
        if flags & _EXP and text[i - 1] in "eE":
            code = LexCode.NO_NUM_AFTER_EXP
        elif flags & _SEP:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i, is_float)


def lex_go_decimal(text: str, pos: int = 0) -> Lexeme:
    """Lex a Go decimal literal (with _ separators) at ``pos``."""
    if pos >= len(text) or text[pos] == "\0":
        return Lexeme(LexCode.EOF, "", pos)

    buf: list[str] = []
    flags = 0
    is_float = False
    code = LexCode.NO_ERROR
    i = pos
    while i < len(text) and _accepts(text[i], DIGIT_SEP_GO):
        ch = text[i]
        nxt = _peek(text, i + 1)
        if ch == ".":
            is_float = True
            buf.append(ch)
            if flags & _DOT:
                code = LexCode.EXTRA_FLT_DOT
                break
            if flags & _SEP or nxt == DIGIT_SEP_GO:
                code = LexCode.DIGIT_SEP_NEAR_DOT
                break
            flags |= _DOT
        elif ch in "+-":
            if flags & _SIGN or flags == 0:
                break
            if flags & (_EXP | _DOT):
                buf.append(ch)
                if not is_decimal(nxt):
                    code = LexCode.NO_NUM_AFTER_EXP
                    break
                flags |= _SIGN
        elif ch in "Ee":
            is_float = True
            buf.append(ch)
            if flags & _EXP:
                code = LexCode.EXTRA_EXP
                break
            if flags & _SEP or nxt == DIGIT_SEP_GO:
                code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
                break
            flags |= _EXP
        elif ch.isdigit():
            if flags & _EXP:
                flags |= _EXP_DIGITS
            buf.append(ch)
            flags &= ~_SEP
        elif ch == DIGIT_SEP_GO:
            buf.append(ch)
            if flags & _SEP:
                code = LexCode.EXTRA_DIGIT_SEPS
                break
            flags |= _SEP
        else:
            buf.append(ch)
            code = LexCode.BAD_GLYPH
            break
        i += 1
    else:
        if flags & _EXP and text[i - 1] in "eE":
            code = LexCode.NO_NUM_AFTER_EXP
        elif flags & _SEP:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i, is_float)