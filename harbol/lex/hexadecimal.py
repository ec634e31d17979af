"""Lexers for C-style and Go-style hexadecimal integer and float literals."""

from __future__ import annotations

from .errors import DIGIT_SEP_C, DIGIT_SEP_GO, LexCode, Lexeme
from .text import is_decimal

_U = 1 << 0
_L1 = 1 << 1
_L2 = 1 << 2
_DOT = 1 << 3
_EXP = 1 << 4
_ONE_HEX = 1 << 5
_F_SUFFIX = 1 << 6
_SIGN = 1 << 7
_SEP = 1 << 8

_HEX_LETTERS = frozenset("abcdefABCDEF")


def _peek(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _accepts(ch: str, sep: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in ".+-" or ch == sep


def _prefix(text: str, pos: int) -> tuple[list[str], int, LexCode]:
    """Read the ``0x`` prefix; the code is an error code or NO_ERROR."""
    buf = [text[pos]]
    if text[pos] != "0":
        return buf, pos + 1, LexCode.MISSING_0
    i = pos + 1
    if _peek(text, i) not in "xX":
        if i < len(text):
            buf.append(text[i])
            i += 1
        return buf, i, LexCode.MISSING_X
    buf.append(text[i])
    return buf, i + 1, LexCode.NO_ERROR


def lex_c_hex(text: str, pos: int = 0) -> Lexeme:
    """Lex a C hex literal, including hex floats and U/L/F suffixes, at ``pos``."""
    if pos >= len(text) or text[pos] == "\0":
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)

    flags = 0
    is_float = False
    while i < len(text) and _accepts(text[i], DIGIT_SEP_C):
        ch = text[i]
        nxt = _peek(text, i + 1)
        if ch == ".":
            is_float = True
            buf.append(ch)
            if not flags & _ONE_HEX:
                code = LexCode.MISSING_HEX_BEFORE_DOT
                break
            if flags & _SEP or nxt == DIGIT_SEP_C:
                code = LexCode.DIGIT_SEP_NEAR_DOT
                break
            flags = (flags | _DOT) & ~_ONE_HEX
        elif ch in "Pp":
            is_float = True
            buf.append(ch)
            if flags & _EXP:
                code = LexCode.TOO_MANY_PS
                break
            if flags & _SEP or nxt == DIGIT_SEP_C:
                code = LexCode.DIGIT_SEP_NEAR_EXP
                break
            flags = (flags | _EXP) & ~_ONE_HEX
        elif ch in "+-":
            if flags & _SIGN:
                break
            buf.append(ch)
            if not flags & (_EXP | _DOT):
                code = LexCode.BAD_PLUS_MINUS_PLACE
                break
            if not is_decimal(nxt):
                code = LexCode.NO_NUM_AFTER_EXP
                break
            flags |= _SIGN
        elif ch in "Uu":
            buf.append(ch)
            if flags & _U:
                code = LexCode.TOO_MANY_US
                break
            if flags & _L1 and nxt in "Ll":
                code = LexCode.U_BETWEEN_LS
                break
            flags |= _U
        elif ch in "Ll":
            buf.append(ch)
            if flags & _L2:
                code = LexCode.TOO_MANY_LS
                break
            flags |= _L2 if flags & _L1 else _L1
        elif ch in _HEX_LETTERS:
            buf.append(ch)
            if flags & _EXP:
                if not flags & _ONE_HEX:
                    code = LexCode.HEX_NO_DIGITS_BEFORE_EXP
                    break
                if ch in "Ff":
                    if flags & _F_SUFFIX:
                        code = LexCode.FLT_EXTRA_SUFFIX
                        break
                    flags |= _F_SUFFIX
                    i += 1
                    continue
                if flags & _F_SUFFIX:
                    code = LexCode.FLT_EXTRA_SUFFIX
                    break
            flags |= _ONE_HEX
            if flags & (_U | _L1 | _L2):
                code = LexCode.INT_EXTRA_SUFFIX
                break
            flags &= ~_SEP
        elif ch.isdigit():
            flags |= _ONE_HEX
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
        if flags & _DOT and not flags & _EXP:
            code = LexCode.HEX_FLT_NO_EXP
        elif not flags & _ONE_HEX:
            code = LexCode.HEX_MISSING_DIGITS
        elif flags & _SEP:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i, is_float)


def lex_go_hex(text: str, pos: int = 0) -> Lexeme:
    """Lex a Go hex literal, including hex floats, at ``pos``."""
    if pos >= len(text) or text[pos] == "\0":
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)

    flags = 0
    is_float = False
    while i < len(text) and _accepts(text[i], DIGIT_SEP_GO):
        ch = text[i]
        nxt = _peek(text, i + 1)
        if ch == ".":
            is_float = True
            buf.append(ch)
            if flags & _SEP or nxt == DIGIT_SEP_GO:
                code = LexCode.DIGIT_SEP_NEAR_DOT
                break
            flags |= _DOT
        elif ch in "Pp":
            is_float = True
            buf.append(ch)
            if not flags & _ONE_HEX:
                code = LexCode.HEX_NO_DIGITS_BEFORE_EXP
                break
            if flags & _SEP or nxt == DIGIT_SEP_GO:
                code = LexCode.DIGIT_SEP_NEAR_EXP
                break
            flags |= _EXP
        elif ch in "+-":
            if flags & _SIGN or not flags & (_EXP | _DOT):
                break
            buf.append(ch)
            if not is_decimal(nxt):
                code = LexCode.NO_NUM_AFTER_EXP
                break
            flags |= _SIGN
        elif ch in _HEX_LETTERS or ch.isdigit():
            flags = (flags | _ONE_HEX) & ~_SEP
            buf.append(ch)
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
        if flags & _DOT and not flags & _EXP:
            code = LexCode.HEX_FLT_NO_EXP
        elif flags & _SEP:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i, is_float)