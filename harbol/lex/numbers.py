"""Lexers for octal and binary literals and dispatchers for any number literal."""

from __future__ import annotations

from .decimal import lex_c_decimal, lex_go_decimal
from .errors import DIGIT_SEP_C, DIGIT_SEP_GO, LexCode, Lexeme
from .hexadecimal import lex_c_hex, lex_go_hex

_U = 1 << 0
_L1 = 1 << 1
_L2 = 1 << 2
_SEP = 1 << 3

_OCTAL = frozenset("01234567")
_BINARY = frozenset("01")


def _peek(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _at_end(text: str, pos: int) -> bool:
    return pos >= len(text) or text[pos] == "\0"


def _prefix(
    text: str, pos: int, marks: str, missing: LexCode
) -> tuple[list[str], int, LexCode]:
    """Read a leading ``0`` and, if ``marks`` is given, one of its letters."""
    buf = [text[pos]]
    if text[pos] != "0":
        return buf, pos + 1, LexCode.MISSING_0
    i = pos + 1
    if not marks:
        return buf, i, LexCode.NO_ERROR
    if _peek(text, i) not in marks:
        if i < len(text):
            buf.append(text[i])
            i += 1
        return buf, i, missing
    buf.append(text[i])
    return buf, i + 1, LexCode.NO_ERROR


def _lex_c_integer(
    text: str, i: int, buf: list[str], digits: frozenset, allow_dot: bool
) -> Lexeme:
    """Lex the digits and U/L suffixes of a C integer after its prefix."""
    flags = 0
    code = LexCode.NO_ERROR
    extra = "." + DIGIT_SEP_C if allow_dot else DIGIT_SEP_C
    while i < len(text) and (_alnum(text[i]) or text[i] in extra):
        ch = text[i]
        nxt = _peek(text, i + 1)
        if ch == DIGIT_SEP_C:
            buf.append(ch)
            if flags & _SEP:
                code = LexCode.EXTRA_DIGIT_SEPS
                break
            flags |= _SEP
        elif ch == ".":
            rest = lex_c_decimal(text, i)
            return Lexeme(rest.code, "".join(buf) + rest.text, rest.end, rest.is_float)
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
        elif ch in digits:
            buf.append(ch)
            if flags & (_U | _L1 | _L2):
                code = LexCode.INT_EXTRA_SUFFIX
                break
            flags &= ~_SEP
        else:
            buf.append(ch)
            code = LexCode.BAD_GLYPH
            break
        i += 1
    else:
        if flags & _SEP:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i)


def _lex_go_integer(text: str, i: int, buf: list[str], digits: frozenset) -> Lexeme:
    """Lex the digits of a Go integer after its prefix."""
    sep = False
    code = LexCode.NO_ERROR
    while i < len(text) and (_alnum(text[i]) or text[i] == DIGIT_SEP_GO):
        ch = text[i]
        buf.append(ch)
        if ch == DIGIT_SEP_GO:
            if sep:
                code = LexCode.EXTRA_DIGIT_SEPS
                break
            sep = True
        elif ch in digits:
            sep = False
        else:
            code = LexCode.BAD_GLYPH
            break
        i += 1
    else:
        if sep:
            code = LexCode.DIGIT_SEP_NOT_SEP_DIGITS
    return Lexeme(code, "".join(buf), i)


def lex_c_octal(text: str, pos: int = 0) -> Lexeme:
    """Lex a C octal literal such as ``0553ULL``; a dot continues it as a decimal float."""
    if _at_end(text, pos):
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos, "", LexCode.NO_ERROR)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)
    return _lex_c_integer(text, i, buf, _OCTAL, allow_dot=True)


def lex_go_octal(text: str, pos: int = 0) -> Lexeme:
    """Lex a Go octal literal such as ``0o553``."""
    if _at_end(text, pos):
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos, "oO", LexCode.MISSING_O)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)
    return _lex_go_integer(text, i, buf, _OCTAL)


def lex_c_binary(text: str, pos: int = 0) -> Lexeme:
    """Lex a C binary literal such as ``0b101ULL``."""
    if _at_end(text, pos):
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos, "bB", LexCode.MISSING_B)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)
    return _lex_c_integer(text, i, buf, _BINARY, allow_dot=False)


def lex_go_binary(text: str, pos: int = 0) -> Lexeme:
    """Lex a Go binary literal such as ``0b110_101``."""
    if _at_end(text, pos):
        return Lexeme(LexCode.EOF, "", pos)
    buf, i, code = _prefix(text, pos, "bB", LexCode.MISSING_B)
    if code != LexCode.NO_ERROR:
        return Lexeme(code, "".join(buf), i)
    return _lex_go_integer(text, i, buf, _BINARY)


def lex_c_number(text: str, pos: int = 0) -> Lexeme:
    """Lex any C number literal at ``pos``; a non-number yields an empty lexeme."""
    first = _peek(text, pos)
    if first == "0":
        second = _peek(text, pos + 1)
        if second in "xX" and second != "\0":
            return lex_c_hex(text, pos)
        if second in "bB" and second != "\0":
            return lex_c_binary(text, pos)
        if second in "123456789" and second != "\0":
            return lex_c_octal(text, pos)
        return lex_c_decimal(text, pos)
    if first in ".123456789" and first != "\0":
        return lex_c_decimal(text, pos)
    return Lexeme(LexCode.NO_ERROR, "", pos)


def lex_go_number(text: str, pos: int = 0) -> Lexeme:
    """Lex any Go number literal at ``pos``; a non-number yields an empty lexeme."""
    first = _peek(text, pos)
    if first == "0":
        second = _peek(text, pos + 1)
        if second in "xX" and second != "\0":
            return lex_go_hex(text, pos)
        if second in "bB" and second != "\0":
            return lex_go_binary(text, pos)
        if second in "oO" and second != "\0":
            return lex_go_octal(text, pos)
        return lex_go_decimal(text, pos)
    if first in ".123456789" and first != "\0":
        return lex_go_decimal(text, pos)
    return Lexeme(LexCode.NO_ERROR, "", pos)