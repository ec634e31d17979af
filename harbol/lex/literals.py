"""String literal, identifier lexers and conversion of number lexemes to values."""

from __future__ import annotations

import re
from typing import Callable, Union

from .errors import LexCode, Lexeme
from .text import (
    encode_utf8,
    is_alphabetic,
    is_possible_id,
    lex_hex_escape,
    lex_octal_escape,
    lex_unicode_escape,
    read_utf8,
)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "r": "\r",
    "b": "\b",
    "t": "\t",
    "v": "\v",
    "n": "\n",
    "N": "\n",
    "f": "\f",
    "e": "\x1b",
}

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_HEX_FLOAT = re.compile(
    r"[ \t\n\r\f\v]*[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DEC_FLOAT = re.compile(
    r"[ \t\n\r\f\v]*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

LexemeText = Union[str, Lexeme]


def _put_rune(out: list[str], rune: int) -> None:
    if rune > 0x10FFFF:
        return
    try:
        encode_utf8(rune)
    except ValueError:
        return
    out.append(chr(rune))


def _lex_string(text: str, pos: int, raw: bool) -> Lexeme:
    n = len(text)
    out: list[str] = []
    if pos >= n:
        return Lexeme(LexCode.SUDDEN_EOF_STR, "", pos)
    quote = text[pos]
    i = pos + 1
    while True:
        if i >= n or text[i] == "\0":
            return Lexeme(LexCode.SUDDEN_EOF_STR, "".join(out), i)
        c = text[i]
        if c == quote:
            break
        if c != "\\":
            out.append(c)
            i += 1
            continue
        i += 1
        if i >= n:
            return Lexeme(LexCode.SUDDEN_EOF_STR, "".join(out), i)
        esc = text[i]
        if raw:
            out += [c, esc]
            i += 1
        elif esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            i += 1
        elif esc in "xX":
            value, i = lex_hex_escape(text, i + 1)
            if value is None:
                return Lexeme(LexCode.BAD_HEX_CHAR, "".join(out), i)
            _put_rune(out, value)
        elif esc in "0123456789":
            value, i = lex_octal_escape(text, i)
            if value is None:
                return Lexeme(LexCode.BAD_OCTAL_CHAR, "".join(out), i)
            _put_rune(out, value)
        elif esc in "uU":
            value, i = lex_unicode_escape(text, i + 1, 4 if esc == "u" else 8)
            if value is None:
                return Lexeme(LexCode.BAD_UNICODE_CHAR, "".join(out), i)
            _put_rune(out, value)
        else:
            out.append(esc)
            i += 1
    return Lexeme(LexCode.NO_ERROR, "".join(out), i + 1)


def lex_c_string(text: str, pos: int = 0) -> Lexeme:
    """Lex a quoted string at ``pos``, decoding its escape sequences."""
    return _lex_string(text, pos, raw=False)


def lex_go_string(text: str, pos: int = 0) -> Lexeme:
    """Lex a Go string; a backquoted string keeps its backslashes as written."""
    raw = pos < len(text) and text[pos] == "`"
    return _lex_string(text, pos, raw=raw)


def lex_identifier(text: str, pos: int, checker: Callable[[str], bool]) -> tuple[str, int]:
    """Read characters accepted by ``checker``; return them and the end position."""
    start = pos
    while pos < len(text) and text[pos] != "\0" and checker(text[pos]):
        pos += 1
    return text[start:pos], pos


def lex_identifier_utf8(
    data: bytes, pos: int, checker: Callable[[int], bool]
) -> tuple[bytes, int]:
    """Decode UTF-8 up to a NUL or the end, keeping runes accepted by ``checker``.

    Rejected runes are skipped, not a stopping point. Raises ValueError on a
    malformed sequence.
    """
    data = bytes(data)
    out = bytearray()
    while pos < len(data) and data[pos] != 0:
        try:
            rune, size = read_utf8(data[pos:pos + 4])
        except ValueError as exc:
            raise ValueError(f"malformed UTF-8 at byte {pos}") from exc
        if checker(rune):
            try:
                out += encode_utf8(rune)
            except ValueError:
                pass
        pos += size
    return bytes(out), pos


def lex_c_identifier(text: str, pos: int = 0) -> tuple[str, int]:
    """Read a C identifier; an empty result means none starts at ``pos``."""
    if pos >= len(text) or not is_alphabetic(text[pos]):
        return "", pos
    return lex_identifier(text, pos, is_possible_id)


def lex_until(text: str, pos: int, control: str) -> tuple[str, int]:
    """Read up to (not including) ``control`` or the end of the text."""
    start = pos
    while pos < len(text) and text[pos] != "\0" and text[pos] != control:
        pos += 1
    return text[start:pos], pos


def _as_text(lexeme: LexemeText) -> str:
    return lexeme.text if isinstance(lexeme, Lexeme) else lexeme


def _digit(ch: str) -> int:
    if ch.isascii() and ch.isalnum():
        return int(ch, 36)
    return 99


def _scan_integer(text: str, base: int) -> int:
    """Parse the longest integer prefix the way the C library's strtol does."""
    n = len(text)
    i = 0
    while i < n and text[i] in " \t\n\v\f\r":
        i += 1
    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    if (
        base in (0, 16)
        and text[i:i + 2] in ("0x", "0X")
        and i + 2 < n
        and _digit(text[i + 2]) < 16
    ):
        base = 16
        i += 2
    elif base == 0:
        base = 8 if text[i:i + 1] == "0" else 10
    start = i
    value = 0
    while i < n and _digit(text[i]) < base:
        value = value * base + _digit(text[i])
        i += 1
    if i == start:
        raise ValueError(f"no integer in {text!r}")
    return -value if negative else value


def _c_base(text: str) -> tuple[str, int]:
    if text[:2] in ("0b", "0B"):
        return text[2:], 2
    return text, 0


def _go_base(text: str) -> tuple[str, int]:
    if text[:2] in ("0o", "0O"):
        return text[2:], 8
    if text[:2] in ("0b", "0B"):
        return text[2:], 2
    return text, 0


def _signed(value: int) -> int:
    return max(_INT64_MIN, min(_INT64_MAX, value))


def _unsigned(value: int) -> int:
    if abs(value) > _UINT64_MAX:
        return _UINT64_MAX
    return value & _UINT64_MAX


def parse_c_int(lexeme: LexemeText) -> int:
    """Value of a C integer lexeme as a 64-bit signed integer; suffixes are ignored."""
    return _signed(_scan_integer(*_c_base(_as_text(lexeme))))


def parse_go_int(lexeme: LexemeText) -> int:
    """Value of a Go integer lexeme as a 64-bit signed integer."""
    return _signed(_scan_integer(*_go_base(_as_text(lexeme))))


def parse_c_uint(lexeme: LexemeText) -> int:
    """Value of a C integer lexeme as a 64-bit unsigned integer."""
    return _unsigned(_scan_integer(*_c_base(_as_text(lexeme))))


def parse_go_uint(lexeme: LexemeText) -> int:
    """Value of a Go integer lexeme as a 64-bit unsigned integer."""
    return _unsigned(_scan_integer(*_go_base(_as_text(lexeme))))


def parse_float(lexeme: LexemeText) -> float:
    """Value of the longest decimal or hex float prefix of a lexeme."""
    text = _as_text(lexeme)
    match = _HEX_FLOAT.match(text)
    if match:
        return float.fromhex(match.group().strip())
    match = _DEC_FLOAT.match(text)
    if match and match.group().strip():
        return float(match.group().strip())
    raise ValueError(f"no float in {text!r}")