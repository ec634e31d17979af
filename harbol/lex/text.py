"""Character classes, skipping helpers, UTF-8 coding and escape readers.

Positions are indices into the text; a function that scans returns the
index where scanning stopped.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Union

Char = Union[str, int]
Checker = Callable[[str], bool]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS = frozenset("01234567")


def _code(c: Char) -> int:
    if isinstance(c, str):
        return ord(c) if c else -1
    return int(c)


def is_alphabetic(c: Char) -> bool:
    """ASCII letters, underscore, and any non-ASCII character."""
    code = _code(c)
    return (
        ord("a") <= code <= ord("z")
        or ord("A") <= code <= ord("Z")
        or code == ord("_")
        or code < -1
        or code >= 0x80
    )


def is_decimal(c: Char) -> bool:
    return ord("0") <= _code(c) <= ord("9")


def is_possible_id(c: Char) -> bool:
    return is_alphabetic(c) or is_decimal(c)


def is_octal(c: Char) -> bool:
    return ord("0") <= _code(c) <= ord("7")


def is_hex(c: Char) -> bool:
    code = _code(c)
    return ord("a") <= code <= ord("f") or ord("A") <= code <= ord("F") or is_decimal(code)


def is_binary(c: Char) -> bool:
    return _code(c) in (ord("0"), ord("1"))


def is_whitespace(c: Char) -> bool:
    return _code(c) in (0x20, 0x09, 0x0D, 0x0B, 0x0C, 0x0A)


def is_valid_unicode(c: int) -> bool:
    """Whether a code point may be written with a \\u or \\U escape."""
    code = c & 0xFFFFFFFF
    if 0xD800 <= code <= 0xDFFF:
        return False
    return code >= 0xA0 or code in (ord("$"), ord("@"), ord("`"))


def check_is_char(text: str, index: int, char: str) -> bool:
    """True if ``text[index]`` exists and equals ``char``."""
    return 0 <= index < len(text) and text[index] == char


def utf8_length(byte: int) -> int:
    """Number of leading one bits of a byte: 0 for ASCII, else the sequence length."""
    byte &= 0xFF
    count = 0
    for bit in range(7, -1, -1):
        if not byte & (1 << bit):
            return count
        count += 1
    return 8


def skip_chars(text: str, pos: int, checker: Checker) -> tuple[int, int]:
    """Skip characters accepted by ``checker``; return the end and newlines passed."""
    lines = 0
    while pos < len(text) and checker(text[pos]):
        if text[pos] == "\n":
            lines += 1
        pos += 1
    return pos, lines


def skip_chars_until_newline(text: str, pos: int, checker: Checker) -> int:
    """Skip characters accepted by ``checker``, stopping at a newline."""
    while pos < len(text) and text[pos] != "\n" and checker(text[pos]):
        pos += 1
    return pos


def skip_string_literal(text: str, pos: int, esc: str) -> int:
    """Skip a quoted literal starting at its opening quote; stop at the closing quote."""
    n = len(text)
    if pos >= n:
        return n
    quote = text[pos]
    pos += 1
    while pos < n and text[pos] != quote:
        pos += 2 if text[pos] == esc else 1
    return min(pos, n)


def skip_single_line_comment(text: str, pos: int) -> tuple[int, int]:
    """Skip to the end of a line comment, following backslash continuations.

    Returns the position of the terminating newline (or the end) and the
    number of continued lines.
    """
    n = len(text)
    lines = 0
    while pos < n and text[pos] != "\n":
        if text[pos] == "\\":
            newline = text.find("\n", pos + 1)
            if newline < 0:
                return n, lines
            pos = newline
            lines += 1
        pos += 1
    return pos, lines


def skip_multi_line_comment(text: str, pos: int, end_token: str) -> tuple[int, int]:
    """Skip a block comment; return the position after ``end_token`` and newlines passed."""
    n = len(text)
    lines = 0
    i = pos + 1
    while i < n and not text.startswith(end_token, i):
        if text[i] == "\n":
            lines += 1
        i += 1
    if i < n:
        i += len(end_token)
    return min(i, n), lines


def _blank(chars: list[str], start: int, stop: int) -> None:
    stop = min(stop, len(chars))
    if stop > start:
        chars[start:stop] = " " * (stop - start)


def clear_single_line_comment(text: str, pos: int) -> tuple[str, int]:
    """Replace a line comment with spaces, keeping continued newlines.

    Returns the new text and the position where the comment ended.
    """
    n = len(text)
    chars = list(text)
    start = i = pos
    while i < n and chars[i] != "\n":
        if chars[i] == "\\":
            newline = text.find("\n", i + 1)
            if newline < 0:
                i = n
                break
            _blank(chars, start, newline)
            start = i = newline + 1
        else:
            i += 1
    _blank(chars, start, i)
    return "".join(chars), i


def clear_multi_line_comment(text: str, pos: int, end_token: str) -> tuple[str, int]:
    """Replace a block comment with spaces, keeping its newlines.

    Returns the new text and the position after the comment.
    """
    n = len(text)
    chars = list(text)
    start = pos
    i = pos + 1
    while i < n and not text.startswith(end_token, i):
        if chars[i] == "\n":
            _blank(chars, start, i)
            i += 1
            start = i
        else:
            i += 1
    if i < n:
        i += len(end_token)
    i = min(i, n)
    _blank(chars, start, i)
    return "".join(chars), i


def skip_multiquote_string(text: str, pos: int, quote: str, esc: str) -> int:
    """Skip up to and past the next unescaped ``quote`` sequence."""
    n = len(text)
    while pos < n and not text.startswith(quote, pos):
        pos += 2 if text[pos] == esc else 1
    if pos < n:
        pos += len(quote)
    return min(pos, n)


def lex_single_line_comment(text: str, pos: int) -> tuple[str, int, int]:
    """Read a line comment with continuations.

    Returns the comment text, the end position and the continued-line count.
    """
    n = len(text)
    start = pos
    lines = 0
    while pos < n and text[pos] != "\n":
        if text[pos] == "\\":
            newline = text.find("\n", pos + 1)
            if newline < 0:
                pos = n
                break
            pos = newline
            lines += 1
        pos += 1
    return text[start:pos], pos, lines


def lex_multi_line_comment(text: str, pos: int, end_token: str) -> tuple[str, int, int]:
    """Read a block comment; the text always ends with ``end_token``.

    Returns the comment text, the end position and the newline count.
    """
    n = len(text)
    lines = 0
    i = pos + 1
    while i < n and not text.startswith(end_token, i):
        if text[i] == "\n":
            lines += 1
        i += 1
    comment = text[pos:i] + end_token
    if i < n:
        i += len(end_token)
    return comment, min(i, n), lines


def encode_utf8(rune: int) -> bytes:
    """Encode a code point below 0x200000 as UTF-8; surrogates are rejected."""
    if rune < 0:
        raise ValueError(f"negative code point {rune}")
    if rune < 0x80:
        return bytes([rune])
    if rune < 0x800:
        return bytes([0xC0 | (rune >> 6), 0x80 | (rune & 0x3F)])
    if 0xD800 <= rune < 0xE000:
        raise ValueError(f"surrogate code point U+{rune:04X}")
    if rune < 0x10000:
        return bytes([
            0xE0 | (rune >> 12),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    if rune < 0x200000:
        return bytes([
            0xF0 | (rune >> 18),
            0x80 | ((rune >> 12) & 0x3F),
            0x80 | ((rune >> 6) & 0x3F),
            0x80 | (rune & 0x3F),
        ])
    raise ValueError(f"code point {rune:#x} too large")


def read_utf8(data: bytes) -> tuple[int, int]:
    """Decode the first UTF-8 sequence of ``data``; return the rune and its byte size."""
    if not data:
        raise ValueError("no bytes to decode")
    first = data[0]
    size = utf8_length(first)
    if size == 0:
        return first, 1
    if size > len(data):
        raise ValueError("truncated UTF-8 sequence")
    if any((b & 0xC0) != 0x80 for b in data[1:size]):
        raise ValueError("bad UTF-8 continuation byte")
    if size == 2:
        rune = ((first & 0x1F) << 6) | (data[1] & 0x3F)
    elif size == 3:
        rune = ((first & 0x0F) << 12) | ((data[1] & 0x3F) << 6) | (data[2] & 0x3F)
    elif size == 4:
        rune = (
            ((first & 0x07) << 18)
            | ((data[1] & 0x3F) << 12)
            | ((data[2] & 0x3F) << 6)
            | (data[3] & 0x3F)
        )
    else:
        raise ValueError("invalid UTF-8 lead byte")
    return rune, size


def utf8_to_runes(data: bytes) -> list[int]:
    """Decode UTF-8 bytes, stopping at a NUL byte or the first malformed sequence."""
    data = bytes(data)
    runes: list[int] = []
    pos = 0
    while pos < len(data) and data[pos] != 0:
        try:
            rune, size = read_utf8(data[pos:])
        except ValueError:
            break
        if rune <= 0:
            break
        runes.append(rune)
        pos += size
    return runes


def runes_to_utf8(runes: Iterable[int]) -> bytes:
    """Encode runes as UTF-8, stopping at the first that cannot be encoded."""
    out = bytearray()
    for rune in runes:
        try:
            out += encode_utf8(rune)
        except ValueError:
            break
    return bytes(out)


def lex_hex_escape(text: str, pos: int) -> tuple[Optional[int], int]:
    """Read hex digits at ``pos``; the value is None if there are none."""
    n = len(text)
    if pos >= n or not is_hex(text[pos]):
        return None, pos
    value = 0
    while pos < n and text[pos] in _HEX_DIGITS:
        value = (value << 4) | int(text[pos], 16)
        pos += 1
    return value, pos


def lex_octal_escape(text: str, pos: int) -> tuple[Optional[int], int]:
    """Read up to four octal digits at ``pos``.

    The value is None if there is no octal digit, or if four digits are
    followed by more text.
    """
    n = len(text)
    if pos >= n or not is_octal(text[pos]):
        return None, pos
    start = pos
    value = 0
    count = 0
    while pos < n:
        if count > 3:
            return None, start
        if text[pos] not in _OCTAL_DIGITS:
            break
        value = (value << 3) | int(text[pos])
        pos += 1
        count += 1
    return value, pos


def lex_unicode_escape(text: str, pos: int, width: int) -> tuple[Optional[int], int]:
    """Read at most ``width`` hex digits as a code point.

    The value is None when the code point may not be written as an escape.
    """
    n = len(text)
    value = 0
    for _ in range(width):
        if pos >= n or text[pos] not in _HEX_DIGITS:
            break
        value = (value << 4) | int(text[pos], 16)
        pos += 1
    return (value if is_valid_unicode(value) else None), pos