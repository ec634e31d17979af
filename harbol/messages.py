"""Compiler-style error and warning messages."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

COLOR_RED = "\x1b[31m"
COLOR_MAGENTA = "\x1b[35m"
COLOR_RESET = "\x1b[0m"


def _margins(filename: Optional[str], line: Optional[int], column: Optional[int]) -> str:
    if filename is None:
        return ""
    parts = [filename]
    if line is not None:
        parts.append(str(line))
    if column is not None:
        parts.append(str(column))
    return f"({':'.join(parts)}) "


def format_message(
    kind: str,
    message: str,
    filename: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
    color: Optional[str] = None,
) -> str:
    """Render one message line; ``color`` is an ANSI code for the kind label."""
    label = f"{color}{kind}{COLOR_RESET}" if color else kind
    return f"{_margins(filename, line, column)}{label}: **** {message} ****\n"


class Diagnostics:
    """Writes errors and warnings to a stream and counts them."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True) -> None:
        self._stream = stream
        self.color = color
        self.error_count = 0
        self.warning_count = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def error(
        self,
        kind: str,
        message: str,
        filename: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> str:
        """Write an error and return the text written."""
        text = format_message(
            kind, message, filename, line, column, COLOR_RED if self.color else None
        )
        self.stream.write(text)
        self.error_count += 1
        return text

    def warning(
        self,
        kind: str,
        message: str,
        filename: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> str:
        """Write a warning and return the text written."""
        text = format_message(
            kind, message, filename, line, column, COLOR_MAGENTA if self.color else None
        )
        self.stream.write(text)
        self.warning_count += 1
        return text