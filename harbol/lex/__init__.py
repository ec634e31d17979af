"""Lexing helpers for C-style and Go-style literals, comments and UTF-8 text."""

__all__ = ["errors", "text", "decimal", "hexadecimal", "numbers", "literals"]