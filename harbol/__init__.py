"""Index-linked deque, ordered hash map, diagnostics and literal lexers."""

__version__ = "0.1.0"
__all__ = ["deque", "hashmap", "messages", "lex"]