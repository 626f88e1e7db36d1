"""Character, string, formatting, linked-list, tokenizing and line-reading helpers."""

__version__ = "0.1.0"