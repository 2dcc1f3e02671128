"""Character, memory, string, conversion, output, printf, line-reading and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "convert", "lines", "linked", "memory", "output", "printf", "strings"]