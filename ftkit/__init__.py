"""Character, string, memory, list, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chartype",
    "maths",
    "conversion",
    "memory",
    "strsearch",
    "strmanip",
    "linkedlist",
    "fdio",
    "printf",
    "linereader",
]