"""ASCII character, C-style string, integer, file-descriptor output, linked-list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "strings",
    "output",
    "linkedlist",
    "gnl",
]