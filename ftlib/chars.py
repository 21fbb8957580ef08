"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. The classifiers return a bool. The case
converters return a value of the same kind as their argument.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of *c*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def isalpha(c: CharLike) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True if *c* is in the ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True if *c* is a printable ASCII character (32..126)."""
    return 32 <= _code(c) <= 126


def isspace(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return ord("\t") <= code <= ord("\r") or code == ord(" ")


def _convert(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    return _convert(c, "a", "z", ord("A") - ord("a"))


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))