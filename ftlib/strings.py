"""String utilities with C-string semantics.

Text is read up to its first NUL character, as a C string would be.
Functions that locate something return an index into the string, or
``None`` when there is nothing to find. Functions that would write
into a destination buffer return the resulting text instead.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return *s* cut at its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Turn *c* into a one-character string, truncating integers to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _code_at(s: str, i: int) -> int:
    """Code of ``s[i]``, or 0 past the end (the terminating NUL)."""
    return ord(s[i]) if i < len(s) else 0


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Length of *s* up to its first NUL."""
    return len(_cstr(s))


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the resulting destination text and the full length of *src*.
    With a *size* of 0 the destination is left as it was.
    """
    size = _non_negative("size", size)
    src = _cstr(src)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* so the result holds at most ``size - 1`` characters.

    Returns the resulting text and the length it tried to create. When
    *size* is not larger than *dest*, *dest* is left as it was and the
    length returned is ``size + len(src)``.
    """
    size = _non_negative("size", size)
    dest = _cstr(dest)
    src = _cstr(src)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*; searching for NUL gives the length."""
    s = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*; searching for NUL gives the length."""
    s = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the codes at the first position where the strings differ."""
    s1 = _cstr(s1)
    s2 = _cstr(s2)
    i = 0
    while i < len(s1) and i < len(s2) and s1[i] == s2[i]:
        i += 1
    return _code_at(s1, i) - _code_at(s2, i)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than *n* characters."""
    n = _non_negative("n", n)
    s1 = _cstr(s1)
    s2 = _cstr(s2)
    i = 0
    while i < n and i < len(s1) and i < len(s2) and s1[i] == s2[i]:
        i += 1
    if i == n:
        return 0
    return _code_at(s1, i) - _code_at(s2, i)


def strdup(s: str) -> str:
    """Copy of *s* up to its first NUL."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from index *start*.

    A *start* at or past the end gives an empty string.
    """
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    s = _cstr(s)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of *little* in *big*, found within the first *length* characters.

    An empty *little* is found at index 0.
    """
    length = _non_negative("length", length)
    big = _cstr(big)
    little = _cstr(little)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """*s* with every character of *charset* removed from both ends."""
    return _cstr(s).strip(_cstr(charset))


def strjoin(s1: str, s2: str) -> str:
    """*s1* followed by *s2*."""
    return _cstr(s1) + _cstr(s2)


def split(s: str, c: CharLike) -> list[str]:
    """Non-empty pieces of *s* separated by the character *c*."""
    text = _cstr(s)
    sep = _char(c)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of ``f(index, char)`` for every character of *s*."""
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(s)))


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Apply ``f(index, char)`` to each character of *s* in place.

    *s* is a mutable sequence of characters, read up to its first NUL.
    When *f* returns a character, it replaces the one at that index.
    """
    for i, ch in enumerate(s):
        if ch == _NUL:
            break
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = replacement