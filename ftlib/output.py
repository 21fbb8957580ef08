"""Writing characters, strings and numbers to file descriptors.

Every function writes to an operating-system file descriptor and returns
the number of bytes written. Strings are read up to their first NUL and
encoded as UTF-8. Write failures raise ``OSError``.
"""

from __future__ import annotations

import operator
import os
from typing import Union

from ftlib.strings import strdup

CharLike = Union[int, str]

UPPER = "X"
LOWER = "x"

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_LLONG_MIN = -(1 << 63)
_LLONG_MAX = (1 << 63) - 1


def _write(fd: int, data: bytes) -> int:
    """Write all of *data* to *fd* and return the number of bytes written."""
    view = memoryview(data)
    while view:
        done = os.write(fd, view)
        view = view[done:]
    return len(data)


def _check_range(n: int, low: int, high: int) -> int:
    n = operator.index(n)
    if not low <= n <= high:
        raise OverflowError(f"{n} is outside the range {low}..{high}")
    return n


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write the single byte *c* (a code 0..255 or a one-character string)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
    else:
        code = operator.index(c) & 0xFF
    return _write(fd, bytes([code]))


def putstr_fd(s: str, fd: int) -> int:
    """Write *s* up to its first NUL."""
    return _write(fd, strdup(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> int:
    """Write *s* up to its first NUL, followed by a newline."""
    return _write(fd, strdup(s).encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of the 32-bit signed integer *n*."""
    n = _check_range(n, _INT_MIN, _INT_MAX)
    return _write(fd, str(n).encode("ascii"))


def putunbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of *n* taken as a 32-bit unsigned integer."""
    n = operator.index(n) & 0xFFFFFFFF
    return _write(fd, str(n).encode("ascii"))


def putlongnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of the 64-bit signed integer *n*."""
    n = _check_range(n, _LLONG_MIN, _LLONG_MAX)
    return _write(fd, str(n).encode("ascii"))


def puthexnbr_fd(n: int, fd: int, hex_case: str = LOWER) -> int:
    """Write *n*, taken as a 64-bit unsigned integer, in hexadecimal.

    Digits are upper case when *hex_case* is ``"X"`` and lower case
    otherwise.
    """
    n = operator.index(n) & 0xFFFFFFFFFFFFFFFF
    spec = "X" if hex_case == UPPER else "x"
    return _write(fd, format(n, spec).encode("ascii"))