"""Integer parsing, formatting, digit counting and random values."""

from __future__ import annotations

import sys

_RANDOM_DEVICE = "/dev/random"

_INT_BITS = 32
_LONG_BITS = 64


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement integer of *bits* bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(s: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    pos = 0
    length = len(s)
    while pos < length and (s[pos] in "\t\n\v\f\r "):
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= s[pos] <= "9":
        pos += 1
    digits = s[start:pos]
    return sign * int(digits) if digits else 0


def atoi(s: str) -> int:
    """Read an int from the start of *s*, ignoring trailing garbage.

    The result wraps like a 32-bit signed integer.
    """
    return _wrap_signed(_parse(s), _INT_BITS)


def atol(s: str) -> int:
    """Read a long from the start of *s*, ignoring trailing garbage.

    The result wraps like a 64-bit signed integer.
    """
    return _wrap_signed(_parse(s), _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(n)


def intlen(n: int) -> int:
    """Number of characters needed to write *n*, counting the minus sign."""
    return len(str(n))


def uintlen(n: int) -> int:
    """Number of decimal digits of *n* taken as a 32-bit unsigned value."""
    return len(str(n & ((1 << _INT_BITS) - 1)))


def hexlen(n: int) -> int:
    """Number of hexadecimal digits of *n* taken as a 64-bit unsigned value."""
    return len(format(n & ((1 << _LONG_BITS) - 1), "x"))


def iabs(n: int) -> int:
    """Absolute value of *n*."""
    return -n if n < 0 else n


def _read_random(size: int) -> bytes | None:
    try:
        with open(_RANDOM_DEVICE, "rb") as device:
            data = device.read(size)
    except OSError:
        return None
    return data if len(data) == size else None


def rand_uchar() -> int:
    """A random byte value 0..255 from the system random device, or 1 on failure."""
    data = _read_random(1)
    return 1 if data is None else data[0]


def rand_int() -> int:
    """A random 32-bit signed value from the system random device, or 1 on failure."""
    data = _read_random(4)
    if data is None:
        return 1
    return int.from_bytes(data, sys.byteorder, signed=True)