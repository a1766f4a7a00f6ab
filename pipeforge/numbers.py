"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then as many
    ASCII digits as follow. Anything after them is ignored, and text with no
    digits gives 0. The result wraps around like a 32-bit int.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)