"""String helpers with C string semantics: searching, comparing, slicing,
joining, splitting and bounded copies into byte buffers.

Searches return an index, or None where nothing is found. The bounded
copies, ``strlcpy`` and ``strlcat``, work on NUL-terminated byte strings
held in a ``bytearray``.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, List, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
CharLike = Union[str, int]

_NUL = "\0"


def _char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(operator.index(char) & 0xFF)


def _unsigned(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _c_bytes(data: BytesLike) -> bytes:
    """Return the bytes of ``data`` up to its first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def _buffer_size(dest: bytearray, size: int) -> int:
    size = _unsigned(size, "size")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer of size {len(dest)}")
    return size


def strlen(text: Union[str, BytesLike, None]) -> int:
    """Return the length of ``text`` up to its first NUL; None has length 0."""
    if text is None:
        return 0
    if isinstance(text, str):
        return len(text.split(_NUL, 1)[0])
    return len(_c_bytes(text))


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``len(text)``.
    An integer is taken modulo 256.
    """
    wanted = _char(char)
    if wanted == _NUL:
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``len(text)``.
    """
    wanted = _char(char)
    if wanted == _NUL:
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for position, (a, b) in enumerate(pairs):
        if limit is not None and position >= limit:
            break
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the
    first mismatch, or 0."""
    return _compare(first, second, _unsigned(n, "n"))


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the code difference at the first
    mismatch, or 0."""
    return _compare(first, second, None)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    length = _unsigned(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives an empty string.
    """
    start = _unsigned(start, "start")
    length = _unsigned(length, "length")
    return text[start:start + length]


def strjoin(first: Optional[str], second: str) -> str:
    """Concatenate two strings; a missing first string counts as empty."""
    if second is None:
        raise TypeError("the second string is required")
    return (first or "") + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    return text.strip(charset)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if text is None:
        raise TypeError("text is required")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character in order.

    A string returned by ``func`` replaces that character; None keeps it.
    The resulting string is returned.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy the C string ``src`` into ``dest``, writing at most ``size``
    bytes including the terminating NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    size = _buffer_size(dest, size)
    data = _c_bytes(src)
    if size:
        count = min(len(data), size - 1)
        dest[:count] = data[:count]
        dest[count] = 0
    return len(data)


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dest``, keeping the
    whole within ``size`` bytes including the terminating NUL.

    Returns the length the full result would have had: the length of
    ``src`` plus the smaller of ``size`` and the original length of ``dest``.
    """
    size = _buffer_size(dest, size)
    filled = len(_c_bytes(dest))
    data = _c_bytes(src)
    total = len(data) + (size if size < filled else filled)
    count = min(len(data), max(0, size - filled - 1))
    dest[filled:filled + count] = data[:count]
    end = filled + count
    if end < size:
        dest[end] = 0
    return total