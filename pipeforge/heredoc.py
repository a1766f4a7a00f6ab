"""Line-by-line reading from a file descriptor and here-document input."""

from __future__ import annotations

import os
from typing import Iterator, Optional

from pipeforge.strings import strncmp

BUFFER_SIZE = 100

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Read newline-terminated lines from a raw file descriptor.

    Data is read ``buffer_size`` bytes at a time; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line with its newline, the unterminated tail at
        the end of input, or None once everything has been read."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line.decode(_ENCODING, _ERRORS)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def is_limiter(line: str, limiter: str) -> bool:
    """Tell whether ``line`` ends a here-document delimited by ``limiter``.

    The line's last character is left out of the comparison when the line
    is longer than the limiter, so a trailing newline does not count.
    """
    if len(line) > len(limiter):
        length = len(line) - 1
    else:
        length = len(limiter)
    return strncmp(line, limiter, length) == 0


def read_here_doc(limiter: str, fd: int = 0) -> str:
    """Read lines from ``fd`` up to the limiter line or the end of input.

    Returns the lines read before the limiter, newlines kept.
    """
    collected = []
    for line in LineReader(fd):
        if is_limiter(line, limiter):
            break
        collected.append(line)
    return "".join(collected)