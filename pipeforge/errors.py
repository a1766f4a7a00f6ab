"""The error raised when a pipeline cannot be set up or run."""

from __future__ import annotations


class PipexError(Exception):
    """A fatal error carrying the exit status the program should end with.

    When raised from an :class:`OSError`, the text of that error follows
    the message, as ``perror`` would print it.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        cause = self.__cause__
        if isinstance(cause, OSError) and cause.strerror:
            return f"{self.message}: {cause.strerror}"
        return self.message