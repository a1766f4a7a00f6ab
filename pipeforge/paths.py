"""Locating the program a command line names."""

from __future__ import annotations

import errno
import os
from typing import List, Mapping, Optional, Tuple

from pipeforge.errors import PipexError
from pipeforge.strings import split

EXIT_NOT_FOUND = 127


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def _os_error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


def search_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories listed in PATH, empty entries dropped.

    Without a PATH variable the list is empty.
    """
    path = _environment(env).get("PATH")
    if path is None:
        return []
    return split(path, ":")


def find_executable(
    name: str, env: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Return the first ``dir/name`` along PATH that may be executed, or None."""
    for directory in search_dirs(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(
    command: str, env: Optional[Mapping[str, str]] = None
) -> Tuple[str, List[str]]:
    """Split ``command`` on spaces and find the program it names.

    Returns the path to execute and the argument list, whose first item is
    the program name as written. A name holding a slash is used as given;
    otherwise PATH is searched, then the name is tried as a file in the
    current directory. Raises :class:`PipexError` with status 127 when no
    program can be run.
    """
    args = split(command, " ")
    if "/" in command:
        if not args:
            raise PipexError("fail in execution", EXIT_NOT_FOUND) from _os_error(
                errno.ENOENT
            )
        program = args[0]
        if not os.access(program, os.X_OK):
            code = errno.EACCES if os.path.exists(program) else errno.ENOENT
            raise PipexError("fail in execution", EXIT_NOT_FOUND) from _os_error(code)
        return program, args
    if args:
        found = find_executable(args[0], env)
        if found is not None:
            return found, args
        if os.access(args[0], os.X_OK):
            return args[0], args
    raise PipexError("command not found", EXIT_NOT_FOUND) from _os_error(
        errno.ENOENT
    )