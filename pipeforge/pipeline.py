"""Running a chain of commands between an input and an output file.

The input is a file, or a here-document read from standard input up to a
limiter line. Each command's output feeds the next one, and the last
command writes to the output file. The exit status is the last command's.
"""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from typing import IO, Any, List, Mapping, Optional, Sequence, Tuple, Union

from pipeforge.errors import PipexError
from pipeforge.heredoc import read_here_doc
from pipeforge.paths import EXIT_NOT_FOUND, resolve_command

HERE_DOC = "here_doc"
OUTFILE_MODE = 0o644

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

Source = Union[int, IO[bytes], None]


@dataclass(frozen=True)
class PipelineSpec:
    """What a pipeline reads, the commands it runs and where it writes.

    Exactly one of ``infile`` and ``limiter`` is set; a limiter means the
    input is a here-document and the output file is appended to.
    """

    commands: Tuple[str, ...]
    outfile: str
    infile: Optional[str] = None
    limiter: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.infile is None) == (self.limiter is None):
            raise ValueError("give exactly one of infile and limiter")
        if not self.commands:
            raise ValueError("a pipeline needs at least one command")
        object.__setattr__(self, "commands", tuple(self.commands))

    @property
    def here_doc(self) -> bool:
        """True when the input is a here-document."""
        return self.limiter is not None


def parse_args(args: Sequence[str]) -> PipelineSpec:
    """Build a spec from ``infile cmd1 ... cmdN outfile`` or
    ``here_doc LIMITER cmd1 ... cmdN outfile``.

    The first argument selects the here-document form when it is a prefix
    of ``here_doc``. At least two commands are required; otherwise
    :class:`PipexError` is raised with status 1.
    """
    args = list(args)
    here_doc = bool(args) and HERE_DOC.startswith(args[0])
    if len(args) < (5 if here_doc else 4):
        raise PipexError("Incorrect format", 1)
    if here_doc:
        return PipelineSpec(
            commands=tuple(args[2:-1]), outfile=args[-1], limiter=args[1]
        )
    return PipelineSpec(commands=tuple(args[1:-1]), outfile=args[-1], infile=args[0])


def _report(error: PipexError) -> None:
    print(error, file=sys.stderr)


def _stdin_fd(stdin: Any) -> int:
    if stdin is None:
        return 0
    if isinstance(stdin, int):
        return stdin
    return stdin.fileno()


def _open_source(
    spec: PipelineSpec, stack: contextlib.ExitStack, stdin: Any
) -> Union[int, IO[bytes]]:
    if spec.here_doc:
        content = read_here_doc(spec.limiter, _stdin_fd(stdin))
        holder = stack.enter_context(tempfile.TemporaryFile())
        holder.write(content.encode(_ENCODING, _ERRORS))
        holder.seek(0)
        return holder
    try:
        fd = os.open(spec.infile, os.O_RDONLY)
    except OSError as exc:
        raise PipexError(spec.infile, 1) from exc
    stack.callback(os.close, fd)
    return fd


def _open_sink(spec: PipelineSpec, stack: contextlib.ExitStack) -> int:
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if spec.here_doc else os.O_TRUNC
    try:
        fd = os.open(spec.outfile, flags, OUTFILE_MODE)
    except OSError as exc:
        raise PipexError(spec.outfile, 1) from exc
    stack.callback(os.close, fd)
    return fd


def _spawn(
    spec: PipelineSpec,
    command: str,
    upstream: Source,
    is_last: bool,
    env: Mapping[str, str],
    stack: contextlib.ExitStack,
) -> "subprocess.Popen[bytes]":
    stdout = _open_sink(spec, stack) if is_last else subprocess.PIPE
    program, args = resolve_command(command, env)
    try:
        return subprocess.Popen(
            args,
            executable=program,
            stdin=subprocess.DEVNULL if upstream is None else upstream,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        raise PipexError("fail in execution", EXIT_NOT_FOUND) from exc


def run_pipeline(
    spec: PipelineSpec,
    env: Optional[Mapping[str, str]] = None,
    stdin: Any = None,
) -> int:
    """Run the pipeline and return the exit status of its last command.

    ``env`` is the environment the commands get and search PATH in; it
    defaults to the current one. ``stdin`` is the descriptor or file a
    here-document is read from, standard input by default.

    A step that cannot start reports the problem on standard error and the
    next step reads empty input; its status is 1 for a file that cannot be
    opened and 127 for a command that cannot be run. A command killed by a
    signal counts as status 0.
    """
    environment: Mapping[str, str] = os.environ if env is None else env
    outcomes: List[Union["subprocess.Popen[bytes]", int]] = []
    last = len(spec.commands) - 1
    with contextlib.ExitStack() as stack:
        source_error: Optional[PipexError] = None
        upstream: Source = None
        try:
            upstream = _open_source(spec, stack, stdin)
        except PipexError as error:
            source_error = error
        pipe: Optional[IO[bytes]] = None
        for index, command in enumerate(spec.commands):
            is_last = index == last
            process = None
            try:
                if index == 0 and source_error is not None:
                    raise source_error
                process = _spawn(spec, command, upstream, is_last, environment, stack)
            except PipexError as error:
                _report(error)
                outcomes.append(error.status)
            else:
                outcomes.append(process)
            finally:
                if pipe is not None:
                    pipe.close()
            pipe = process.stdout if process is not None and not is_last else None
            upstream = pipe
        statuses = [
            outcome if isinstance(outcome, int) else outcome.wait()
            for outcome in outcomes
        ]
    status = statuses[-1]
    return status if status >= 0 else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline the command-line arguments describe."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        spec = parse_args(args)
    except PipexError as error:
        _report(error)
        return error.status
    return run_pipeline(spec)