# pipeforge

`pipeforge` runs a chain of commands joined by pipes. The first command reads
from a file or from a here-document, and the last command writes to a file,
much like this shell line:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```
pip install .
```

## Usage

Read from a file and truncate (or create) the output file:

```
pipeforge infile "grep foo" "wc -l" outfile
```

Any number of commands may be given, at least two; each runs as its own
process:

```
pipeforge infile "cat" "tr a-z A-Z" "sort" outfile
```

Use a here-document in place of the input file. Lines are read from standard
input until a line consisting of the limiter (or the end of input). The output
file is then opened in append mode:

```
pipeforge here_doc EOF "cat" "wc -l" outfile
```

which corresponds to:

```
cmd1 << EOF | cmd2 >> outfile
```

The here-document form is chosen when the first argument is `here_doc` or a
prefix of it. An output file that has to be created gets mode `0644`.

### Commands

Each command is split on spaces into a program name and its arguments. A
command holding a `/` is run as written. Any other name is looked up in the
directories listed in `PATH`, and then tried as a file in the current
directory.

### Exit status and errors

The exit status is that of the last command in the chain:

- too few arguments (fewer than four, or fewer than five with `here_doc`):
  `Incorrect format` is printed and the status is 1;
- the output file cannot be opened: the problem is printed and the status is 1;
- the last command cannot be found or run: the status is 127;
- a last command killed by a signal counts as status 0.

When the input file cannot be opened, or a command in the middle cannot be
found, the problem is printed on standard error, that step is skipped and the
next command reads empty input; the pipeline still runs to the end.

## As a library

```python
from pipeforge.pipeline import parse_args, run_pipeline

spec = parse_args(["infile", "grep foo", "wc -l", "outfile"])
status = run_pipeline(spec, env=None, stdin=None)
```

- `pipeforge.pipeline.PipelineSpec` holds the commands, the output file and
  either an input file or a limiter; `parse_args` builds one from
  command-line arguments and raises `pipeforge.errors.PipexError` (which
  carries a `status`) when there are too few.
- `run_pipeline(spec, env, stdin)` runs it and returns the exit status. `env`
  is the environment for the commands and for the `PATH` search; `stdin` is
  the descriptor or file a here-document is read from.
- `pipeforge.paths.resolve_command` looks up a command line the same way the
  pipeline does; `search_dirs` and `find_executable` expose the `PATH` search.
- `pipeforge.heredoc.read_here_doc` collects here-document text, and
  `LineReader` reads lines from a raw file descriptor.

The package also holds small helpers with C-style semantics:
`pipeforge.chars` (ASCII classification and case conversion),
`pipeforge.numbers` (`atoi`, `itoa`), `pipeforge.strings` (searching,
comparing, splitting, `strlcpy`/`strlcat` on byte buffers),
`pipeforge.memory` (byte-buffer fill, search, compare, copy),
`pipeforge.lists` (`LinkedList`, `Node`) and `pipeforge.output`
(writing characters, strings and numbers to file descriptors).

## What it does not do

Commands are not interpreted by a shell: quotes, escapes, globbing, variables
and redirections inside a command are not understood, and a quoted argument
containing spaces is split like any other.

## Running the tests

```
pip install .[test]
pytest
```