# minishell

A small interactive shell. It prints a banner and then shows a prompt of the
form `user@minishell:/current/dir$ `. The user name comes from `$USER`, or
`user` if that is unset, and the directory is `?` if it cannot be found. The
shell reads a line and splits it into words on spaces, tabs, carriage
returns, newlines and the bell character. It then prints the command it
parsed:

```
Command name: ls
Arguments:
  args[0]: ls
  args[1]: -l
```

Lines that hold more than whitespace go into the line-editing history when
the `readline` module is available.

## Installing

```
pip install .
```

## Running

```
minishell
```

The shell takes no arguments. If you pass any, it writes
`Error: This program does not accept arguments.` to standard error and exits
with status 1. End input with Ctrl-D. The shell prints `exit` and returns
status 0.

## What it does not do

The interactive loop only parses and reports each line. It does not run the
command. There are no built-in commands, no quoting or escaping, no
variables, no pipes and no redirections. Words are split on whitespace only.
To run a parsed command, call `minishell.executor.execute` yourself.

## Using it as a library

```python
from minishell.parser import parse
from minishell.executor import execute
from minishell.shell import describe_command

command = parse("ls -l /tmp")
print(describe_command(command), end="")
status = execute(command)
```

- `minishell.parser.parse(line)` returns a `Command` with `name`, the first
  word or `None` for a blank line, and `args`, every word including the
  name.
- `minishell.executor.execute(command)` runs the program, waits for it and
  returns its exit status. The status is negative if a signal killed the
  program. The function returns 1 after it reports `execvp: ...` on
  standard error if the program cannot be started. It raises `ValueError`
  for a command with no name.
- `minishell.shell` provides `welcome_message()`, `is_empty_line(line)`,
  `generate_prompt()`, `describe_command(command)` and `main(argv=None)`.
- `minishell.text` provides string helpers with C-string semantics:
  - `is_space`
  - `strcmp` and `strncmp`
  - `atoi`, which skips leading whitespace, accepts one sign and truncates
    to 32 bits
  - `itoa`
  - `split`, on a single character
  - `strtok`, on any character of a set
  - `strtrim` and `substr`

  `split` and `strtok` drop empty pieces.
- `minishell.formatting.sprintf(fmt, *args)` formats `%c %s %d %i %u %x %X
  %p %%`:
  - `None` prints as `(null)` for `%s`.
  - A zero or `None` pointer prints as `(nil)` for `%p`.
  - Unknown conversions produce nothing.
  - Too few arguments raise `ValueError`.

  `printf(fmt, *args)` writes the result to standard output and returns
  its length.
- `minishell.lines.LineReader(buffer_size=4)` reads from raw file
  descriptors:
  - `next_line(fd)` returns the next line as bytes, with its newline, or
    `None` at the end of input.
  - Each descriptor keeps its own unread remainder.
  - Descriptors outside 0–1023 raise `ValueError`.

## Tests

```
pip install .[test]
pytest
```