"""The interactive loop: prompt, read a line, parse it and show the result."""

from __future__ import annotations

import os
import sys

from minishell.parser import Command, parse
from minishell.text import is_space

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_BANNER = (
    " __  __ _       _     _          _ _ \n"
    "|  \\/  (_)_ __ (_)___| |__   ___| | |\n"
    "| |\\/| | | '_ \\| / __| '_ \\ / _ \\ | |\n"
    "| |  | | | | | | \\__ \\ | | |  __/ | |\n"
    "|_|  |_|_|_| |_|_|___/_| |_|\\___|_|_|\n"
    "\n"
)


def welcome_message() -> None:
    """Print the start-up banner."""
    sys.stdout.write(_BANNER)
    sys.stdout.flush()


def is_empty_line(line: str) -> bool:
    """Return True if ``line`` holds only whitespace."""
    return all(is_space(c) for c in line)


def generate_prompt() -> str:
    """Build the prompt from the user name and the working directory."""
    user = os.environ.get("USER") or "user"
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = "?"
    return f"{user}@minishell:{cwd}$ "


def describe_command(command: Command | None) -> str:
    """Return a readable listing of a command's name and arguments."""
    if command is None:
        return "Command is NULL\n"
    name = "(null)" if command.name is None else command.name
    lines = [f"Command name: {name}", "Arguments:"]
    lines.extend(f"  args[{i}]: {arg}" for i, arg in enumerate(command.args))
    return "\n".join(lines) + "\n"


def _add_history(line: str) -> None:
    try:
        import readline
    except ImportError:
        return
    readline.add_history(line)


def _handle(line: str) -> None:
    sys.stdout.write(describe_command(parse(line)))
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive loop until end of input; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        sys.stderr.write("Error: This program does not accept arguments.\n")
        return EXIT_FAILURE
    welcome_message()
    while True:
        try:
            line = input(generate_prompt())
        except EOFError:
            print("exit")
            break
        if not is_empty_line(line):
            _add_history(line)
        _handle(line)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())