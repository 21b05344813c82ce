"""Running a parsed command as a child process."""

from __future__ import annotations

import subprocess
import sys

from minishell.parser import Command

EXIT_FAILURE = 1


def execute(command: Command) -> int:
    """Run ``command``, wait for it to finish and return its exit status.

    A command that cannot be started is reported on standard error and
    counts as a failure. A child killed by a signal gives a negative status.
    """
    if not command.name:
        raise ValueError("empty command")
    argv = command.args or [command.name]
    try:
        completed = subprocess.run(argv, executable=command.name, check=False)
    except OSError as exc:
        print(f"execvp: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_FAILURE
    return completed.returncode