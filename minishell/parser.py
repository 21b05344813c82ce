"""Turning an input line into a command."""

from __future__ import annotations

from dataclasses import dataclass, field

from minishell.text import strtok

TOKEN_DELIM = " \t\r\n\a"


@dataclass
class Command:
    """A command name and its full argument vector, the name included."""

    name: str | None
    args: list[str] = field(default_factory=list)


def parse(line: str) -> Command:
    """Split ``line`` on whitespace; the first word is the command name."""
    tokens = strtok(line, TOKEN_DELIM)
    return Command(name=tokens[0] if tokens else None, args=tokens)