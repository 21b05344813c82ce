"""An interactive shell that parses input lines, with helpers to run commands and handle text."""

__version__ = "0.1.0"
__all__ = ["executor", "formatting", "lines", "parser", "shell", "text"]