import io
import os

import pytest

from minishell.parser import Command, parse
from minishell.shell import (
    describe_command,
    generate_prompt,
    is_empty_line,
    main,
    welcome_message,
)


@pytest.mark.parametrize("line", ["", " ", "\t\n\r\v\f "])
def test_blank_lines_are_empty(line):
    assert is_empty_line(line) is True


@pytest.mark.parametrize("line", ["a", "  ls  ", "\tx\n"])
def test_lines_with_text_are_not_empty(line):
    assert is_empty_line(line) is False


def test_prompt_uses_user_and_cwd(monkeypatch, tmp_path):
    monkeypatch.setenv("USER", "alice")
    monkeypatch.chdir(tmp_path)
    assert generate_prompt() == f"alice@minishell:{os.getcwd()}$ "


def test_prompt_without_user(monkeypatch):
    monkeypatch.delenv("USER", raising=False)
    prompt = generate_prompt()
    assert prompt.startswith("user@minishell:")
    assert prompt.endswith("$ ")


def test_describe_missing_command():
    assert describe_command(None) == "Command is NULL\n"


def test_describe_parsed_command():
    text = describe_command(parse("echo hi"))
    assert text == "Command name: echo\nArguments:\n  args[0]: echo\n  args[1]: hi\n"


def test_describe_empty_command():
    assert describe_command(Command(name=None, args=[])) == "Command name: (null)\nArguments:\n"


def test_welcome_message(capsys):
    welcome_message()
    out = capsys.readouterr().out
    assert out.startswith(" __  __ _")
    assert out.endswith("|_|  |_|_|_| |_|_|___/_| |_|\\___|_|_|\n\n")
    assert len(out.splitlines()) == 6


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().err == "Error: This program does not accept arguments.\n"


def test_main_loop_until_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo hi\n   \n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Command name: echo\nArguments:\n  args[0]: echo\n  args[1]: hi\n" in out
    assert "Command name: (null)" in out
    assert out.endswith("exit\n")
    assert out.count("@minishell:") == 3