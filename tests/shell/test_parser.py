from __future__ import annotations

import pytest

from memfs.exceptions import CommandParseError
from memfs.parser import ParsedCommand, parse_command, parse_path, split_commands


@pytest.mark.parametrize(
    "text, expected",
    [
        ("math/homework", ["math", "homework"]),
        ("/math/homework", ["", "math", "homework"]),
        ("math/", ["math"]),
        ("/", [""]),
        ("..", [".."]),
    ],
)
def test_parse_path(text: str, expected: list) -> None:
    assert parse_path(text) == expected


def test_parse_change_directory() -> None:
    assert parse_command("cd /math/homework") == ParsedCommand(action="cd", src_path=["", "math", "homework"])


def test_parse_bare_action() -> None:
    assert parse_command("pwd") == ParsedCommand(action="pwd")
    assert parse_command("ls") == ParsedCommand(action="ls")


def test_parse_option() -> None:
    parsed = parse_command("mkdir -p math/homework")
    assert parsed.option == "p"
    assert parsed.src_path == ["math", "homework"]


def test_parse_write_with_quoted_content() -> None:
    parsed = parse_command('write file "file contents; with a semicolon"')
    assert parsed.action == "write"
    assert parsed.src_path == ["file"]
    assert parsed.content == "file contents; with a semicolon"


def test_parse_write_without_content() -> None:
    assert parse_command("write file").content == ""


def test_parse_move() -> None:
    parsed = parse_command("mv math/homework assignments")
    assert parsed.src_path == ["math", "homework"]
    assert parsed.dest_path == ["assignments"]


def test_parse_names_with_suffixes() -> None:
    assert parse_command("read notes(1)").src_path == ["notes(1)"]


def test_too_many_arguments() -> None:
    with pytest.raises(CommandParseError, match="too many arguments"):
        parse_command("mv a b c")


def test_unbalanced_quotes() -> None:
    with pytest.raises(CommandParseError):
        parse_command('write file "unterminated')


def test_split_commands_on_semicolons() -> None:
    assert split_commands("mkdir a; cd a;pwd") == [["mkdir", "a"], ["cd", "a"], ["pwd"]]
    assert split_commands(" ; ") == []


def test_parse_command_expects_a_single_command() -> None:
    with pytest.raises(CommandParseError):
        parse_command("pwd; pwd")
    with pytest.raises(CommandParseError):
        parse_command("")


def test_options_only_apply_to_mkdir() -> None:
    assert parse_command("mkfile -notes") == ParsedCommand(action="mkfile", src_path=["-notes"])
    assert parse_command("ls -a") == ParsedCommand(action="ls", src_path=["-a"])


def test_option_is_its_first_character() -> None:
    parsed = parse_command("mkdir -pv a/b")
    assert parsed.option == "p"
    assert parsed.src_path == ["a", "b"]
