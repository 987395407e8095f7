"""Turn raw command lines into structured requests."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import CommandParseError

CONTENT_ACTIONS = {"write"}
OPTION_ACTIONS = {"mkdir"}


@dataclass
class ParsedCommand:
    action: str
    src_path: Optional[List[str]] = None
    dest_path: Optional[List[str]] = None
    content: Optional[str] = None
    option: Optional[str] = None


def parse_path(text: str) -> List[str]:
    """Split a ``/``-delimited path into segments.

    A leading empty segment marks an absolute path. A trailing slash is
    dropped, so ``"/"`` becomes ``[""]``.
    """

    segments = text.split("/")
    if len(segments) > 1 and segments[-1] == "":
        segments.pop()
    return segments


def split_commands(line: str) -> List[List[str]]:
    try:
        lexer = shlex.shlex(line, posix=True, punctuation_chars=";")
        lexer.whitespace_split = True
        tokens = list(lexer)
    except ValueError as exc:
        raise CommandParseError(f"Error parsing command: {exc}") from exc
    commands: List[List[str]] = []
    current: List[str] = []
    for token in tokens:
        if token == ";":
            if current:
                commands.append(current)
                current = []
            continue
        current.append(token)
    if current:
        commands.append(current)
    return commands


def parse_tokens(tokens: List[str]) -> ParsedCommand:
    if not tokens:
        raise CommandParseError("No command provided")
    action, *args = tokens
    command = ParsedCommand(action=action)

    if action in OPTION_ACTIONS and args and len(args[0]) > 1 and args[0].startswith("-"):
        command.option = args[0][1]
        args = args[1:]

    if action in CONTENT_ACTIONS:
        if not args:
            return command
        command.src_path = parse_path(args[0])
        command.content = " ".join(args[1:])
        return command

    if len(args) > 2:
        raise CommandParseError(f"{action}: too many arguments")
    if args:
        command.src_path = parse_path(args[0])
    if len(args) > 1:
        command.dest_path = parse_path(args[1])
    return command


def parse_command(line: str) -> ParsedCommand:
    commands = split_commands(line)
    if len(commands) != 1:
        raise CommandParseError("Expected exactly one command")
    return parse_tokens(commands[0])
