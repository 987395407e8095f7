"""Shell environment dispatching parsed commands to the filesystem."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import CommandParseError, MemFSError
from .filesystem import MemoryFileSystem
from .parser import ParsedCommand, parse_tokens, split_commands

log = logging.getLogger(__name__)

RECURSIVE_OPTION = "p"


@dataclass
class ShellResponse:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    should_exit: bool = False

    def as_text(self) -> str:
        if self.stderr:
            return self.stdout + self.stderr
        return self.stdout


class ShellEnvironment:
    """Stateful shell session over a :class:`MemoryFileSystem`."""

    def __init__(
        self,
        filesystem: Optional[MemoryFileSystem] = None,
        prompt: str = "command: ",
        exit_command: str = "exit",
    ) -> None:
        self.filesystem = filesystem or MemoryFileSystem()
        self.prompt = prompt
        self.exit_command = exit_command
        self.history: List[str] = []

    def add_history(self, command: str) -> None:
        if command.strip():
            self.history.append(command)

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------
    def execute(self, line: str) -> ShellResponse:
        line = line.strip()
        if not line:
            return ShellResponse()
        self.add_history(line)
        responses: List[ShellResponse] = []
        try:
            for tokens in split_commands(line):
                response = self.dispatch(parse_tokens(tokens))
                responses.append(response)
                if response.should_exit:
                    break
        except MemFSError as exc:
            log.debug("Command failed: %s", exc)
            responses.append(ShellResponse(stderr=str(exc) + "\n", exit_code=1))
        stdout = "".join(response.stdout for response in responses)
        stderr = "".join(response.stderr for response in responses)
        exit_code = responses[-1].exit_code if responses else 0
        should_exit = any(response.should_exit for response in responses)
        return ShellResponse(stdout=stdout, stderr=stderr, exit_code=exit_code, should_exit=should_exit)

    def dispatch(self, command: ParsedCommand) -> ShellResponse:
        if command.action == self.exit_command:
            return ShellResponse(should_exit=True)
        handler = getattr(self, f"cmd_{command.action}", None)
        if handler is None:
            return ShellResponse(stderr=f"{command.action}: command not found\n", exit_code=127)
        log.debug("Dispatching %s", command)
        return handler(command)

    def _require_src(self, command: ParsedCommand) -> List[str]:
        if command.src_path is None:
            raise CommandParseError(f"{command.action}: missing operand")
        return command.src_path

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def cmd_cd(self, command: ParsedCommand) -> ShellResponse:
        self.filesystem.change_directory(command.src_path or [""])
        return ShellResponse()

    def cmd_pwd(self, command: ParsedCommand) -> ShellResponse:
        return ShellResponse(stdout=self.filesystem.print_working_directory() + "\n")

    def cmd_mkdir(self, command: ParsedCommand) -> ShellResponse:
        path = self._require_src(command)
        self.filesystem.make_directory(path, recursive=command.option == RECURSIVE_OPTION)
        return ShellResponse()

    def cmd_ls(self, command: ParsedCommand) -> ShellResponse:
        names = self.filesystem.list_contents(command.src_path)
        return ShellResponse(stdout=" ".join(names) + "\n")

    def cmd_rm(self, command: ParsedCommand) -> ShellResponse:
        self.filesystem.remove(self._require_src(command))
        return ShellResponse()

    def cmd_mkfile(self, command: ParsedCommand) -> ShellResponse:
        self.filesystem.create_file(self._require_src(command))
        return ShellResponse()

    def cmd_write(self, command: ParsedCommand) -> ShellResponse:
        self.filesystem.write_content(self._require_src(command), command.content or "")
        return ShellResponse()

    def cmd_read(self, command: ParsedCommand) -> ShellResponse:
        content = self.filesystem.read_content(self._require_src(command))
        return ShellResponse(stdout=content + "\n")

    def cmd_mv(self, command: ParsedCommand) -> ShellResponse:
        source = self._require_src(command)
        if command.dest_path is None:
            raise CommandParseError("mv: missing destination operand")
        self.filesystem.move(source, command.dest_path)
        return ShellResponse()

    def cmd_find(self, command: ParsedCommand) -> ShellResponse:
        path = self._require_src(command)
        matches = self.filesystem.find("/".join(path))
        return ShellResponse(stdout=" ".join(matches) + "\n")

    def cmd_history(self, command: ParsedCommand) -> ShellResponse:
        lines = [f"{idx + 1}  {cmd}" for idx, cmd in enumerate(self.history)]
        return ShellResponse(stdout="\n".join(lines) + ("\n" if lines else ""))
