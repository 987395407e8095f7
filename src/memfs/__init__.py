"""Public API for the in-memory filesystem and its command shell."""

from .exceptions import (
    AlreadyExists,
    CommandParseError,
    ConfigurationError,
    DirectoryNotFound,
    FileNotFound,
    FilesystemError,
    InvalidMove,
    InvalidPath,
    MemFSError,
    NotFound,
    SourceNotFound,
)
from .filesystem import MemoryFileSystem
from .nodes import Directory, File
from .parser import ParsedCommand, parse_command, parse_path
from .shell import ShellEnvironment, ShellResponse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MemoryFileSystem",
    "Directory",
    "File",
    "ShellEnvironment",
    "ShellResponse",
    "ParsedCommand",
    "parse_command",
    "parse_path",
    "MemFSError",
    "FilesystemError",
    "DirectoryNotFound",
    "AlreadyExists",
    "NotFound",
    "FileNotFound",
    "SourceNotFound",
    "InvalidPath",
    "InvalidMove",
    "CommandParseError",
    "ConfigurationError",
]
