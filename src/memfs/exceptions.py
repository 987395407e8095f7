"""Custom exception types for the in-memory filesystem and its shell."""

from __future__ import annotations


class MemFSError(Exception):
    """Base class for all memfs exceptions."""


class FilesystemError(MemFSError):
    """Raised when an invalid filesystem operation is requested."""


class DirectoryNotFound(FilesystemError):
    """Raised when a path segment does not name an existing directory."""

    def __init__(self, message: str = "Directory does not exist") -> None:
        super().__init__(message)


class AlreadyExists(FilesystemError):
    """Raised when a new entry would collide with an existing one."""

    def __init__(self, message: str = "File exists") -> None:
        super().__init__(message)


class NotFound(FilesystemError):
    """Raised when a removal target is neither a file nor a directory."""

    def __init__(self, message: str = "Directory or file does not exist") -> None:
        super().__init__(message)


class FileNotFound(FilesystemError):
    """Raised when a read targets a file that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No file exists with name {name}")
        self.name = name


class SourceNotFound(FilesystemError):
    """Raised when a move source is neither a file nor a directory."""

    def __init__(self, message: str = "Source file not found") -> None:
        super().__init__(message)


class InvalidPath(FilesystemError):
    """Raised when a path has no usable final segment."""


class InvalidMove(FilesystemError):
    """Raised when a directory would be moved into its own subtree."""


class CommandParseError(MemFSError):
    """Raised when a command line cannot be interpreted."""


class ConfigurationError(MemFSError):
    """Raised when a configuration file cannot be processed."""
