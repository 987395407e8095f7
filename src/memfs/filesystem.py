"""In-memory namespace engine backing the memfs shell."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import (
    AlreadyExists,
    FileNotFound,
    InvalidMove,
    InvalidPath,
    NotFound,
    SourceNotFound,
)
from .naming import rename_if_colliding
from .nodes import Directory
from .resolver import CURRENT, PARENT, ensure, lookup

log = logging.getLogger(__name__)


class MemoryFileSystem:
    """A POSIX-like tree of directories and files held entirely in memory."""

    def __init__(self) -> None:
        self.root = Directory("")
        self.working_directory = self.root

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _lookup(self, segments: Sequence[str]) -> Directory:
        return lookup(self.root, self.working_directory, segments)

    def _split_target(self, path: Sequence[str]) -> Tuple[List[str], str]:
        if not path:
            raise InvalidPath("Missing path")
        *prefix, name = path
        if name in {"", CURRENT, PARENT}:
            raise InvalidPath(f"Invalid name: {'/'.join(path) or '/'}")
        return prefix, name

    def _render_path(self, directory: Directory) -> str:
        if directory.is_root:
            return "/"
        result = ""
        current: Optional[Directory] = directory
        while current is not None and not current.is_root:
            result = "/" + current.name + result
            current = current.parent
        return result

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def change_directory(self, path: Sequence[str]) -> None:
        self.working_directory = self._lookup(path)
        log.debug("Working directory is now %s", self._render_path(self.working_directory))

    def print_working_directory(self) -> str:
        return self._render_path(self.working_directory)

    def list_contents(self, path: Optional[Sequence[str]] = None) -> List[str]:
        directory = self._lookup(path) if path is not None else self.working_directory
        return [entry.name for entry in directory.iter_entries()]

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------
    def make_directory(self, path: Sequence[str], recursive: bool = False) -> None:
        prefix, name = self._split_target(path)
        if recursive:
            parent = ensure(self.root, self.working_directory, prefix)
        else:
            parent = self._lookup(prefix)
        if parent.has_entry(name):
            raise AlreadyExists()
        parent.add_directory(name)
        log.debug("Created directory %r in %s", name, self._render_path(parent))

    def create_file(self, path: Sequence[str]) -> str:
        prefix, name = self._split_target(path)
        parent = self._lookup(prefix)
        final_name = rename_if_colliding(parent, name)
        parent.add_file(final_name)
        log.debug("Created file %r in %s", final_name, self._render_path(parent))
        return final_name

    def remove(self, path: Sequence[str]) -> None:
        prefix, name = self._split_target(path)
        parent = self._lookup(prefix)
        if name in parent.children:
            removed = parent.children[name]
            if removed is self.working_directory or removed.is_ancestor_of(self.working_directory):
                log.debug("Working directory removed, returning to root")
                self.working_directory = self.root
            del parent.children[name]
        elif name in parent.files:
            del parent.files[name]
        else:
            raise NotFound()
        log.debug("Removed %r from %s", name, self._render_path(parent))

    def write_content(self, path: Sequence[str], content: str) -> None:
        prefix, name = self._split_target(path)
        parent = self._lookup(prefix)
        target = parent.files.get(name)
        if target is None:
            if name in parent.children:
                raise AlreadyExists()
            target = parent.add_file(name)
        target.content = content

    def read_content(self, path: Sequence[str]) -> str:
        prefix, name = self._split_target(path)
        parent = self._lookup(prefix)
        target = parent.files.get(name)
        if target is None:
            raise FileNotFound(name)
        return target.content

    def move(self, src_path: Sequence[str], dest_path: Sequence[str]) -> str:
        """Move a file or directory into the directory named by ``dest_path``.

        Files and directories that collide with destination entries are
        renamed by the duplicate-name policy, except that a directory landing
        on a same-named directory is merged into it. Returns the name the
        entry ends up with.
        """

        prefix, name = self._split_target(src_path)
        source_parent = self._lookup(prefix)
        destination = self._lookup(dest_path)

        source_file = source_parent.files.get(name)
        if source_file is not None:
            new_name = rename_if_colliding(destination, name)
            del source_parent.files[name]
            source_file.parent = destination
            source_file.name = new_name
            destination.files[new_name] = source_file
            log.debug("Moved file %r to %s as %r", name, self._render_path(destination), new_name)
            return new_name

        source_dir = source_parent.children.get(name)
        if source_dir is None:
            raise SourceNotFound()
        if source_dir is destination or source_dir.is_ancestor_of(destination):
            raise InvalidMove(f"Cannot move a directory into itself: {name}")

        existing = destination.children.get(name)
        if existing is source_dir:
            return name
        if existing is not None:
            self.merge(source_dir, existing)
            del source_parent.children[name]
            log.debug("Merged directory %r into %s", name, self._render_path(existing))
            return name

        new_name = rename_if_colliding(destination, name) if name in destination.files else name
        del source_parent.children[name]
        self._adopt_directory(source_dir, destination, new_name)
        log.debug("Moved directory %r to %s as %r", name, self._render_path(destination), new_name)
        return new_name

    def merge(self, source: Directory, destination: Directory) -> None:
        """Transplant every entry of ``source`` into ``destination``.

        ``source`` is left empty; removing it from its parent is up to the
        caller.
        """

        if self.working_directory is source:
            self.working_directory = destination
        for child in list(source.children.values()):
            existing = destination.children.get(child.name)
            if existing is not None:
                self.merge(child, existing)
                continue
            new_name = child.name
            if new_name in destination.files:
                new_name = rename_if_colliding(destination, new_name)
            self._adopt_directory(child, destination, new_name)

        for item in list(source.files.values()):
            new_name = rename_if_colliding(destination, item.name)
            item.name = new_name
            item.parent = destination
            destination.files[new_name] = item

        source.children.clear()
        source.files.clear()

    def _adopt_directory(self, directory: Directory, parent: Directory, name: str) -> None:
        directory.parent = parent
        directory.name = name
        parent.children[name] = directory

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def walk(self, start: Optional[Directory] = None) -> Iterator[Tuple[str, Directory]]:
        """Yield ``(prefix, directory)`` pairs in depth-first pre-order.

        ``prefix`` is the path from ``start`` to the directory with a trailing
        slash; it begins with ``/`` when ``start`` is the filesystem root.
        """

        start = start or self.working_directory
        stack = [("/" if start.is_root else "", start)]
        while stack:
            prefix, current = stack.pop()
            yield prefix, current
            for child in reversed(list(current.children.values())):
                stack.append((f"{prefix}{child.name}/", child))

    def find(self, name: str) -> List[str]:
        matches: List[str] = []
        for prefix, directory in self.walk():
            if directory.has_entry(name):
                matches.append(prefix + name)
        return matches
