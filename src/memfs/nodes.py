"""Node model of the in-memory filesystem."""

from __future__ import annotations

import weakref
from typing import Dict, Iterator, Optional


class Node:
    """Shared shape of directories and files: a name and a parent link.

    The parent is held through a weak reference. Ownership runs strictly
    downwards through the parent's child maps, so re-parenting a node only
    swaps the weak handle.
    """

    def __init__(self, name: str, parent: Optional["Directory"] = None) -> None:
        self.name = name
        self._parent: Optional["weakref.ReferenceType[Directory]"] = None
        self.parent = parent

    @property
    def parent(self) -> Optional["Directory"]:
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: Optional["Directory"]) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class File(Node):
    """Leaf node holding opaque string content."""

    def __init__(self, name: str, parent: Optional["Directory"] = None, content: str = "") -> None:
        super().__init__(name, parent)
        self.content = content


class Directory(Node):
    """Container node owning child directories and files."""

    def __init__(self, name: str, parent: Optional["Directory"] = None) -> None:
        super().__init__(name, parent)
        self.children: Dict[str, Directory] = {}
        self.files: Dict[str, File] = {}
        # base name -> highest "(n)" suffix issued in this directory
        self.duplicate_count: Dict[str, int] = {}

    @property
    def is_root(self) -> bool:
        return self.parent is None and self.name == ""

    def has_entry(self, name: str) -> bool:
        return name in self.children or name in self.files

    def add_directory(self, name: str) -> "Directory":
        child = Directory(name, self)
        self.children[name] = child
        return child

    def add_file(self, name: str, content: str = "") -> File:
        child = File(name, self, content)
        self.files[name] = child
        return child

    def is_ancestor_of(self, node: Node) -> bool:
        current = node.parent
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    def iter_entries(self) -> Iterator[Node]:
        yield from self.children.values()
        yield from self.files.values()
