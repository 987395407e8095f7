"""Path resolution from segment lists to directories.

``lookup`` never touches the tree. ``ensure`` creates missing
directories along the way and is the only resolution path that mutates.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .exceptions import AlreadyExists, DirectoryNotFound
from .nodes import Directory

log = logging.getLogger(__name__)

PARENT = ".."
CURRENT = "."


def resolve(
    root: Directory,
    start: Directory,
    segments: Sequence[str],
    create_missing: bool = False,
) -> Directory:
    current = start
    if not segments:
        return current

    remaining = list(segments)
    if remaining[0] == "":
        current = root
        remaining = remaining[1:]

    for segment in remaining:
        if segment in {"", CURRENT}:
            continue
        if segment == PARENT:
            # ".." at the root stays at the root
            if current.parent is not None:
                current = current.parent
            continue
        child = current.children.get(segment)
        if child is not None:
            current = child
            continue
        if not create_missing:
            raise DirectoryNotFound()
        if segment in current.files:
            raise AlreadyExists()
        log.debug("Creating intermediate directory %r", segment)
        current = current.add_directory(segment)
    return current


def lookup(root: Directory, start: Directory, segments: Sequence[str]) -> Directory:
    return resolve(root, start, segments, create_missing=False)


def ensure(root: Directory, start: Directory, segments: Sequence[str]) -> Directory:
    return resolve(root, start, segments, create_missing=True)
