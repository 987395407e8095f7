"""Duplicate-name policy applied when entries arrive in a directory."""

from __future__ import annotations

import logging

from .nodes import Directory

log = logging.getLogger(__name__)


def rename_if_colliding(directory: Directory, name: str) -> str:
    """Return the name an incoming entry called ``name`` should take.

    Once a base name has produced a suffix, every later arrival of that
    base name gets the next suffix, whether or not the original still
    exists. Counters are never decremented.
    """

    count = directory.duplicate_count.get(name, 0)
    if not count and not directory.has_entry(name):
        return name
    count += 1
    # skip suffixes already taken by entries named that way explicitly
    while directory.has_entry(f"{name}({count})"):
        count += 1
    directory.duplicate_count[name] = count
    renamed = f"{name}({count})"
    log.debug("Renamed colliding entry %r to %r", name, renamed)
    return renamed
