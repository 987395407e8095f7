from __future__ import annotations

import pytest

from memfs.filesystem import MemoryFileSystem


@pytest.fixture
def fs() -> MemoryFileSystem:
    """/math/homework/{assignment1,assignment2} and /biology/homework/assignment1."""
    filesystem = MemoryFileSystem()
    math = filesystem.root.add_directory("math")
    biology = filesystem.root.add_directory("biology")
    math_homework = math.add_directory("homework")
    biology_homework = biology.add_directory("homework")
    math_homework.add_file("assignment1", "assignment1 content")
    math_homework.add_file("assignment2", "assignment2 content")
    biology_homework.add_file("assignment1", "assignment1 content")
    return filesystem
