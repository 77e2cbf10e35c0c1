"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from reliable_fs.context import AppContext
from reliable_fs.errors import AdapterError
from reliable_fs.memory import MemoryVolume
from reliable_fs.types import EntryKind, TreeEntry

# Files created below the origin directory by `origin_tree`
TREE_FILES = [
    "one.txt",
    "two.txt",
    "three.txt",
    "subdir/one.txt",
    "subdir/two.txt",
    "subdir/three.txt",
]


@pytest.fixture
def origin_tree(tmp_path: Path) -> Path:
    """Create an origin directory with files at two levels."""
    origin = tmp_path / "origin"
    (origin / "subdir").mkdir(parents=True)
    for name in TREE_FILES:
        (origin / name).write_text(f"content of {name}")
    return origin


# ============================================================================
# In-Memory Storage Fixtures
# ============================================================================


@pytest.fixture
def volume() -> MemoryVolume:
    """Create an empty in-memory volume."""
    return MemoryVolume()


@pytest.fixture
def memory_tree(volume: MemoryVolume) -> MemoryVolume:
    """Populate the volume with the same tree as `origin_tree` under /data/origin."""
    storage = volume.mount("/data/origin")
    for name in TREE_FILES:
        storage.write(name, f"content of {name}".encode())
    return volume


@pytest.fixture
def memory_context(volume: MemoryVolume) -> AppContext:
    """Create an AppContext backed by the in-memory volume."""
    return AppContext(mount=volume.mount)


# ============================================================================
# Mock Storage Fixture
# ============================================================================


@pytest.fixture
def mock_storage() -> MagicMock:
    """Create a mock StorageAdapter.

    Lists one file and one directory; reads fail with AdapterError.
    """
    storage = MagicMock()
    storage.list_contents.return_value = [
        TreeEntry(path="origin/sub", kind=EntryKind.DIRECTORY),
        TreeEntry(path="origin/file.txt", kind=EntryKind.FILE),
    ]
    storage.read.side_effect = AdapterError("unreadable")
    return storage


@pytest.fixture
def mock_mount(mock_storage: MagicMock) -> MagicMock:
    """Create a mock AdapterFactory that always returns `mock_storage`."""
    return MagicMock(return_value=mock_storage)
