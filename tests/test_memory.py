"""Tests for the in-memory storage backend."""

from __future__ import annotations

import pytest

from reliable_fs.errors import AdapterError, MountError
from reliable_fs.memory import InMemoryStorage, MemoryVolume
from reliable_fs.protocols import AdapterFactory, StorageAdapter
from reliable_fs.types import EntryKind, TreeEntry


class TestMemoryVolume:
    """Tests for MemoryVolume."""

    def test_satisfies_protocols(self, volume: MemoryVolume) -> None:
        """Test structural conformance to the protocols."""
        assert isinstance(volume.mount("/data"), StorageAdapter)
        assert isinstance(volume.mount, AdapterFactory)

    def test_mount_creates_root(self, volume: MemoryVolume) -> None:
        """Test mounting creates the root and its parents."""
        storage = volume.mount("/a/b")
        assert isinstance(storage, InMemoryStorage)
        assert volume.is_dir("/a")
        assert volume.is_dir("/a/b")

    def test_mount_file(self, volume: MemoryVolume) -> None:
        """Test mounting on a file raises MountError."""
        volume.mount("/").write("file.txt", b"x")
        with pytest.raises(MountError):
            volume.mount("/file.txt/child")

    def test_mount_without_create(self, volume: MemoryVolume) -> None:
        """Test create=False refuses a missing root and leaves the volume untouched."""
        with pytest.raises(MountError):
            volume.mount("/a/b", create=False)
        assert not volume.exists("/a")
        assert volume.mount("/", create=False).root == "/"

    def test_exists(self, memory_tree: MemoryVolume) -> None:
        """Test exists sees files and directories."""
        assert memory_tree.exists("/data/origin/one.txt")
        assert memory_tree.exists("/data/origin/subdir")
        assert not memory_tree.exists("/data/origin/missing.txt")

    def test_children(self, memory_tree: MemoryVolume) -> None:
        """Test children are immediate and sorted."""
        assert memory_tree.children("/data") == ["/data/origin"]

    def test_children_follow_deletes(self, memory_tree: MemoryVolume) -> None:
        """Test the children index drops deleted files and trees."""
        storage = memory_tree.mount("/data/origin")
        storage.delete("one.txt")
        storage.delete_dir("subdir")
        storage.write("subdir/new.txt", b"new")

        assert memory_tree.children("/data/origin") == [
            "/data/origin/subdir",
            "/data/origin/three.txt",
            "/data/origin/two.txt",
        ]
        assert memory_tree.children("/data/origin/subdir") == ["/data/origin/subdir/new.txt"]


class TestInMemoryStorage:
    """Tests for InMemoryStorage operations."""

    def test_write_and_read(self, volume: MemoryVolume) -> None:
        """Test written bytes can be read back."""
        storage = volume.mount("/data")
        storage.write("a/b.txt", b"payload")
        assert storage.read("a/b.txt") == b"payload"
        assert volume.is_dir("/data/a")

    def test_read_missing(self, volume: MemoryVolume) -> None:
        """Test reading a missing file raises AdapterError."""
        with pytest.raises(AdapterError):
            volume.mount("/data").read("missing.txt")

    def test_write_over_directory(self, volume: MemoryVolume) -> None:
        """Test writing onto a directory raises AdapterError."""
        storage = volume.mount("/data")
        storage.write("sub/file.txt", b"x")
        with pytest.raises(AdapterError):
            storage.write("sub", b"x")

    def test_write_below_file(self, volume: MemoryVolume) -> None:
        """Test writing below a file raises AdapterError."""
        storage = volume.mount("/data")
        storage.write("file.txt", b"x")
        with pytest.raises(AdapterError):
            storage.write("file.txt/child.txt", b"x")

    def test_escape_rejected(self, volume: MemoryVolume) -> None:
        """Test paths leaving the root raise AdapterError."""
        with pytest.raises(AdapterError):
            volume.mount("/data").write("../outside.txt", b"x")

    def test_delete(self, memory_tree: MemoryVolume) -> None:
        """Test removing a file."""
        storage = memory_tree.mount("/data/origin")
        storage.delete("one.txt")
        assert not memory_tree.exists("/data/origin/one.txt")

    def test_delete_missing(self, volume: MemoryVolume) -> None:
        """Test removing a missing file raises AdapterError."""
        with pytest.raises(AdapterError):
            volume.mount("/data").delete("missing.txt")

    def test_delete_dir(self, memory_tree: MemoryVolume) -> None:
        """Test removing a directory removes everything below it."""
        storage = memory_tree.mount("/data")
        storage.delete_dir("origin")
        assert not memory_tree.exists("/data/origin")
        assert not memory_tree.exists("/data/origin/subdir/one.txt")
        assert memory_tree.exists("/data")

    def test_delete_dir_keeps_siblings_with_common_prefix(self, volume: MemoryVolume) -> None:
        """Test only the named directory is removed, not similarly named ones."""
        storage = volume.mount("/data")
        storage.write("dir/a.txt", b"a")
        storage.write("dir2/b.txt", b"b")
        storage.delete_dir("dir")
        assert volume.exists("/data/dir2/b.txt")

    def test_delete_dir_root(self, volume: MemoryVolume) -> None:
        """Test the root cannot be deleted."""
        with pytest.raises(AdapterError, match="Root"):
            volume.mount("/data").delete_dir("")

    def test_delete_dir_missing(self, volume: MemoryVolume) -> None:
        """Test removing a missing directory raises AdapterError."""
        with pytest.raises(AdapterError):
            volume.mount("/data").delete_dir("missing")

    def test_list_recursive(self, memory_tree: MemoryVolume) -> None:
        """Test recursive listing matches the local adapter ordering."""
        storage = memory_tree.mount("/data/origin")
        paths = [entry.path for entry in storage.list_contents("", recursive=True)]
        assert paths == [
            "one.txt",
            "subdir",
            "subdir/one.txt",
            "subdir/three.txt",
            "subdir/two.txt",
            "three.txt",
            "two.txt",
        ]

    def test_list_prefix(self, memory_tree: MemoryVolume) -> None:
        """Test listing a prefix keeps paths relative to the root."""
        storage = memory_tree.mount("/data")
        entries = list(storage.list_contents("origin"))
        assert TreeEntry("origin/subdir", EntryKind.DIRECTORY) in entries
        assert TreeEntry("origin/one.txt", EntryKind.FILE) in entries
        assert len(entries) == 4

    def test_list_missing_prefix(self, volume: MemoryVolume) -> None:
        """Test listing a missing prefix yields nothing."""
        assert list(volume.mount("/data").list_contents("missing")) == []

    def test_list_file_prefix(self, memory_tree: MemoryVolume) -> None:
        """Test listing a file raises AdapterError."""
        storage = memory_tree.mount("/data/origin")
        with pytest.raises(AdapterError):
            list(storage.list_contents("one.txt"))
