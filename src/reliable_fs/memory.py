"""In-memory storage backend.

A MemoryVolume holds a whole tree of files keyed by absolute posix path.
`MemoryVolume.mount` is an AdapterFactory: it returns InMemoryStorage
views scoped to a root, so several mounted roots share one volume the same
way several LocalStorage instances share the disk.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterator

from reliable_fs.errors import AdapterError, MountError
from reliable_fs.storage import normalize_relative
from reliable_fs.types import EntryKind, TreeEntry

__all__ = ["InMemoryStorage", "MemoryVolume"]

logger = logging.getLogger(__name__)


def _absolute(path: str) -> str:
    return posixpath.normpath("/" + path.replace("\\", "/").lstrip("/"))


class MemoryVolume:
    """Dict-backed tree of files and directories.

    Every entry is also registered under its parent in a children index,
    so listing a directory never scans the whole volume.
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.directories: set[str] = {"/"}
        self._children: dict[str, set[str]] = {"/": set()}

    def mount(self, root: str, create: bool = True) -> InMemoryStorage:
        """Bind an adapter to a root.

        Args:
            root: Directory the adapter is scoped to.
            create: Create the root when missing; otherwise it must exist.

        Raises:
            MountError: If the root is missing (and not created) or sits
                below a file.
        """
        base = _absolute(root)
        ancestor = base
        while ancestor != "/":
            if ancestor in self.files:
                raise MountError(f"Cannot mount {root}: {ancestor} is a file")
            ancestor = posixpath.dirname(ancestor)
        if base not in self.directories:
            if not create:
                raise MountError(f"Cannot mount {root}: no such directory")
            self.make_dirs(base)
        return InMemoryStorage(self, base)

    def make_dirs(self, path: str) -> None:
        """Create a directory and all of its parents."""
        current = _absolute(path)
        while current not in self.directories:
            self.directories.add(current)
            self._children.setdefault(current, set())
            parent = posixpath.dirname(current)
            self._children.setdefault(parent, set()).add(current)
            current = parent

    def put_file(self, path: str, contents: bytes) -> None:
        """Store a file; its parent directory must already exist."""
        target = _absolute(path)
        self.files[target] = bytes(contents)
        self._children[posixpath.dirname(target)].add(target)

    def remove_file(self, path: str) -> None:
        """Drop a file from the volume."""
        target = _absolute(path)
        del self.files[target]
        self._children[posixpath.dirname(target)].discard(target)

    def remove_tree(self, path: str) -> None:
        """Drop a directory and everything below it."""
        target = _absolute(path)
        pending = [target]
        while pending:
            current = pending.pop()
            for child in self._children.pop(current, set()):
                if child in self.directories:
                    pending.append(child)
                else:
                    del self.files[child]
            self.directories.discard(current)
        self._children[posixpath.dirname(target)].discard(target)

    def exists(self, path: str) -> bool:
        """True if a file or directory exists at the absolute path."""
        target = _absolute(path)
        return target in self.files or target in self.directories

    def is_dir(self, path: str) -> bool:
        """True if a directory exists at the absolute path."""
        return _absolute(path) in self.directories

    def children(self, path: str) -> list[str]:
        """Sorted absolute paths of the immediate children of a directory."""
        return sorted(self._children.get(_absolute(path), ()))


class InMemoryStorage:
    """Storage adapter scoped to a directory of a MemoryVolume.

    Satisfies the StorageAdapter protocol structurally.
    """

    def __init__(self, volume: MemoryVolume, root: str) -> None:
        self.volume = volume
        self.root = root

    def _resolve(self, path: str) -> str:
        relative = normalize_relative(path)
        return posixpath.join(self.root, relative) if relative else self.root

    def _relative(self, path: str) -> str:
        return posixpath.relpath(path, self.root)

    def list_contents(self, prefix: str = "", recursive: bool = False) -> Iterator[TreeEntry]:
        """List entries below a prefix, top-down and sorted per directory."""
        start = self._resolve(prefix)
        if start in self.volume.files:
            raise AdapterError(f"Cannot list {prefix}: not a directory")
        if start not in self.volume.directories:
            return

        for child in self.volume.children(start):
            relative = self._relative(child)
            if child in self.volume.directories:
                yield TreeEntry(path=relative, kind=EntryKind.DIRECTORY)
                if recursive:
                    yield from self.list_contents(relative, recursive=True)
            else:
                yield TreeEntry(path=relative, kind=EntryKind.FILE)

    def read(self, path: str) -> bytes:
        """Read the bytes of a file."""
        target = self._resolve(path)
        try:
            return self.volume.files[target]
        except KeyError as e:
            raise AdapterError(f"Cannot read {path}: no such file") from e

    def write(self, path: str, contents: bytes) -> None:
        """Write bytes to a file, creating parent directories as needed."""
        target = self._resolve(path)
        if target in self.volume.directories:
            raise AdapterError(f"Cannot write {path}: is a directory")
        parent = posixpath.dirname(target)
        ancestor = parent
        while ancestor != "/":
            if ancestor in self.volume.files:
                raise AdapterError(f"Cannot write {path}: {ancestor} is a file")
            ancestor = posixpath.dirname(ancestor)
        self.volume.make_dirs(parent)
        self.volume.put_file(target, contents)

    def delete(self, path: str) -> None:
        """Remove a file."""
        target = self._resolve(path)
        if target not in self.volume.files:
            raise AdapterError(f"Cannot delete {path}: no such file")
        self.volume.remove_file(target)

    def delete_dir(self, path: str) -> None:
        """Remove a directory tree."""
        target = self._resolve(path)
        if target == self.root:
            raise AdapterError("Root directories can not be deleted")
        if target not in self.volume.directories:
            raise AdapterError(f"Cannot delete {path}: no such directory")
        self.volume.remove_tree(target)
        logger.debug("Deleted in-memory directory %s", target)
