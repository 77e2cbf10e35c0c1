"""Recursive copy, move and remove operations.

Both operation classes work purely through `reliable_fs.paths` and a
StorageAdapter mounted per call; nothing is cached between calls. None of
the operations is atomic: a failure part way through leaves whatever the
completed steps produced.
"""

from __future__ import annotations

import logging

from reliable_fs.errors import AdapterError, InvalidPathError, MountError, UnreadableSourceError
from reliable_fs.paths import basename, dirname, sanitize
from reliable_fs.protocols import AdapterFactory, StorageAdapter
from reliable_fs.storage import mount_local

__all__ = ["DEFAULT_ENCODING", "DirectoryOps", "FileOps"]

logger = logging.getLogger(__name__)

# Encoding used when reading files as text lines
DEFAULT_ENCODING = "utf-8"

# Basenames that resolve to the mount root rather than a child of it
_NOT_A_LEAF = ("", ".", "..")


def _require_path(path: str) -> str:
    """Return the sanitized path, rejecting empty input."""
    cleaned = sanitize(path)
    if not cleaned:
        raise InvalidPathError(f"Empty path is not valid: {path!r}")
    return cleaned


def _read_source(storage: StorageAdapter, path: str) -> bytes:
    try:
        return storage.read(path)
    except AdapterError as e:
        raise UnreadableSourceError(f"The file called {path} cannot be read") from e


class _MountingOps:
    """Shared adapter binding for the operation classes."""

    def __init__(self, mount: AdapterFactory | None = None) -> None:
        """Initialize with an adapter factory.

        Args:
            mount: Factory binding an adapter to a root. Defaults to local disk.
        """
        self._mount = mount or mount_local

    def mount(self, directory: str, create: bool = True) -> StorageAdapter:
        """Get a storage adapter scoped to a directory.

        Args:
            directory: Root of the adapter.
            create: Create the directory when missing. Reading and removing
                never create anything.

        Raises:
            MountError: If the backend rejects the directory.
        """
        logger.debug("Mounting %s", directory)
        return self._mount(directory, create=create)


class DirectoryOps(_MountingOps):
    """Recursive operations on directory trees."""

    def remove_directory(self, path: str, only_contents: bool = False) -> None:
        """Remove a directory, or only what is inside it.

        Args:
            path: Directory to remove.
            only_contents: Keep the (emptied) directory itself when True.

        Raises:
            InvalidPathError: If the path is empty or names no directory
                below its parent (".", "..", a root).
            MountError: If the parent directory does not exist.
            AdapterError: If listing or deleting fails.
        """
        path = _require_path(path)
        parent = dirname(path)
        leaf = basename(path)
        if leaf in _NOT_A_LEAF:
            raise InvalidPathError(f"The path {path} cannot be removed as a directory")

        storage = self.mount(parent, create=False)
        for entry in list(storage.list_contents(leaf)):
            if entry.is_dir:
                storage.delete_dir(entry.path)
            else:
                storage.delete(entry.path)
            logger.debug("Removed %s from %s", entry.path, parent)

        if not only_contents:
            storage.delete_dir(leaf)
            logger.debug("Removed directory %s", path)

    def copy_directory(self, origin_path: str, destination_path: str) -> None:
        """Copy every file below a directory into another directory.

        Destination directories are created implicitly by the file writes,
        so empty origin directories are not reproduced.

        Raises:
            InvalidPathError: If either path is empty.
            MountError: If the origin does not exist or the destination
                cannot be mounted.
            UnreadableSourceError: If an origin file cannot be read.
            AdapterError: If listing or writing fails.
        """
        origin_path = _require_path(origin_path)
        destination_path = _require_path(destination_path)

        origin = self.mount(origin_path, create=False)
        destination = self.mount(destination_path)

        # Snapshot first; the destination may live inside the origin
        for entry in list(origin.list_contents("", recursive=True)):
            if entry.is_dir:
                continue
            contents = _read_source(origin, entry.path)
            destination.write(entry.path, contents)
            logger.debug("Copied %s (%d bytes)", entry.path, len(contents))

    def move_directory(self, origin_path: str, destination_path: str) -> None:
        """Copy a directory to another place, then remove the original.

        If the copy fails the origin is left untouched.
        """
        self.copy_directory(origin_path, destination_path)
        self.remove_directory(origin_path)


class FileOps(_MountingOps):
    """Operations on single files."""

    def _mount_source(self, path: str) -> StorageAdapter:
        try:
            return self.mount(dirname(path), create=False)
        except MountError as e:
            raise UnreadableSourceError(f"The file called {path} cannot be read") from e

    def remove_file(self, path: str) -> None:
        """Remove a file.

        Raises:
            InvalidPathError: If the path is empty.
            MountError: If the parent directory does not exist.
            AdapterError: If the file cannot be deleted.
        """
        path = _require_path(path)
        storage = self.mount(dirname(path), create=False)
        storage.delete(basename(path))
        logger.debug("Removed file %s", path)

    def copy_file(self, origin_file: str, destination_file: str) -> None:
        """Copy a file to another place.

        Raises:
            InvalidPathError: If either path is empty.
            MountError: If the destination parent cannot be mounted.
            UnreadableSourceError: If the origin file (or its parent) is
                missing or cannot be read.
            AdapterError: If the destination cannot be written.
        """
        origin_file = _require_path(origin_file)
        destination_file = _require_path(destination_file)

        origin = self._mount_source(origin_file)
        destination = self.mount(dirname(destination_file))

        contents = _read_source(origin, basename(origin_file))
        destination.write(basename(destination_file), contents)
        logger.debug("Copied %s to %s", origin_file, destination_file)

    def move_file(self, origin_file: str, destination_file: str) -> None:
        """Copy a file to another place, then remove the original."""
        self.copy_file(origin_file, destination_file)
        self.remove_file(origin_file)

    def read_file_lines(self, path: str) -> list[str]:
        """Read a text file as a list of lines.

        Args:
            path: File to read.

        Returns:
            Lines split on "\\n", or an empty list if every line is empty.

        Raises:
            UnreadableSourceError: If the file cannot be read.
        """
        path = _require_path(path)
        storage = self._mount_source(path)
        contents = _read_source(storage, basename(path)).decode(DEFAULT_ENCODING)
        lines = contents.split("\n")
        if not any(lines):
            return []
        return lines
