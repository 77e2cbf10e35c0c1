"""Protocol definitions for storage backends.

Directory and file operations only ever talk to a storage backend through
these interfaces, so a local-disk adapter, an in-memory volume or a test
double can be substituted freely.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from reliable_fs.types import TreeEntry


@runtime_checkable
class StorageAdapter(Protocol):
    """Protocol for a storage backend scoped to a root directory.

    Every path passed to an adapter is relative to its root and uses "/"
    as separator.
    """

    root: str

    def list_contents(self, prefix: str = "", recursive: bool = False) -> Iterable[TreeEntry]:
        """List entries below a prefix.

        Args:
            prefix: Directory to list, relative to the root.
            recursive: Include nested entries when True.

        Returns:
            Entries with paths relative to the root. A missing prefix
            yields no entries.

        Raises:
            AdapterError: If the prefix cannot be listed.
        """
        ...

    def read(self, path: str) -> bytes:
        """Read the contents of a file.

        Args:
            path: File path relative to the root.

        Returns:
            The file contents.

        Raises:
            AdapterError: If the file cannot be read.
        """
        ...

    def write(self, path: str, contents: bytes) -> None:
        """Write contents to a file, creating missing parent directories.

        Args:
            path: File path relative to the root.
            contents: Bytes to store.

        Raises:
            AdapterError: If the file cannot be written.
        """
        ...

    def delete(self, path: str) -> None:
        """Delete a single file.

        Args:
            path: File path relative to the root.

        Raises:
            AdapterError: If the file cannot be deleted.
        """
        ...

    def delete_dir(self, path: str) -> None:
        """Delete a directory and everything below it.

        Args:
            path: Directory path relative to the root.

        Raises:
            AdapterError: If the directory cannot be deleted.
        """
        ...


@runtime_checkable
class AdapterFactory(Protocol):
    """Protocol for mounting a storage adapter on a root directory."""

    def __call__(self, root: str, create: bool = True) -> StorageAdapter:
        """Bind a new adapter to a root directory.

        Args:
            root: Directory the adapter is scoped to.
            create: Create the root when missing. Origins and removals pass
                False so a missing directory is reported, not created.

        Returns:
            Adapter whose relative paths resolve against root.

        Raises:
            MountError: If the backend rejects the root, or it is missing
                and create is False.
        """
        ...
