"""Local-disk storage adapter.

LocalStorage wraps pathlib and shutil operations behind the
StorageAdapter protocol. Standard library errors are translated into
reliable-fs errors so callers only handle one family of exceptions.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from pathlib import Path

from reliable_fs.errors import AdapterError, MountError
from reliable_fs.types import EntryKind, TreeEntry

__all__ = ["LocalStorage", "mount_local", "normalize_relative"]

logger = logging.getLogger(__name__)


def normalize_relative(path: str) -> str:
    """Normalize a path relative to an adapter root.

    Backslashes become "/", empty and "." segments are dropped and ".."
    segments are applied.

    Args:
        path: Relative path as given by the caller.

    Returns:
        The normalized posix path ("" for the root itself).

    Raises:
        AdapterError: If the path escapes the root.
    """
    parts: list[str] = []
    for segment in path.replace("\\", "/").split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not parts:
                raise AdapterError(f"Path is outside of the defined root: {path}")
            parts.pop()
            continue
        parts.append(segment)
    return "/".join(parts)


class LocalStorage:
    """Storage adapter scoped to a directory on the local disk.

    Satisfies the StorageAdapter protocol structurally. Mounting creates
    the root directory when it is missing, unless told not to.
    """

    def __init__(self, root: str, create: bool = True) -> None:
        """Mount the adapter on a root directory.

        Args:
            root: Directory all relative paths resolve against.
            create: Create the root when missing; otherwise it must exist.

        Raises:
            MountError: If the root cannot be created, is missing while create
                is False, or is not a directory.
        """
        base = Path(root)
        if create:
            try:
                base.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise MountError(f"Cannot mount {root}: {e}") from e
        if not base.is_dir():
            raise MountError(f"Cannot mount {root}: not a directory")

        self.root = str(base)
        self._base = base
        logger.debug("Mounted local storage at %s", self.root)

    def _resolve(self, path: str) -> Path:
        relative = normalize_relative(path)
        return self._base / relative if relative else self._base

    def list_contents(self, prefix: str = "", recursive: bool = False) -> Iterator[TreeEntry]:
        """List entries below a prefix, top-down and sorted per directory."""
        start = self._resolve(prefix)
        if not start.exists():
            return
        if not start.is_dir():
            raise AdapterError(f"Cannot list {prefix}: not a directory")

        try:
            children = sorted(start.iterdir(), key=lambda child: child.name)
        except OSError as e:
            raise AdapterError(f"Cannot list {prefix}: {e}") from e

        for child in children:
            relative = child.relative_to(self._base).as_posix()
            if child.is_dir() and not child.is_symlink():
                yield TreeEntry(path=relative, kind=EntryKind.DIRECTORY)
                if recursive:
                    yield from self.list_contents(relative, recursive=True)
            else:
                yield TreeEntry(path=relative, kind=EntryKind.FILE)

    def read(self, path: str) -> bytes:
        """Read the bytes of a file."""
        target = self._resolve(path)
        try:
            return target.read_bytes()
        except OSError as e:
            raise AdapterError(f"Cannot read {path}: {e}") from e

    def write(self, path: str, contents: bytes) -> None:
        """Write bytes to a file, creating parent directories as needed."""
        target = self._resolve(path)
        if target == self._base:
            raise AdapterError("Cannot write to the root directory")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(contents)
        except OSError as e:
            raise AdapterError(f"Cannot write {path}: {e}") from e

    def delete(self, path: str) -> None:
        """Remove a file."""
        target = self._resolve(path)
        if target.is_dir() and not target.is_symlink():
            raise AdapterError(f"Cannot delete {path}: is a directory")
        try:
            target.unlink()
        except OSError as e:
            raise AdapterError(f"Cannot delete {path}: {e}") from e

    def delete_dir(self, path: str) -> None:
        """Remove a directory tree."""
        target = self._resolve(path)
        if target == self._base:
            raise AdapterError("Root directories can not be deleted")
        if target.is_symlink():
            raise AdapterError(f"Cannot delete {path}: is a symbolic link")
        try:
            shutil.rmtree(target)
        except OSError as e:
            raise AdapterError(f"Cannot delete {path}: {e}") from e


def mount_local(root: str, create: bool = True) -> LocalStorage:
    """Mount a LocalStorage adapter; the default AdapterFactory."""
    return LocalStorage(root, create=create)
