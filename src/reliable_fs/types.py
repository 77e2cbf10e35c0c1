"""Shared data types for reliable-fs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

__all__ = ["EntryKind", "PathComponents", "TreeEntry"]


class EntryKind(str, Enum):
    """Kind of an entry returned by a storage listing."""

    FILE = "file"
    DIRECTORY = "dir"


class PathComponents(BaseModel):
    """Decomposition of a sanitized path.

    Attributes:
        dirname: Everything before the last separator ("." or "/" if none).
        basename: Final path segment, extension included.
        filename: Basename without the extension.
        extension: Text after the last dot, or None when there is none.
    """

    model_config = ConfigDict(frozen=True)

    dirname: str
    basename: str
    filename: str
    extension: str | None = None

    @model_validator(mode="after")
    def check_basename(self) -> PathComponents:
        """Validate that filename and extension rebuild the basename."""
        suffix = f".{self.extension}" if self.extension is not None else ""
        if self.basename != self.filename + suffix:
            raise ValueError(
                f"basename {self.basename!r} does not match "
                f"filename {self.filename!r} and extension {self.extension!r}"
            )
        return self

    @property
    def has_extension(self) -> bool:
        """True if the basename carries an extension."""
        return self.extension is not None

    def join(self) -> str:
        """Rebuild the path from dirname and basename."""
        if self.dirname.endswith(("/", "\\")):
            return self.dirname + self.basename
        return f"{self.dirname}/{self.basename}"


@dataclass(frozen=True)
class TreeEntry:
    """One file or directory produced by a storage listing.

    Attributes:
        path: Posix path relative to the adapter root.
        kind: Whether the entry is a file or a directory.
    """

    path: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        """True if the entry is a directory."""
        return self.kind is EntryKind.DIRECTORY
