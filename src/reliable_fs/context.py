"""Application context for dependency injection.

This module separates object creation from object use. Instead of a
process-wide singleton, the embedding application builds one AppContext
and passes it to whatever needs the operations.

The storage backend is typed with the AdapterFactory protocol, so an
in-memory volume or a test double can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from reliable_fs.operations import DirectoryOps, FileOps
from reliable_fs.protocols import AdapterFactory


def _default_mount() -> AdapterFactory:
    """Create the default adapter factory."""
    from reliable_fs.storage import mount_local
    return mount_local


@dataclass
class AppContext:
    """Container for the stateless operation services.

    All services mount storage through the same factory.
    """

    mount: AdapterFactory = field(default_factory=_default_mount)
    directories: DirectoryOps = field(init=False)
    files: FileOps = field(init=False)

    def __post_init__(self) -> None:
        """Wire the operation services to the adapter factory."""
        self.directories = DirectoryOps(self.mount)
        self.files = FileOps(self.mount)


def create_context(mount: AdapterFactory | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with an in-memory volume or a test double.

    Args:
        mount: Override the adapter factory (defaults to local disk).

    Returns:
        Configured AppContext.
    """
    if mount is None:
        return AppContext()
    return AppContext(mount=mount)
