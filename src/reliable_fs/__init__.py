"""Reliable path parsing and recursive file transfer over pluggable storage."""

__version__ = "0.1.0"

# Export the public surface for dependency injection and type hints
from reliable_fs.context import AppContext, create_context
from reliable_fs.errors import (
    AdapterError,
    InvalidPathError,
    MountError,
    ReliableFsError,
    UnreadableSourceError,
)
from reliable_fs.operations import DirectoryOps, FileOps
from reliable_fs.protocols import AdapterFactory, StorageAdapter
from reliable_fs.types import EntryKind, PathComponents, TreeEntry

__all__ = [
    "__version__",
    "AdapterError",
    "AdapterFactory",
    "AppContext",
    "DirectoryOps",
    "EntryKind",
    "FileOps",
    "InvalidPathError",
    "MountError",
    "PathComponents",
    "ReliableFsError",
    "StorageAdapter",
    "TreeEntry",
    "UnreadableSourceError",
    "create_context",
]
