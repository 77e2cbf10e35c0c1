"""Error types raised by reliable-fs."""

from __future__ import annotations

__all__ = [
    "AdapterError",
    "InvalidPathError",
    "MountError",
    "ReliableFsError",
    "UnreadableSourceError",
]


class ReliableFsError(Exception):
    """Base class for all reliable-fs errors."""

    pass


class InvalidPathError(ReliableFsError, ValueError):
    """Path is empty or fails the precondition of an operation."""

    pass


class UnreadableSourceError(ReliableFsError):
    """Origin file could not be read during a copy or move."""

    pass


class MountError(ReliableFsError):
    """Storage adapter could not be bound to a root directory."""

    pass


class AdapterError(ReliableFsError):
    """Storage adapter failed to list, write or delete."""

    pass
