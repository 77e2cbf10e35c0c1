"""Classify existing paths as files or directories.

Classification combines an existence check on the real filesystem with
the extension of the path's basename, so it does not depend on trailing
separators. An "extension" made only of digits (as in "v1.0.10") is not
treated as a real extension.
"""

from __future__ import annotations

import os
import re

from reliable_fs.errors import InvalidPathError
from reliable_fs.paths import decompose, sanitize

__all__ = ["exists", "is_directory", "is_directory_or_fail", "is_file"]

_NUMERIC = re.compile(r"[0-9]+")


def exists(path: str) -> bool:
    """Check if a path exists, either as a file or a directory."""
    cleaned = sanitize(path)
    return bool(cleaned) and os.path.exists(cleaned)


def _extension(path: str) -> str | None:
    return decompose(sanitize(path)).extension


def is_directory(path: str) -> bool:
    """Check if a path exists and looks like a directory.

    Args:
        path: Path to check.

    Returns:
        True if the path exists and has no extension, or only a numeric one.
    """
    extension = _extension(path)
    has_extension = extension is not None and not _NUMERIC.fullmatch(extension)
    return exists(path) and not has_extension


def is_directory_or_fail(path: str) -> bool:
    """Check that a path is a directory, raising otherwise.

    Raises:
        InvalidPathError: If the path is empty or not a directory.
    """
    if path == "" or not is_directory(path):
        raise InvalidPathError(f"The path {path} does not exist or is not valid")
    return True


def is_file(path: str) -> bool:
    """Check if a path exists and has an extension (numeric or not)."""
    return exists(path) and _extension(path) is not None
