"""Platform-normalizing path decomposition and resolution.

Every function here is a pure string algorithm except `absolute_path`,
which consults the real filesystem to canonicalize whatever prefix of the
path already exists.
"""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path

from reliable_fs.types import PathComponents

__all__ = [
    "SEPARATOR",
    "absolute_path",
    "basename",
    "decompose",
    "dirname",
    "filename",
    "sanitize",
]

# Canonical separator used in decomposed paths
SEPARATOR = "/"

# Separators recognized when splitting; Windows also accepts backslashes
SEPARATORS = "/\\" if os.sep == "\\" else "/"

CURRENT_DIR_PREFIX = "./"


def _strip_control(text: str) -> str:
    """Drop every code point in a Unicode "C*" category."""
    return "".join(ch for ch in text if not unicodedata.category(ch).startswith("C"))


def sanitize(raw: str) -> str:
    """Remove control characters and leading "./" markers.

    Repeats until the text stops changing, so inputs such as "././x" or
    a "./" hidden behind a control character are fully cleaned.

    Args:
        raw: Path text as received from the caller.

    Returns:
        The cleaned path.

    Example:
        >>> sanitize("./\\x00./docs/readme.md")
        'docs/readme.md'
    """
    path = raw
    while True:
        cleaned = _strip_control(path)
        if cleaned.startswith(CURRENT_DIR_PREFIX):
            cleaned = cleaned[len(CURRENT_DIR_PREFIX):]
        if cleaned == path:
            return cleaned
        path = cleaned


def _split_extension(name: str) -> tuple[str, str | None]:
    """Split a basename on its last dot.

    A dot that is the final character, or the only dot at the start of the
    name (".bashrc"), does not introduce an extension.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem or not extension:
        return name, None
    return stem, extension


def decompose(path: str) -> PathComponents:
    """Split a path into dirname, basename, filename and extension.

    The path is used as given; callers wanting a cleaned decomposition
    should pass it through `sanitize` first.

    Args:
        path: Path to split.

    Returns:
        PathComponents for the path.
    """
    trimmed = path.rstrip(SEPARATORS)
    if not trimmed:
        # Either empty or made only of separators
        root = path[:1] if path else "."
        return PathComponents(dirname=root, basename="", filename="", extension=None)

    index = max(trimmed.rfind(sep) for sep in SEPARATORS)
    if index < 0:
        parent = "."
        name = trimmed
    else:
        name = trimmed[index + 1:]
        parent = trimmed[:index].rstrip(SEPARATORS) or trimmed[0]

    stem, extension = _split_extension(name)
    return PathComponents(dirname=parent, basename=name, filename=stem, extension=extension)


def basename(path: str) -> str:
    """Get the name plus extension of a path.

    Example:
        >>> basename("/dir/my-file.md")
        'my-file.md'
    """
    return decompose(sanitize(path)).basename


def filename(path: str) -> str:
    """Get the name of a path without its extension.

    Example:
        >>> filename("/dir/my-file.md")
        'my-file'
    """
    return decompose(sanitize(path)).filename


def dirname(path: str, levels: int = 1) -> str:
    """Get the parent directory of a path, `levels` steps up.

    Intermediate paths are never required to exist. Once a root or
    relative marker ("/", ".") is reached it is returned unchanged.

    Args:
        path: File or directory path.
        levels: Number of parent steps to take (at least 1).

    Returns:
        The resulting directory path.

    Raises:
        ValueError: If levels is less than 1.

    Example:
        >>> dirname("/home/user/project/dir/levels", 3)
        '/home/user'
    """
    if levels < 1:
        raise ValueError(f"levels must be at least 1, got {levels}")

    current = path
    for _ in range(levels):
        current = decompose(sanitize(current)).dirname
    return current


def _canonicalize(candidate: str) -> str | None:
    """Resolve an existing path to its real absolute form, or None."""
    try:
        return str(Path(candidate).resolve(strict=True))
    except (OSError, RuntimeError):
        return None


def absolute_path(path: str) -> str | None:
    """Resolve a path to an absolute one, even if its tail does not exist.

    The longest existing prefix of the path is canonicalized (symlinks and
    ".." resolved by the filesystem) and the missing trailing segments are
    appended untouched. When no prefix exists the current working directory
    is used as the base.

    Args:
        path: Relative or absolute path, possibly not yet created.

    Returns:
        The absolute path, or None if not even the working directory
        can be determined.
    """
    normalized = path.replace(os.sep, SEPARATOR) if os.sep != SEPARATOR else path
    is_absolute = normalized.startswith(SEPARATOR)
    segments = [part for part in normalized.split(SEPARATOR) if part not in ("", ".")]

    pending: list[str] = []
    resolved: str | None = None
    while segments or is_absolute:
        prefix = SEPARATOR.join(segments)
        resolved = _canonicalize(SEPARATOR + prefix if is_absolute else prefix)
        if resolved is not None or not segments:
            break
        pending.insert(0, segments.pop())

    if resolved is None:
        try:
            resolved = os.getcwd()
        except OSError:
            return None

    if pending:
        resolved = resolved.rstrip(os.sep) + os.sep + os.sep.join(pending)
    return resolved
