"""CLI commands using Typer."""

from __future__ import annotations

import json
import logging
import os
from typing import Annotated

import typer
from rich.logging import RichHandler

from reliable_fs import __version__, classify, paths
from reliable_fs.console import Output
from reliable_fs.context import create_context
from reliable_fs.errors import InvalidPathError, ReliableFsError

app = typer.Typer(
    name="reliable-fs",
    help="Reliable path parsing and recursive file transfer",
    no_args_is_help=True,
)

output = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"reliable-fs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every storage operation")
    ] = False,
) -> None:
    """Reliable path parsing and recursive file transfer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=output.console, show_path=False)],
        )


def _fail(error: ReliableFsError) -> typer.Exit:
    """Report a library error and build the exit to raise."""
    output.show_error(str(error))
    return typer.Exit(1)


def _kind(path: str) -> str:
    """Describe how the classifier sees a path."""
    if classify.is_directory(path):
        return "directory"
    if classify.is_file(path):
        return "file"
    return "missing"


# ============================================================================
# Path Commands
# ============================================================================


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    """Show how a path is decomposed and classified."""
    components = paths.decompose(paths.sanitize(path))
    kind = _kind(path)
    if as_json:
        data = components.model_dump()
        data["kind"] = kind
        output.show_json(json.dumps(data))
        return
    output.show_components(path, components, kind)


@app.command()
def abspath(
    path: Annotated[str, typer.Argument(help="Path to resolve (may not exist yet)")],
) -> None:
    """Print the absolute form of a path."""
    resolved = paths.absolute_path(path)
    if resolved is None:
        output.show_error(f"Cannot resolve {path}")
        raise typer.Exit(1)
    output.show_value(resolved)


@app.command()
def dirname(
    path: Annotated[str, typer.Argument(help="File or directory path")],
    levels: Annotated[int, typer.Option("--levels", "-l", min=1, help="Parent steps")] = 1,
) -> None:
    """Print the parent directory of a path."""
    output.show_value(paths.dirname(path, levels))


# ============================================================================
# Transfer Commands
# ============================================================================


@app.command()
def cp(
    origin: Annotated[str, typer.Argument(help="File or directory to copy")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Copy a directory tree")
    ] = False,
    _context=None,
) -> None:
    """Copy a file, or a directory tree with -r."""
    ctx = _context or create_context()
    try:
        if recursive:
            _require_directory(origin)
            ctx.directories.copy_directory(origin, destination)
        else:
            _require_file(origin)
            ctx.files.copy_file(origin, destination)
    except ReliableFsError as e:
        raise _fail(e) from e
    output.show_success(f"Copied {origin} to {destination}")


@app.command()
def mv(
    origin: Annotated[str, typer.Argument(help="File or directory to move")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Move a directory tree")
    ] = False,
    _context=None,
) -> None:
    """Move a file, or a directory tree with -r."""
    ctx = _context or create_context()
    try:
        if recursive:
            _require_directory(origin)
            ctx.directories.move_directory(origin, destination)
        else:
            _require_file(origin)
            ctx.files.move_file(origin, destination)
    except ReliableFsError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {origin} to {destination}")


@app.command()
def rm(
    path: Annotated[str, typer.Argument(help="File or directory to remove")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove a directory tree")
    ] = False,
    contents_only: Annotated[
        bool, typer.Option("--contents-only", help="Keep the directory, empty it")
    ] = False,
    _context=None,
) -> None:
    """Remove a file, or a directory tree with -r."""
    ctx = _context or create_context()
    try:
        if recursive or contents_only:
            _require_directory(path)
            ctx.directories.remove_directory(path, only_contents=contents_only)
        else:
            _require_file(path)
            ctx.files.remove_file(path)
    except ReliableFsError as e:
        raise _fail(e) from e
    output.show_success(f"Removed {path}")


@app.command()
def lines(
    path: Annotated[str, typer.Argument(help="Text file to read")],
    _context=None,
) -> None:
    """Print a text file line by line, numbered."""
    ctx = _context or create_context()
    try:
        content = ctx.files.read_file_lines(path)
    except ReliableFsError as e:
        raise _fail(e) from e
    for number, line in enumerate(content, start=1):
        output.show_value(f"{number:>5}  {line}")


def _on_disk(path: str) -> str:
    """Sanitized form of an existing path, rejecting missing ones."""
    if not classify.exists(path):
        raise InvalidPathError(f"The path {path} does not exist")
    return paths.sanitize(path)


def _require_directory(path: str) -> None:
    """Reject anything that is not a directory on disk, whatever its name."""
    if not os.path.isdir(_on_disk(path)):
        raise InvalidPathError(f"The path {path} is not a directory")


def _require_file(path: str) -> None:
    """Reject directories, so a tree is only touched with -r."""
    if os.path.isdir(_on_disk(path)):
        raise InvalidPathError(f"The path {path} is a directory, use -r")


if __name__ == "__main__":
    app()
