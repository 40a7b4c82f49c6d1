"""Lazy candidate sources: input lines and directory listings.

Each source yields (display value, raw value) pairs. The raw value is what
gets normalized and scored; the display value is what gets printed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    "CandidateSourceError",
    "iter_directory",
    "iter_lines",
]

logger = structlog.get_logger()


class CandidateSourceError(Exception):
    """Raised when candidates cannot be enumerated."""


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def iter_lines(stream: TextIO) -> Iterator[tuple[str, str]]:
    """Yield one candidate per line until the stream is exhausted.

    Args:
        stream: Text stream to read, typically stdin.

    Yields:
        (line, line) pairs with the line terminator removed.

    Raises:
        CandidateSourceError: If reading the stream fails.
    """
    try:
        for line in stream:
            text = _strip_newline(line)
            yield text, text
    except OSError as e:
        raise CandidateSourceError(f"Failed to read input: {e}") from e


def _is_dir(path: Path, *, follow_symlinks: bool = True) -> bool:
    try:
        if not follow_symlinks and path.is_symlink():
            return False
        return path.is_dir()
    except OSError as e:
        raise CandidateSourceError(f"Failed to inspect {path}: {e}") from e


def _walk(root: Path, relative: Path, recursive: bool) -> Iterator[Path]:
    """Yield entry paths relative to root, depth-first in name order."""
    directory = root / relative
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CandidateSourceError(f"Failed to list {directory}: {e}") from e

    for entry in entries:
        entry_relative = relative / entry.name
        yield entry_relative
        if recursive and _is_dir(entry, follow_symlinks=False):
            yield from _walk(root, entry_relative, recursive)


def iter_directory(
    root: Path | None = None,
    *,
    include_files: bool,
    include_directories: bool,
    recursive: bool = False,
    full_path: bool = False,
) -> Iterator[tuple[str, str]]:
    """Yield directory entries as candidates.

    When both include_files and include_directories are set, entries are
    not type checked at all. Recursion descends into every directory,
    including those excluded from the output.

    Args:
        root: Directory to list. Defaults to the current directory.
        include_files: Yield non-directory entries.
        include_directories: Yield directory entries.
        recursive: Descend into subdirectories.
        full_path: Display absolute paths instead of relative ones.

    Yields:
        (display path, relative path) pairs.

    Raises:
        CandidateSourceError: If a directory or entry cannot be read.
    """
    try:
        root = (root if root is not None else Path.cwd()).resolve()
    except OSError as e:
        raise CandidateSourceError(f"Failed to resolve directory: {e}") from e

    check_type = not (include_files and include_directories)

    logger.debug(
        "directory_scan_started",
        root=str(root),
        include_files=include_files,
        include_directories=include_directories,
        recursive=recursive,
    )

    for relative in _walk(root, Path(), recursive):
        if check_type:
            is_dir = _is_dir(root / relative)
            if is_dir and not include_directories:
                continue
            if not is_dir and not include_files:
                continue

        raw = relative.as_posix()
        display = str(root / relative) if full_path else raw
        yield display, raw
