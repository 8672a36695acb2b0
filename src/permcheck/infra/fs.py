from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin abstraction over 'os' used by the traversal: path normalization,
root validation and directory enumeration that reports failures through
the domain error taxonomy instead of raw OSError.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from permcheck.domain.errors import EnumerationError, PathNotFoundError

# -----------------------------------------------------------------------------
# DATA STRUCTURES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """One entry of a directory listing."""
    name: str
    path: str
    is_directory: bool

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Return the inspection root exactly as given.

    The shell has already performed any expansion, so whitespace, '~'
    and '$' are kept literally. The result is not made absolute: the tree
    prints paths the way the user typed them.

    Args:
        path: Raw input path string.
        fallback: Path used when the input is empty or missing.

    Returns:
        str: The path, or the fallback.
    """
    return path if path else fallback


def ensure_exists(path: str) -> str:
    """
    Validate that the inspection root exists.

    Raises:
        PathNotFoundError: If nothing exists at the path.
    """
    if not os.path.exists(path):
        raise PathNotFoundError(path)
    return path


def is_directory(path: str) -> bool:
    """True when the path resolves (following symlinks) to a directory."""
    return os.path.isdir(path)

# -----------------------------------------------------------------------------
# ENUMERATION API
# -----------------------------------------------------------------------------

def list_directory(path: str, sort_entries: bool = True) -> List[DirectoryEntry]:
    """
    Enumerate the direct entries of a directory.

    Args:
        path: Directory to list.
        sort_entries: Sort by name; otherwise keep the order os.scandir yields.

    Returns:
        List[DirectoryEntry]: Entries with their resolved directory flag.

    Raises:
        EnumerationError: If the listing cannot be read.
    """
    entries: List[DirectoryEntry] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                entries.append(
                    DirectoryEntry(
                        name=entry.name,
                        path=entry.path,
                        is_directory=_entry_is_dir(entry),
                    )
                )
    except OSError as e:
        raise EnumerationError(path, e) from e

    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _entry_is_dir(entry: os.DirEntry) -> bool:
    """Classify an entry, treating undeterminable types as files."""
    try:
        return entry.is_dir()
    except OSError:
        return False
