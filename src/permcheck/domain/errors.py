from __future__ import annotations

"""
Domain Error Taxonomy.

Only UsageError and PathNotFoundError ever reach the user. Probe and
enumeration failures are absorbed by the core into denied or skipped
outcomes so the tree keeps rendering.
"""

from typing import Optional


class PermcheckError(Exception):
    """Base class for all application errors."""


class UsageError(PermcheckError):
    """Malformed invocation (unknown flag, missing flag value, bad option)."""


class PathNotFoundError(PermcheckError):
    """The requested root path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The specified path doesn't exist: {path}")
        self.path = path


class ProbeExecutionError(PermcheckError):
    """
    The delegated permission check could not produce a verdict.

    Raised inside oracles and converted to an UNKNOWN outcome before it
    leaves the probing layer.
    """

    def __init__(self, path: str, reason: str, returncode: Optional[int] = None) -> None:
        super().__init__(f"Probe failed for '{path}': {reason}")
        self.path = path
        self.reason = reason
        self.returncode = returncode


class EnumerationError(PermcheckError):
    """A directory listing could not be obtained."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Cannot enumerate '{path}': {cause}")
        self.path = path
        self.cause = cause
