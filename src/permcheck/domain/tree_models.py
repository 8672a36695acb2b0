from __future__ import annotations

"""
Permission Tree Data Models.

Provides the transient structures exchanged between the walker, the
permission probe and the renderer: filesystem nodes, capabilities,
tri-state probe outcomes and the immutable traversal context.
"""

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class Capability(Enum):
    """Access right probed for a node. TRAVERSE only applies to directories."""

    READ = "R"
    WRITE = "W"
    TRAVERSE = "T"

    @property
    def glyph(self) -> str:
        return self.value

    @classmethod
    def for_node(cls, is_directory: bool) -> Tuple[Capability, ...]:
        """Return the capabilities probed for a node, in display order."""
        if is_directory:
            return (cls.READ, cls.WRITE, cls.TRAVERSE)
        return (cls.READ, cls.WRITE)


class ProbeOutcome(Enum):
    """
    Verdict of a single permission probe.

    UNKNOWN means the oracle could not decide (helper missing, spawn
    failure, unresolvable identity). It is never treated as granted.
    """

    ALLOWED = "allowed"
    DENIED = "denied"
    UNKNOWN = "unknown"

    @property
    def granted(self) -> bool:
        return self is ProbeOutcome.ALLOWED

    @classmethod
    def from_bool(cls, value: bool) -> ProbeOutcome:
        return cls.ALLOWED if value else cls.DENIED


class DisplayMode(Enum):
    """How node names are printed."""

    FULL_PATH = "full"
    BASENAME = "basename"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FilesystemNode:
    """
    A visited entry of the inspected subtree.

    Attributes:
        path: Path of the entry, as built from the root argument.
        is_directory: True when the entry resolves to a directory.
        depth: Distance from the root (root = 0).
        is_last_sibling: True for the last entry of its parent's listing.
    """
    path: str
    is_directory: bool
    depth: int = 0
    is_last_sibling: bool = False

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Node depth must be non-negative, got {self.depth}.")

    @property
    def is_root(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class PermissionResult:
    """
    Capability outcomes for one node/identity pair.

    TRAVERSE is present if and only if the node is a directory.
    """
    is_directory: bool
    outcomes: Mapping[Capability, ProbeOutcome]

    def __post_init__(self) -> None:
        expected = set(Capability.for_node(self.is_directory))
        if set(self.outcomes) != expected:
            names = sorted(c.name for c in expected)
            raise ValueError(f"PermissionResult must carry exactly {names}.")
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))

    def outcome(self, capability: Capability) -> ProbeOutcome:
        return self.outcomes[capability]

    def allowed(self, capability: Capability) -> bool:
        """Fail-closed view: only ALLOWED counts as granted."""
        outcome = self.outcomes.get(capability)
        return outcome is not None and outcome.granted

    def items(self) -> Iterator[Tuple[Capability, ProbeOutcome]]:
        """Yield outcomes in display order (R, W, T)."""
        for capability in Capability.for_node(self.is_directory):
            yield capability, self.outcomes[capability]

    @property
    def unknown_count(self) -> int:
        return sum(1 for o in self.outcomes.values() if o is ProbeOutcome.UNKNOWN)


@dataclass(frozen=True)
class TraversalContext:
    """
    Per-run configuration passed down the traversal.

    Attributes:
        identity: Target user whose access is evaluated.
        display_mode: Full path or basename display.
        depth: Current depth counter.
    """
    identity: str
    display_mode: DisplayMode = DisplayMode.FULL_PATH
    depth: int = 0

    def descend(self) -> TraversalContext:
        return replace(self, depth=self.depth + 1)
