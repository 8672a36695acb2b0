from __future__ import annotations

"""
Inspection Result Models.

Defines the summary object returned by the inspection service to the
interface layer once a tree has been rendered.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InspectionResult:
    """
    Outcome of a complete permission inspection run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Root path that was inspected.
        identity: User whose access was evaluated.
        oracle: Name of the permission oracle used.
        nodes_visited: Number of rendered nodes.
        directories_skipped: Directories whose listing could not be read.
        unknown_outcomes: Probe results that ended undecided.
        lines: Rendered tree lines when no streaming sink was given.
    """
    ok: bool
    error: str
    root_path: str
    identity: str
    oracle: str
    nodes_visited: int = 0
    directories_skipped: int = 0
    unknown_outcomes: int = 0
    lines: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, cfg: Dict[str, Any]) -> InspectionResult:
    """
    Create a failed inspection result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.

    Returns:
        InspectionResult: An immutable error result object.
    """
    return InspectionResult(
        ok=False,
        error=error,
        root_path=cfg.get("root_path", ""),
        identity=cfg.get("identity", ""),
        oracle=cfg.get("oracle", ""),
    )


def create_success_result(
        cfg: Dict[str, Any],
        nodes_visited: int,
        directories_skipped: int,
        unknown_outcomes: int,
        lines: Optional[List[str]] = None,
) -> InspectionResult:
    """
    Create a successful inspection result instance.

    Args:
        cfg: Final configuration used during the run.
        nodes_visited: Number of rendered nodes.
        directories_skipped: Count of unreadable directory listings.
        unknown_outcomes: Count of undecided probe results.
        lines: Rendered tree lines.

    Returns:
        InspectionResult: An immutable success result object.
    """
    return InspectionResult(
        ok=True,
        error="",
        root_path=cfg.get("root_path", ""),
        identity=cfg.get("identity", ""),
        oracle=cfg.get("oracle", ""),
        nodes_visited=nodes_visited,
        directories_skipped=directories_skipped,
        unknown_outcomes=unknown_outcomes,
        lines=lines or [],
    )
