from __future__ import annotations

"""
Permission Tree Renderer.

Turns a visited node and its permission outcomes into one display line:
indentation and connector derived from tree position, the node name,
then one styled glyph per capability.
"""

import os
from typing import List, Optional

from permcheck.domain import constants as const
from permcheck.domain.tree_models import (
    DisplayMode,
    FilesystemNode,
    PermissionResult,
    ProbeOutcome,
    TraversalContext,
)
from permcheck.infra.styling import Colorizer, PlainColorizer, StyleRole

_OUTCOME_ROLES = {
    ProbeOutcome.ALLOWED: StyleRole.PASS,
    ProbeOutcome.DENIED: StyleRole.FAIL,
    ProbeOutcome.UNKNOWN: StyleRole.UNKNOWN,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeRenderer:
    """
    Stateless line formatter.

    Four positional states drive glyph selection: root (no connector),
    first or middle sibling (branch connector) and last sibling (corner
    connector).
    """

    def __init__(self, colorizer: Optional[Colorizer] = None) -> None:
        self.colorizer: Colorizer = colorizer or PlainColorizer()

    def render_line(
            self,
            node: FilesystemNode,
            result: PermissionResult,
            context: TraversalContext,
    ) -> str:
        """
        Format a complete line for one node.

        Args:
            node: Visited node.
            result: Outcomes probed for the node.
            context: Run context (display mode).

        Returns:
            str: Line without trailing newline.
        """
        name = self.colorizer.colorize(
            display_name(node.path, context.display_mode),
            StyleRole.PATH,
            StyleRole.EMPHASIS,
        )
        return f"{indentation(node)}{connector(node)}{name} {self.capability_glyphs(result)}"

    def capability_glyphs(self, result: PermissionResult) -> str:
        """Concatenate R, W (and T for directories), each styled by outcome."""
        parts: List[str] = []
        for capability, outcome in result.items():
            parts.append(
                self.colorizer.colorize(capability.glyph, _OUTCOME_ROLES[outcome], StyleRole.EMPHASIS)
            )
        return "".join(parts)


def display_name(path: str, mode: DisplayMode) -> str:
    """
    Name printed for a node.

    Full-path mode prints the path as built by the walker. Basename mode
    prints the last component; the filesystem root prints as '/', and
    paths without a final component ('.', '..') use their resolved name.
    """
    if mode is DisplayMode.FULL_PATH:
        return path

    name = os.path.basename(os.path.normpath(path))
    if name in ("", os.curdir, os.pardir):
        name = os.path.basename(os.path.abspath(path))
    return name or const.ROOT_DISPLAY_NAME


def connector(node: FilesystemNode) -> str:
    """Tree-drawing connector for the node's sibling position."""
    if node.is_root:
        return ""
    return const.CORNER_CONNECTOR if node.is_last_sibling else const.BRANCH_CONNECTOR


def indentation(node: FilesystemNode) -> str:
    """One indentation unit per level below the root's direct children."""
    if node.depth <= 1:
        return ""
    return const.INDENT_UNIT * (node.depth - 1)
