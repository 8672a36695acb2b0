from __future__ import annotations

"""
Permission Tree Walker.

Depth-first, preorder traversal of a filesystem subtree. Each visited
node is probed for its capabilities and handed to the renderer. The walk
uses an explicit work stack so deep trees do not consume the call stack.
Directories whose listing cannot be read are shown but not expanded.
Symbolic links to directories are followed without cycle detection.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from permcheck.core.analysis.tree_renderer import TreeRenderer
from permcheck.core.probing.probe import PermissionProbe
from permcheck.domain.errors import EnumerationError
from permcheck.domain.tree_models import FilesystemNode, PermissionResult, TraversalContext
from permcheck.infra import fs

logger = logging.getLogger(__name__)

Lister = Callable[[str, bool], List[fs.DirectoryEntry]]
_PendingNode = Tuple[FilesystemNode, TraversalContext]


@dataclass
class WalkStats:
    """Counters collected during one walk."""
    nodes_visited: int = 0
    directories_skipped: int = 0
    unknown_outcomes: int = 0


class TreeWalker:
    """
    Drive probing and rendering over a subtree.

    Args:
        probe: Permission probe queried for every visited node.
        renderer: Formatter producing one line per node.
        sort_entries: Sort listings by name; otherwise keep enumeration order.
        max_depth: Deepest level to visit (None for unlimited).
        lister: Directory enumeration function.
    """

    def __init__(
            self,
            probe: PermissionProbe,
            renderer: TreeRenderer,
            sort_entries: bool = True,
            max_depth: Optional[int] = None,
            lister: Lister = fs.list_directory,
    ) -> None:
        self.probe = probe
        self.renderer = renderer
        self.sort_entries = sort_entries
        self.max_depth = max_depth
        self._lister = lister
        self.stats = WalkStats()

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def walk(
            self,
            root_path: str,
            context: TraversalContext,
    ) -> Iterator[Tuple[FilesystemNode, PermissionResult]]:
        """
        Yield (node, result) pairs in preorder.

        A directory's listing is read right after the directory itself is
        yielded; its entries are then visited in listing order.
        """
        self.stats = WalkStats()
        root = FilesystemNode(
            path=root_path,
            is_directory=fs.is_directory(root_path),
            depth=context.depth,
        )
        stack: List[_PendingNode] = [(root, context)]

        while stack:
            node, node_ctx = stack.pop()
            result = self.probe.evaluate(node, node_ctx.identity)
            self.stats.nodes_visited += 1
            self.stats.unknown_outcomes += result.unknown_count
            yield node, result

            if not node.is_directory or self._at_depth_limit(node_ctx):
                continue

            # Reversed so the first entry is popped first
            stack.extend(reversed(self._children(node, node_ctx.descend())))

    def run(
            self,
            root_path: str,
            context: TraversalContext,
            emit: Callable[[str], None],
    ) -> WalkStats:
        """
        Render every visited node and pass each line to emit.

        Returns:
            WalkStats: Counters for the completed walk.
        """
        for node, result in self.walk(root_path, context):
            emit(self.renderer.render_line(node, result, context))
        return self.stats

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _children(self, parent: FilesystemNode, child_ctx: TraversalContext) -> List[_PendingNode]:
        """Enumerate a directory; last-sibling status comes from the listing index."""
        try:
            entries = self._lister(parent.path, self.sort_entries)
        except EnumerationError as e:
            logger.debug(f"Skipping children of '{parent.path}': {e.cause}")
            self.stats.directories_skipped += 1
            return []

        last_index = len(entries) - 1
        return [
            (
                FilesystemNode(
                    path=entry.path,
                    is_directory=entry.is_directory,
                    depth=child_ctx.depth,
                    is_last_sibling=(i == last_index),
                ),
                child_ctx,
            )
            for i, entry in enumerate(entries)
        ]

    def _at_depth_limit(self, node_ctx: TraversalContext) -> bool:
        return self.max_depth is not None and node_ctx.depth >= self.max_depth
