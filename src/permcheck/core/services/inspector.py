from __future__ import annotations

"""
Permission Inspection Service.

Wires a validated configuration into a complete run: oracle, probe,
colorizer, renderer and walker. Lines are streamed to the caller as they
are produced; without a caller-supplied sink they are collected into the
returned InspectionResult instead.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from permcheck.core.analysis.tree_renderer import TreeRenderer
from permcheck.core.analysis.tree_walker import TreeWalker
from permcheck.core.probing.base import PermissionOracle
from permcheck.core.probing.probe import PermissionProbe
from permcheck.core.probing.registry import oracle_from_config
from permcheck.domain.errors import PathNotFoundError
from permcheck.domain.inspection_models import (
    InspectionResult,
    create_error_result,
    create_success_result,
)
from permcheck.domain.tree_models import DisplayMode, TraversalContext
from permcheck.infra import fs
from permcheck.infra.styling import Colorizer, build_colorizer

logger = logging.getLogger(__name__)


def run_inspection(
        cfg: Dict[str, Any],
        emit: Optional[Callable[[str], None]] = None,
        *,
        oracle: Optional[PermissionOracle] = None,
        colorizer: Optional[Colorizer] = None,
) -> InspectionResult:
    """
    Inspect a subtree and render its permission tree.

    Args:
        cfg: Validated run configuration.
        emit: Receives each rendered line as soon as it is ready. When None,
            lines are kept on the result.
        oracle: Oracle override (built from cfg when None).
        colorizer: Colorizer override (chosen from cfg['color'] when None).

    Returns:
        InspectionResult: Run summary (with the rendered lines when emit is None).
    """
    root_path = fs.normalize_path(cfg.get("root_path", "."))
    run_cfg = dict(cfg, root_path=root_path)

    try:
        fs.ensure_exists(root_path)
    except PathNotFoundError as e:
        logger.error(str(e))
        return create_error_result(str(e), run_cfg)

    if oracle is None:
        try:
            oracle = oracle_from_config(run_cfg)
        except ValueError as e:
            logger.error(str(e))
            return create_error_result(str(e), run_cfg)

    renderer = TreeRenderer(colorizer or build_colorizer(bool(run_cfg.get("color", True))))
    walker = TreeWalker(
        PermissionProbe(oracle),
        renderer,
        sort_entries=bool(run_cfg.get("sort_entries", True)),
        max_depth=run_cfg.get("max_depth"),
    )
    context = TraversalContext(
        identity=run_cfg["identity"],
        display_mode=DisplayMode.BASENAME if run_cfg.get("human_readable") else DisplayMode.FULL_PATH,
    )

    logger.info(f"Inspecting '{root_path}' as '{context.identity}' with oracle '{oracle.name}'")

    lines: List[str] = []
    stats = walker.run(root_path, context, emit if emit is not None else lines.append)

    if stats.unknown_outcomes:
        logger.warning(
            f"{stats.unknown_outcomes} permission check(s) could not be decided "
            f"and are shown as not granted."
        )
    logger.debug(
        f"Visited {stats.nodes_visited} node(s), skipped {stats.directories_skipped} unreadable director(ies)."
    )

    return create_success_result(
        dict(run_cfg, oracle=oracle.name),
        nodes_visited=stats.nodes_visited,
        directories_skipped=stats.directories_skipped,
        unknown_outcomes=stats.unknown_outcomes,
        lines=lines,
    )
