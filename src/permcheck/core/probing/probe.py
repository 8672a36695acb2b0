from __future__ import annotations

"""
Permission Probe.

Fail-closed front end over a PermissionOracle. Callers get booleans (or
full PermissionResult objects) and never see an exception: anything the
oracle cannot decide is reported as not granted.
"""

import logging

from permcheck.core.probing.base import PermissionOracle
from permcheck.domain.tree_models import (
    Capability,
    FilesystemNode,
    PermissionResult,
    ProbeOutcome,
)

logger = logging.getLogger(__name__)


class PermissionProbe:
    """
    Answer per-node, per-capability questions for a target identity.

    No caching and no batching: every call reaches the oracle.
    """

    def __init__(self, oracle: PermissionOracle) -> None:
        self.oracle = oracle

    def check(self, path: str, identity: str, capability: Capability) -> bool:
        """
        Return True only when the capability is positively allowed.

        Args:
            path: Filesystem path to probe.
            identity: Target user.
            capability: Access right to probe.
        """
        return self.outcome(path, identity, capability).granted

    def outcome(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        """Tri-state verdict for one capability."""
        try:
            return self.oracle.evaluate(path, identity, capability)
        except Exception as e:
            logger.warning(f"Oracle '{self.oracle.name}' failed on '{path}' ({capability.name}): {e}")
            return ProbeOutcome.UNKNOWN

    def evaluate(self, node: FilesystemNode, identity: str) -> PermissionResult:
        """
        Probe R and W, plus T for directories.

        Returns:
            PermissionResult: Outcomes in display order.
        """
        outcomes = {
            capability: self.outcome(node.path, identity, capability)
            for capability in Capability.for_node(node.is_directory)
        }
        return PermissionResult(is_directory=node.is_directory, outcomes=outcomes)
