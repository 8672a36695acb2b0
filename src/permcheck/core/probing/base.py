from __future__ import annotations

"""
Base Definitions for Permission Oracles.

An oracle answers "can identity U exercise capability C on path P?" as a
tri-state outcome. Implementations raise ProbeExecutionError when they
cannot decide; the base class turns that into UNKNOWN so no probing error
ever leaves this layer.
"""

import logging
from abc import ABC, abstractmethod

from permcheck.domain.errors import ProbeExecutionError
from permcheck.domain.tree_models import Capability, ProbeOutcome

logger = logging.getLogger(__name__)


class PermissionOracle(ABC):
    """
    Abstract strategy for evaluating access as another identity.
    """

    name: str = ""

    def evaluate(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        """
        Evaluate one capability for one path.

        Args:
            path: Filesystem path to evaluate.
            identity: User name whose access is evaluated.
            capability: Access right to test.

        Returns:
            ProbeOutcome: ALLOWED, DENIED, or UNKNOWN when undecidable.
        """
        try:
            return self._decide(path, identity, capability)
        except ProbeExecutionError as e:
            logger.debug(f"[{self.name}] {capability.name} on '{path}' as '{identity}' undecided: {e.reason}")
            return ProbeOutcome.UNKNOWN

    @abstractmethod
    def _decide(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        """
        Produce a verdict or raise ProbeExecutionError.
        """
        pass
