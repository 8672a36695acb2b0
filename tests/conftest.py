from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A table-driven stub oracle so traversal and rendering can be tested
   without sudo or real permission changes.
3. A small sample directory tree.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from permcheck.core.probing.base import PermissionOracle  # noqa: E402
from permcheck.domain.tree_models import Capability, ProbeOutcome  # noqa: E402


# -----------------------------------------------------------------------------
# Stub Oracle
# -----------------------------------------------------------------------------
class StubOracle(PermissionOracle):
    """
    Oracle answering from a fixed table keyed by (basename, capability).

    Unlisted pairs get the default outcome. Every call is recorded.
    """

    name = "stub"

    def __init__(
            self,
            table: Dict[Tuple[str, Capability], ProbeOutcome] | None = None,
            default: ProbeOutcome = ProbeOutcome.ALLOWED,
    ) -> None:
        self.table = dict(table or {})
        self.default = default
        self.calls: List[Tuple[str, str, Capability]] = []

    def _decide(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        self.calls.append((path, identity, capability))
        return self.table.get((os.path.basename(path), capability), self.default)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def stub_oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small directory tree.

    Structure:
    /root
      /alpha
        one.txt
        /nested
          deep.txt
      /beta
      zeta.txt
    """
    root = tmp_path / "root"
    (root / "alpha" / "nested").mkdir(parents=True)
    (root / "beta").mkdir()
    (root / "alpha" / "one.txt").write_text("1", encoding="utf-8")
    (root / "alpha" / "nested" / "deep.txt").write_text("2", encoding="utf-8")
    (root / "zeta.txt").write_text("z", encoding="utf-8")
    return root


@pytest.fixture
def base_config(sample_tree: Path) -> Dict[str, object]:
    """A validated-looking configuration targeting the sample tree."""
    return {
        "root_path": str(sample_tree),
        "identity": "alice",
        "human_readable": True,
        "verbose": False,
        "color": False,
        "sort_entries": True,
        "max_depth": None,
        "oracle": "sudo",
        "sudo_program": "sudo",
        "sudo_non_interactive": True,
    }


@pytest.fixture
def stub_oracle_factory():
    """Return the StubOracle class for tests that need custom tables."""
    return StubOracle
