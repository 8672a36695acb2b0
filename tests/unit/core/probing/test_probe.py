from __future__ import annotations

"""
Unit tests for the fail-closed PermissionProbe.

Verifies:
1. Per-capability booleans follow the oracle's verdict.
2. Oracle failures of any kind become "not granted".
3. Directory results carry Traverse, file results do not.
"""

from permcheck.core.probing.base import PermissionOracle
from permcheck.core.probing.probe import PermissionProbe
from permcheck.domain.errors import ProbeExecutionError
from permcheck.domain.tree_models import Capability, FilesystemNode, ProbeOutcome


class _RaisingOracle(PermissionOracle):
    name = "raising"

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def _decide(self, path, identity, capability):
        raise self.exc


def test_check_follows_oracle_verdict(stub_oracle_factory):
    oracle = stub_oracle_factory({("secret.txt", Capability.READ): ProbeOutcome.DENIED})
    probe = PermissionProbe(oracle)

    assert probe.check("/data/secret.txt", "bob", Capability.READ) is False
    assert probe.check("/data/secret.txt", "bob", Capability.WRITE) is True
    assert oracle.calls == [
        ("/data/secret.txt", "bob", Capability.READ),
        ("/data/secret.txt", "bob", Capability.WRITE),
    ]


def test_probe_execution_error_is_unknown_and_denied():
    probe = PermissionProbe(_RaisingOracle(ProbeExecutionError("/x", "helper missing")))

    assert probe.outcome("/x", "bob", Capability.READ) is ProbeOutcome.UNKNOWN
    assert probe.check("/x", "bob", Capability.READ) is False


def test_unexpected_oracle_error_is_absorbed():
    probe = PermissionProbe(_RaisingOracle(RuntimeError("boom")))

    assert probe.check("/x", "bob", Capability.WRITE) is False


def test_evaluate_directory_and_file(stub_oracle):
    probe = PermissionProbe(stub_oracle)

    dir_result = probe.evaluate(FilesystemNode(path="/d", is_directory=True), "bob")
    file_result = probe.evaluate(FilesystemNode(path="/d/f", is_directory=False, depth=1), "bob")

    assert set(dir_result.outcomes) == {Capability.READ, Capability.WRITE, Capability.TRAVERSE}
    assert set(file_result.outcomes) == {Capability.READ, Capability.WRITE}
    assert len(stub_oracle.calls) == 5


def test_no_caching_between_calls(stub_oracle):
    probe = PermissionProbe(stub_oracle)

    probe.check("/d", "bob", Capability.READ)
    probe.check("/d", "bob", Capability.READ)

    assert len(stub_oracle.calls) == 2
