from __future__ import annotations

"""
Unit tests for the sudo-delegating oracle.

The process runner is replaced by a fake so no privilege switch happens.
Verifies command construction and the interpretation of exit statuses.
"""

import subprocess
from typing import List

import pytest

from permcheck.core.probing.sudo import SudoTestOracle
from permcheck.domain.tree_models import Capability, ProbeOutcome


class FakeRunner:
    """Record invocations and return a canned CompletedProcess."""

    def __init__(self, returncode: int = 0, stderr: str = "", exc: Exception | None = None) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.commands: List[List[str]] = []
        self.kwargs: List[dict] = []

    def __call__(self, cmd, **kwargs):
        self.commands.append(list(cmd))
        self.kwargs.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode, stdout="", stderr=self.stderr)


@pytest.mark.parametrize(
    "capability, flag",
    [(Capability.READ, "-r"), (Capability.WRITE, "-w"), (Capability.TRAVERSE, "-x")],
)
def test_command_uses_test_flag_per_capability(capability, flag):
    oracle = SudoTestOracle()

    assert oracle.build_command("/srv/app", "bob", capability) == [
        "sudo", "-n", "-u", "bob", "test", flag, "/srv/app",
    ]


def test_interactive_mode_omits_non_interactive_flag():
    oracle = SudoTestOracle(sudo_program="/usr/bin/doas-wrapper", non_interactive=False)

    cmd = oracle.build_command("/srv", "bob", Capability.READ)

    assert cmd[0] == "/usr/bin/doas-wrapper"
    assert "-n" not in cmd


def test_exit_zero_is_allowed():
    runner = FakeRunner(returncode=0)
    oracle = SudoTestOracle(runner=runner)

    assert oracle.evaluate("/srv", "bob", Capability.READ) is ProbeOutcome.ALLOWED
    assert runner.kwargs[0]["stdin"] is subprocess.DEVNULL
    assert runner.kwargs[0]["capture_output"] is True


def test_silent_exit_one_is_denied():
    oracle = SudoTestOracle(runner=FakeRunner(returncode=1))

    assert oracle.evaluate("/srv", "bob", Capability.WRITE) is ProbeOutcome.DENIED


def test_exit_one_with_diagnostics_is_unknown():
    runner = FakeRunner(returncode=1, stderr="sudo: a password is required\n")
    oracle = SudoTestOracle(runner=runner)

    assert oracle.evaluate("/srv", "bob", Capability.READ) is ProbeOutcome.UNKNOWN


def test_other_exit_status_is_unknown():
    oracle = SudoTestOracle(runner=FakeRunner(returncode=127))

    assert oracle.evaluate("/srv", "bob", Capability.READ) is ProbeOutcome.UNKNOWN


def test_spawn_failure_is_unknown():
    runner = FakeRunner(exc=FileNotFoundError(2, "No such file or directory"))
    oracle = SudoTestOracle(runner=runner)

    assert oracle.evaluate("/srv", "bob", Capability.TRAVERSE) is ProbeOutcome.UNKNOWN


def test_missing_helper_binary_is_unknown(tmp_path):
    """A real spawn of a non-existent helper never raises out of the oracle."""
    oracle = SudoTestOracle(sudo_program=str(tmp_path / "no-such-sudo"))

    assert oracle.evaluate(str(tmp_path), "bob", Capability.READ) is ProbeOutcome.UNKNOWN
