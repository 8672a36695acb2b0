from __future__ import annotations

"""
Privilege-Switch Oracle.

Delegates each check to 'test -r|-w|-x' executed as the target identity
through sudo. One process is spawned per (path, capability) pair, with no
timeout: a hung helper stalls the run.
"""

import subprocess
from typing import Callable, Dict, List

from permcheck.core.probing.base import PermissionOracle
from permcheck.domain import constants as const
from permcheck.domain.errors import ProbeExecutionError
from permcheck.domain.tree_models import Capability, ProbeOutcome

_TEST_FLAGS: Dict[Capability, str] = {
    Capability.READ: "-r",
    Capability.WRITE: "-w",
    Capability.TRAVERSE: "-x",
}

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class SudoTestOracle(PermissionOracle):
    """
    Evaluate access by running the 'test' utility as another user.

    Exit status 0 means allowed. 'test' exits 1 silently when the check
    is false, so status 1 with an empty stderr means denied. Anything
    else (sudo refusing, a password being required, a missing helper)
    is undecided.
    """

    name = const.ORACLE_SUDO

    def __init__(
            self,
            sudo_program: str = const.DEFAULT_SUDO_PROGRAM,
            non_interactive: bool = True,
            test_program: str = "test",
            runner: Runner = subprocess.run,
    ) -> None:
        self.sudo_program = sudo_program
        self.non_interactive = non_interactive
        self.test_program = test_program
        self._runner = runner

    def build_command(self, path: str, identity: str, capability: Capability) -> List[str]:
        """Assemble the argv for one check."""
        cmd = [self.sudo_program]
        if self.non_interactive:
            cmd.append("-n")
        cmd.extend(["-u", identity, self.test_program, _TEST_FLAGS[capability], path])
        return cmd

    def _decide(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        cmd = self.build_command(path, identity, capability)
        try:
            completed = self._runner(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ProbeExecutionError(path, f"cannot spawn '{self.sudo_program}': {e}") from e

        stderr = (completed.stderr or "").strip()
        if completed.returncode == 0:
            return ProbeOutcome.ALLOWED
        if completed.returncode == 1 and not stderr:
            return ProbeOutcome.DENIED

        raise ProbeExecutionError(
            path,
            stderr or f"exit status {completed.returncode}",
            returncode=completed.returncode,
        )
