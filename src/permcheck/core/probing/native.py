from __future__ import annotations

"""
Native Mode-Bit Oracle.

Evaluates access directly from POSIX ownership and permission bits,
resolving the target identity through the password and group databases
instead of spawning a helper per check. Follows access(2) semantics:
every ancestor directory must grant search permission, and the
superuser bypasses read/write checks. ACLs and capabilities are not
considered.
"""

import grp
import os
import pwd
import stat
from dataclasses import dataclass
from pathlib import PurePath
from typing import Callable, Dict, FrozenSet, List, Tuple

from permcheck.core.probing.base import PermissionOracle
from permcheck.domain import constants as const
from permcheck.domain.errors import ProbeExecutionError
from permcheck.domain.tree_models import Capability, ProbeOutcome

# (owner, group, other) bits per capability
_MODE_BITS: Dict[Capability, Tuple[int, int, int]] = {
    Capability.READ: (stat.S_IRUSR, stat.S_IRGRP, stat.S_IROTH),
    Capability.WRITE: (stat.S_IWUSR, stat.S_IWGRP, stat.S_IWOTH),
    Capability.TRAVERSE: (stat.S_IXUSR, stat.S_IXGRP, stat.S_IXOTH),
}
_ANY_EXEC = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class IdentityRecord:
    """Resolved credentials of a user."""
    name: str
    uid: int
    gids: FrozenSet[int]

    @property
    def is_superuser(self) -> bool:
        return self.uid == 0


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def grants_access(
        mode: int,
        owner_uid: int,
        owner_gid: int,
        identity: IdentityRecord,
        capability: Capability,
) -> bool:
    """
    Decide one capability from a stat mode and ownership.

    Only one permission class applies: owner, else group, else other.

    Args:
        mode: st_mode of the target.
        owner_uid: st_uid of the target.
        owner_gid: st_gid of the target.
        identity: Resolved credentials.
        capability: Access right to test.

    Returns:
        bool: True if the mode bits grant the capability.
    """
    if identity.is_superuser:
        if capability is Capability.TRAVERSE:
            return stat.S_ISDIR(mode) or bool(mode & _ANY_EXEC)
        return True

    owner_bit, group_bit, other_bit = _MODE_BITS[capability]
    if identity.uid == owner_uid:
        return bool(mode & owner_bit)
    if owner_gid in identity.gids:
        return bool(mode & group_bit)
    return bool(mode & other_bit)


def lookup_identity(name: str) -> IdentityRecord:
    """
    Resolve a user name (or numeric uid) to its credentials.

    Raises:
        ProbeExecutionError: If the identity is unknown to the system.
    """
    try:
        entry = pwd.getpwuid(int(name)) if name.isdigit() else pwd.getpwnam(name)
    except KeyError as e:
        raise ProbeExecutionError(name, f"unknown identity '{name}'") from e

    try:
        gids = os.getgrouplist(entry.pw_name, entry.pw_gid)
    except OSError:
        gids = [entry.pw_gid] + [g.gr_gid for g in grp.getgrall() if entry.pw_name in g.gr_mem]

    return IdentityRecord(name=entry.pw_name, uid=entry.pw_uid, gids=frozenset(gids))


class NativeModeOracle(PermissionOracle):
    """
    Evaluate access in-process from mode bits.

    Identity lookups are resolved once per oracle instance.
    """

    name = const.ORACLE_NATIVE

    def __init__(
            self,
            stat_func: Callable[[str], os.stat_result] = os.stat,
            identity_resolver: Callable[[str], IdentityRecord] = lookup_identity,
    ) -> None:
        self._stat = stat_func
        self._resolve = identity_resolver
        self._identities: Dict[str, IdentityRecord] = {}

    def _decide(self, path: str, identity: str, capability: Capability) -> ProbeOutcome:
        record = self._identity(identity)
        target = os.path.realpath(path)

        for ancestor in _ancestors(target):
            st = self._stat_or_raise(ancestor)
            if not grants_access(st.st_mode, st.st_uid, st.st_gid, record, Capability.TRAVERSE):
                return ProbeOutcome.DENIED

        st = self._stat_or_raise(target)
        return ProbeOutcome.from_bool(
            grants_access(st.st_mode, st.st_uid, st.st_gid, record, capability)
        )

    def _identity(self, name: str) -> IdentityRecord:
        if name not in self._identities:
            self._identities[name] = self._resolve(name)
        return self._identities[name]

    def _stat_or_raise(self, path: str) -> os.stat_result:
        try:
            return self._stat(path)
        except OSError as e:
            raise ProbeExecutionError(path, f"stat failed: {e.strerror or e}") from e


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ancestors(path: str) -> List[str]:
    """Ancestor directories of an absolute path, outermost first."""
    return [str(p) for p in reversed(PurePath(path).parents)]
