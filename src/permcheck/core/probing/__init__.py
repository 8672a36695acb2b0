from __future__ import annotations

from .base import PermissionOracle
from .native import IdentityRecord, NativeModeOracle, grants_access, lookup_identity
from .probe import PermissionProbe
from .registry import available_oracles, build_oracle, oracle_from_config
from .sudo import SudoTestOracle

__all__ = [
    "PermissionOracle",
    "PermissionProbe",
    "SudoTestOracle",
    "NativeModeOracle",
    "IdentityRecord",
    "grants_access",
    "lookup_identity",
    "available_oracles",
    "build_oracle",
    "oracle_from_config",
]
