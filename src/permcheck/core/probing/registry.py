from __future__ import annotations

"""
Permission Oracle Registry.

Maps configuration names to oracle implementations so the probing
strategy is chosen by configuration rather than hardcoded.
"""

import logging
from typing import Any, Dict, List, Mapping, Type

from permcheck.core.probing.base import PermissionOracle
from permcheck.core.probing.native import NativeModeOracle
from permcheck.core.probing.sudo import SudoTestOracle
from permcheck.domain import constants as const

logger = logging.getLogger(__name__)

_ORACLES: Dict[str, Type[PermissionOracle]] = {
    const.ORACLE_SUDO: SudoTestOracle,
    const.ORACLE_NATIVE: NativeModeOracle,
}


def available_oracles() -> List[str]:
    """Names accepted by build_oracle."""
    return list(_ORACLES)


def build_oracle(name: str, **options: Any) -> PermissionOracle:
    """
    Instantiate the oracle registered under a name.

    Args:
        name: Registered oracle name (case-insensitive).
        **options: Constructor options for the implementation.

    Raises:
        ValueError: If no oracle is registered under the name.
    """
    key = (name or "").strip().lower()
    try:
        oracle_cls = _ORACLES[key]
    except KeyError:
        choices = ", ".join(available_oracles())
        raise ValueError(f"Unknown permission oracle '{name}' (choose from: {choices}).") from None

    logger.debug(f"Using permission oracle '{key}' with options {options}")
    return oracle_cls(**options)


def oracle_from_config(cfg: Mapping[str, Any]) -> PermissionOracle:
    """Build the oracle described by a validated run configuration."""
    name = cfg.get("oracle", const.DEFAULT_ORACLE)
    if str(name).strip().lower() == const.ORACLE_SUDO:
        return build_oracle(
            name,
            sudo_program=cfg.get("sudo_program", const.DEFAULT_SUDO_PROGRAM),
            non_interactive=cfg.get("sudo_non_interactive", True),
        )
    return build_oracle(name)
