from __future__ import annotations

"""
Run Configuration Defaults.

Builds the session configuration dictionary that drives an inspection.
There is no persistent configuration file: defaults are derived from the
working directory and the process environment, then overridden by the
command line.
"""

import getpass
import logging
import os
from typing import Any, Dict, Mapping, Optional

from permcheck.domain import constants as const

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Args:
        environ: Environment mapping to read defaults from (os.environ if None).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    env = os.environ if environ is None else environ
    return {
        # Target
        "root_path": ".",
        "identity": resolve_default_identity(env),

        # Display
        "human_readable": False,
        "verbose": False,
        "color": const.ENV_NO_COLOR not in env,

        # Traversal
        "sort_entries": True,
        "max_depth": None,

        # Probing
        "oracle": env.get(const.ENV_ORACLE, "").strip().lower() or const.DEFAULT_ORACLE,
        "sudo_program": const.DEFAULT_SUDO_PROGRAM,
        "sudo_non_interactive": True,
    }


def resolve_default_identity(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the identity checked when none is given on the command line.

    Looks at USER then LOGNAME, then asks the password database.

    Returns:
        str: User name, or "Unknown" when nothing can be resolved.
    """
    env = os.environ if environ is None else environ
    for var in const.ENV_USER_VARS:
        value = env.get(var, "").strip()
        if value:
            return value

    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        logger.debug(f"Unable to resolve current user: {e}")
        return const.UNKNOWN_DISPLAY_NAME
