from __future__ import annotations

"""
Domain Constants.

Centralizes the rendering glyphs, exit codes, oracle identifiers and
environment variable names shared by the core and interface layers.
"""

from typing import Final, Tuple

APP_NAME: Final[str] = "permcheck"

# -----------------------------------------------------------------------------
# TREE RENDERING
# -----------------------------------------------------------------------------

BRANCH_CONNECTOR: Final[str] = "├── "
CORNER_CONNECTOR: Final[str] = "└── "
INDENT_UNIT: Final[str] = "    "
ROOT_DISPLAY_NAME: Final[str] = "/"
UNKNOWN_DISPLAY_NAME: Final[str] = "Unknown"

# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------

EXIT_OK: Final[int] = 0
EXIT_HELP: Final[int] = 1
EXIT_FAILURE: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2
EXIT_PATH_NOT_FOUND: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130

# -----------------------------------------------------------------------------
# PERMISSION ORACLES
# -----------------------------------------------------------------------------

ORACLE_SUDO: Final[str] = "sudo"
ORACLE_NATIVE: Final[str] = "native"
AVAILABLE_ORACLES: Final[Tuple[str, ...]] = (ORACLE_SUDO, ORACLE_NATIVE)
DEFAULT_ORACLE: Final[str] = ORACLE_SUDO
DEFAULT_SUDO_PROGRAM: Final[str] = "sudo"

# -----------------------------------------------------------------------------
# ENVIRONMENT
# -----------------------------------------------------------------------------

ENV_ORACLE: Final[str] = "PERMCHECK_ORACLE"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
ENV_USER_VARS: Final[Tuple[str, ...]] = ("USER", "LOGNAME")
