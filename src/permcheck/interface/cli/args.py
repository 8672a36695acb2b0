from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides. Parsing problems raise UsageError instead of
exiting so the application controller owns every exit code.
"""

import argparse
from typing import Any, Dict, NoReturn

from permcheck.domain import constants as const
from permcheck.domain.errors import UsageError

EPILOG = "Example: permcheck /var/www -u user1"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError rather than calling sys.exit."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the permcheck CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = UsageErrorParser(
        prog=const.APP_NAME,
        description="Check - A simple tool to check file permissions for a specific user.",
        epilog=EPILOG,
        add_help=False,
    )

    # --- Target ---
    p.add_argument(
        "folder_path",
        nargs="?",
        default=None,
        help="Root to inspect (default: current directory).",
    )
    p.add_argument(
        "-u",
        dest="identity",
        metavar="<user>",
        default=None,
        help="Specify the user for permission checking (default: current user).",
    )

    # --- Display ---
    p.add_argument(
        "-H",
        dest="human_readable",
        action="store_true",
        help="Display human-readable names instead of full paths.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Display verbose information.",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors.",
    )

    # --- Traversal ---
    p.add_argument(
        "--fs-order",
        action="store_true",
        help="Keep filesystem enumeration order instead of sorting entries by name.",
    )
    p.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Do not descend below depth N (root = 0).",
    )

    # --- Probing ---
    p.add_argument(
        "--oracle",
        choices=list(const.AVAILABLE_ORACLES),
        default=None,
        help=f"Permission evaluation strategy (default: ${const.ENV_ORACLE} or '{const.DEFAULT_ORACLE}').",
    )
    p.add_argument(
        "--sudo-program",
        default=None,
        metavar="PATH",
        help="Privilege-switch helper used by the sudo oracle.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "-h", "--help",
        dest="show_help",
        action="store_true",
        help="Display this help message.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left at their parser default map to None so the merge keeps
    the configuration default.
    """
    overrides: Dict[str, Any] = {
        "root_path": args.folder_path,
        "identity": args.identity,
        "oracle": args.oracle,
        "sudo_program": args.sudo_program,
        "max_depth": args.max_depth,
    }

    if args.human_readable:
        overrides["human_readable"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.no_color:
        overrides["color"] = False
    if args.fs_order:
        overrides["sort_entries"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {number}")
    return number
