from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging and validation, pre-flight path verification,
then the inspection run framed by blank lines on stdout.
"""

import os
import sys
from typing import Any, Dict, List, Optional

from permcheck.core.probing.registry import available_oracles
from permcheck.core.services.inspector import run_inspection
from permcheck.core.services.validator import validate_config
from permcheck.domain import constants as const
from permcheck.domain.config import get_default_config
from permcheck.domain.errors import PathNotFoundError, UsageError
from permcheck.infra import fs
from permcheck.infra.logging import cli_logging_config, configure_logging, get_logger
from permcheck.infra.styling import Colorizer, StyleRole, build_colorizer
from permcheck.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        int: 0 on success, 1 after help display or a failed run,
             2 on usage errors or a missing root path.
    """
    error_colorizer = build_colorizer(const.ENV_NO_COLOR not in os.environ)

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        _print_error(f"Error: {e}", error_colorizer)
        print(parser.format_usage(), end="", file=sys.stderr)
        return const.EXIT_USAGE_ERROR

    if args.show_help:
        parser.print_help()
        return const.EXIT_HELP

    # 2. Logging bootstrap (stderr, warnings only unless --debug)
    configure_logging(cli_logging_config(debug=args.debug, log_file=args.log_file))
    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge defaults with command-line overrides, then normalize
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    try:
        _require_known_oracle(raw_conf["oracle"])
    except UsageError as e:
        _print_error(f"Error: {e}", error_colorizer)
        print(parser.format_usage(), end="", file=sys.stderr)
        return const.EXIT_USAGE_ERROR

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    colorizer = build_colorizer(clean_conf["color"])
    root_path = clean_conf["root_path"]

    if clean_conf["verbose"]:
        print(f"path : {root_path}")
        print(f"user : {clean_conf['identity']}")
        print(f"oracle : {clean_conf['oracle']}")

    # 4. Pre-flight root verification
    try:
        fs.ensure_exists(root_path)
    except PathNotFoundError:
        _print_error("Error: The specified path doesn't exist.", colorizer)
        return const.EXIT_PATH_NOT_FOUND

    # 5. Inspection phase
    print()
    try:
        result = run_inspection(clean_conf, emit=print)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return const.EXIT_INTERRUPTED
    print()

    if not result.ok:
        _print_error(f"Error: {result.error}", colorizer)
        return const.EXIT_FAILURE

    return const.EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides for known keys only."""
    out = dict(base)
    for k in base:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out


def _require_known_oracle(name: Any) -> None:
    """Reject oracle names, from flags or environment, that have no implementation."""
    if str(name).strip().lower() not in available_oracles():
        raise UsageError(
            f"Unknown permission oracle '{name}' (choose from: {', '.join(available_oracles())})."
        )


def _print_error(message: str, colorizer: Colorizer) -> None:
    print(colorizer.colorize(message, StyleRole.FAIL), file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
