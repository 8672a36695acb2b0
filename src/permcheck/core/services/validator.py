from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the run configuration assembled from defaults, environment
and command line. Untrusted values are coerced to their expected types;
in non-strict mode every correction is reported as a warning instead of
failing the run.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from permcheck.core.probing.registry import available_oracles
from permcheck.domain import constants as const
from permcheck.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["identity", "oracle", "sudo_program"]
_BOOL_FIELDS = ["human_readable", "verbose", "color", "sort_entries", "sudo_non_interactive"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a run configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise instead of coercing on invalid values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["root_path"] = _as_str(
        merged.get("root_path"), defaults["root_path"], "root_path", warnings, strict, strip=False
    )
    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["max_depth"] = _as_optional_depth(merged.get("max_depth"), warnings, strict)
    merged["oracle"] = _normalize_oracle(merged["oracle"], warnings, strict)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(
        value: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        strip: bool = True,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip() if strip else value
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_depth(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept None or a non-negative integer (digit strings are converted)."""
    if value is None:
        return None
    if isinstance(value, str) and value.strip().isdigit() and not strict:
        warnings.append(f"Field 'max_depth' converted from '{value}' to int.")
        value = int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value

    msg = f"Invalid field 'max_depth': expected non-negative int, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Depth limit disabled.")
    return None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_oracle(name: str, warnings: List[str], strict: bool) -> str:
    key = name.strip().lower()
    if key in available_oracles():
        return key

    msg = f"Unknown permission oracle '{name}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{const.DEFAULT_ORACLE}'.")
    return const.DEFAULT_ORACLE
