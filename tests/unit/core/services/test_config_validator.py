from __future__ import annotations

"""
Unit tests for the configuration validator.

Verifies defaults injection, type coercion with warnings, and strict
mode failures.
"""

import pytest

from permcheck.core.services.validator import validate_config


def test_non_dict_config_falls_back_to_defaults():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg["oracle"] in ("sudo", "native")
    assert any("Invalid config type" in w for w in warnings)


def test_missing_keys_are_filled_from_defaults():
    cfg, warnings = validate_config({"identity": "alice"})

    assert cfg["identity"] == "alice"
    assert cfg["sort_entries"] is True
    assert cfg["max_depth"] is None
    assert warnings == []


def test_string_booleans_are_coerced_with_warning():
    cfg, warnings = validate_config({"human_readable": "yes", "color": "off"})

    assert cfg["human_readable"] is True
    assert cfg["color"] is False
    assert len(warnings) == 2


def test_blank_strings_fall_back():
    cfg, _ = validate_config({"root_path": "   ", "identity": "alice"})

    assert cfg["root_path"] == "."


def test_max_depth_coercion():
    cfg, warnings = validate_config({"max_depth": "3"})
    assert cfg["max_depth"] == 3
    assert warnings

    cfg, warnings = validate_config({"max_depth": -1})
    assert cfg["max_depth"] is None
    assert any("max_depth" in w for w in warnings)


def test_unknown_oracle_falls_back_to_default():
    cfg, warnings = validate_config({"oracle": "acl"})

    assert cfg["oracle"] == "sudo"
    assert any("Unknown permission oracle" in w for w in warnings)


def test_root_path_is_kept_verbatim():
    cfg, warnings = validate_config({"root_path": " sp "})

    assert cfg["root_path"] == " sp "
    assert warnings == []


def test_empty_root_path_falls_back_to_current_directory():
    cfg, _ = validate_config({"root_path": ""})

    assert cfg["root_path"] == "."


def test_oracle_name_is_normalized():
    cfg, warnings = validate_config({"oracle": " NATIVE "})

    assert cfg["oracle"] == "native"
    assert warnings == []


def test_strict_mode_raises():
    with pytest.raises(TypeError):
        validate_config({"verbose": "yes"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"oracle": "acl"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"max_depth": -2}, strict=True)
