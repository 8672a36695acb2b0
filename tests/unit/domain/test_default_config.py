from __future__ import annotations

"""
Unit tests for default configuration and identity resolution.
"""

from unittest.mock import patch

from permcheck.domain.config import get_default_config, resolve_default_identity


def test_identity_prefers_user_then_logname():
    assert resolve_default_identity({"USER": "alice", "LOGNAME": "bob"}) == "alice"
    assert resolve_default_identity({"USER": "  ", "LOGNAME": "bob"}) == "bob"


def test_identity_falls_back_to_password_database():
    with patch("permcheck.domain.config.getpass.getuser", return_value="carol"):
        assert resolve_default_identity({}) == "carol"


def test_identity_unknown_when_nothing_resolves():
    with patch("permcheck.domain.config.getpass.getuser", side_effect=KeyError("uid")):
        assert resolve_default_identity({}) == "Unknown"


def test_default_config_reads_oracle_and_color_from_environment():
    cfg = get_default_config({"USER": "alice", "PERMCHECK_ORACLE": " Native ", "NO_COLOR": "1"})

    assert cfg["identity"] == "alice"
    assert cfg["oracle"] == "native"
    assert cfg["color"] is False
    assert cfg["root_path"] == "."
    assert cfg["sort_entries"] is True
    assert cfg["max_depth"] is None


def test_default_config_defaults_to_sudo_with_color():
    cfg = get_default_config({"USER": "alice"})

    assert cfg["oracle"] == "sudo"
    assert cfg["color"] is True
    assert cfg["sudo_non_interactive"] is True
