from __future__ import annotations

"""
Unit tests for the terminal styling capability.
"""

from permcheck.infra.styling import (
    AnsiColorizer,
    PlainColorizer,
    StyleRole,
    build_colorizer,
)


def test_plain_colorizer_is_a_no_op():
    assert PlainColorizer().colorize("R", StyleRole.PASS, StyleRole.EMPHASIS) == "R"


def test_ansi_colorizer_wraps_text_in_sgr_sequences():
    out = AnsiColorizer().colorize("R", StyleRole.PASS, StyleRole.EMPHASIS)

    assert out.startswith("\x1b[")
    assert out.endswith("\x1b[0m")
    assert "R" in out
    assert "32" in out.split("m", 1)[0]


def test_pass_and_fail_use_distinct_colors():
    colorizer = AnsiColorizer()

    passed = colorizer.colorize("W", StyleRole.PASS)
    failed = colorizer.colorize("W", StyleRole.FAIL)
    unknown = colorizer.colorize("W", StyleRole.UNKNOWN)

    assert len({passed, failed, unknown}) == 3


def test_ansi_without_roles_returns_text():
    assert AnsiColorizer().colorize("name") == "name"


def test_build_colorizer_selects_implementation():
    assert isinstance(build_colorizer(True), AnsiColorizer)
    assert isinstance(build_colorizer(False), PlainColorizer)
