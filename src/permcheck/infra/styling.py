from __future__ import annotations

"""
Terminal Styling Capability.

Exposes a single 'colorize(text, *roles)' capability so that rendering
code never hardcodes escape sequences. The ANSI implementation is backed
by rich styles; the plain implementation returns text untouched for
redirected output, NO_COLOR environments or machine consumption.
"""

from enum import Enum
from typing import Dict, Protocol

from rich.color import ColorSystem
from rich.style import Style

# -----------------------------------------------------------------------------
# ROLES
# -----------------------------------------------------------------------------

class StyleRole(Enum):
    """Semantic styling roles used by the renderer and the CLI."""

    PATH = "path"
    PASS = "pass"
    FAIL = "fail"
    UNKNOWN = "unknown"
    EMPHASIS = "emphasis"


_ROLE_STYLES: Dict[StyleRole, Style] = {
    StyleRole.PATH: Style(color="blue"),
    StyleRole.PASS: Style(color="green"),
    StyleRole.FAIL: Style(color="red"),
    StyleRole.UNKNOWN: Style(color="yellow"),
    StyleRole.EMPHASIS: Style(bold=True),
}

# -----------------------------------------------------------------------------
# IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class Colorizer(Protocol):
    """Anything able to decorate text for a set of roles."""

    def colorize(self, text: str, *roles: StyleRole) -> str:
        ...


class AnsiColorizer:
    """
    Render roles as ANSI SGR sequences using the 8-color standard palette.

    Roles are merged into a single rich Style so one escape prefix and
    one reset wrap the text.
    """

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        self._color_system = color_system

    def colorize(self, text: str, *roles: StyleRole) -> str:
        if not roles or not text:
            return text
        style = Style.combine(_ROLE_STYLES[role] for role in roles)
        return style.render(text, color_system=self._color_system)


class PlainColorizer:
    """No-op colorizer."""

    def colorize(self, text: str, *roles: StyleRole) -> str:
        return text


def build_colorizer(enabled: bool) -> Colorizer:
    """Select the colorizer implementation for a run."""
    return AnsiColorizer() if enabled else PlainColorizer()
