"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - ClickUp violet with cyan headers."""

    # Primary colors
    primary: str = "#7B68EE"      # ClickUp violet - main accent
    accent: str = "#00CED1"       # Cyan - table headers, ids

    # Status colors
    success: str = "#00E676"      # Bright green
    error: str = "#FF5252"        # Red
    warning: str = "#FFB347"      # Orange-yellow

    # Text colors
    text: str = "#E8E8E8"         # Light gray
    muted: str = "#888888"        # Muted gray

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),

            # Semantic styles
            "command": Style(color=self.accent),
            "id": Style(color=self.accent),
            "label": Style(color=self.muted),
            "title": Style(bold=True),
            "table.header": Style(color=self.accent, bold=True),
            "table.rule": Style(color=self.muted),
            "table.count": Style(color=self.muted),
            "spinner": Style(color=self.primary),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
