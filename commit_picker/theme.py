"""
Color themes for the commit picker.

Themes are immutable tables of rich style strings. The renderer receives one
explicitly instead of reading global state.
"""

import logging
import os
import platform
import sys
from dataclasses import dataclass
from typing import Dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Rich styles used by the renderer and the key widgets."""
    name: str
    title: str = "#FFFDF5 on #25A065"
    item: str = ""
    page: str = "#888888"
    selected_title: str = "color(170)"
    selected_desc: str = "color(240)"
    selected_marker: str = "color(170)"
    description: str = "#777777"
    placeholder: str = "#777777"
    label: str = "bold"
    hint: str = "#888888"
    error: str = "bold red"
    success: str = "bold green"


THEMES: Dict[str, Theme] = {
    "standard": Theme(name="standard"),
    "cyberpunk": Theme(
        name="cyberpunk",
        title="black on bright_magenta",
        page="bright_cyan",
        selected_title="bold bright_magenta",
        selected_desc="bright_cyan",
        selected_marker="bright_magenta",
        description="cyan",
        hint="bright_cyan",
        error="bold bright_red",
        success="bold bright_green",
    ),
    "dracula": Theme(
        name="dracula",
        title="#F8F8F2 on #BD93F9",
        page="#6272A4",
        selected_title="bold #FF79C6",
        selected_desc="#BD93F9",
        selected_marker="#FF79C6",
        description="#6272A4",
        placeholder="#6272A4",
        hint="#6272A4",
        error="bold #FF5555",
        success="bold #50FA7B",
    ),
    "nord": Theme(
        name="nord",
        title="#2E3440 on #88C0D0",
        page="#4C566A",
        selected_title="bold #88C0D0",
        selected_desc="#81A1C1",
        selected_marker="#88C0D0",
        description="#4C566A",
        placeholder="#4C566A",
        hint="#4C566A",
        error="bold #BF616A",
        success="bold #A3BE8C",
    ),
    "monokai": Theme(
        name="monokai",
        title="#272822 on #E6DB74",
        page="#75715E",
        selected_title="bold #A6E22E",
        selected_desc="#66D9EF",
        selected_marker="#A6E22E",
        description="#75715E",
        placeholder="#75715E",
        hint="#75715E",
        error="bold #F92672",
        success="bold #A6E22E",
    ),
}

# Used when colors are disabled: only text attributes, no colors
PLAIN_THEME = Theme(
    name="plain",
    title="bold reverse",
    page="",
    selected_title="bold",
    selected_desc="",
    selected_marker="bold",
    description="",
    placeholder="dim",
    hint="",
    error="bold",
    success="bold",
)

DEFAULT_THEME = THEMES["standard"]


def get_theme(name: str, use_color: bool = True) -> Theme:
    """
    Look up a theme by name.

    Args:
        name: Theme name (case-insensitive)
        use_color: When False, the colorless theme is returned regardless of name

    Returns:
        The matching theme, or the standard theme for unknown names
    """
    if not use_color:
        return PLAIN_THEME
    theme = THEMES.get((name or "").lower())
    if theme is None:
        logger.warning(f"Unknown theme: {name}, using default")
        return DEFAULT_THEME
    return theme


def supports_color() -> bool:
    """
    Check if the current terminal supports color output.

    Returns:
        bool: True if the terminal supports color, False otherwise
    """
    if hasattr(sys.stdout, 'isatty') and sys.stdout.isatty():
        return platform.system() != 'Windows' or ('ANSICON' in os.environ) or ('WT_SESSION' in os.environ) or os.environ.get('TERM_PROGRAM') == 'vscode'

    return False
