"""ANSI decoration hook for plot output."""

from __future__ import annotations

from collections.abc import Callable

from rich.color import ColorSystem
from rich.style import Style

PLOT_FILL = "plot-fill"
BOX_BORDER = "box-border"
LABEL = "label"

STYLES = {
    PLOT_FILL: Style(color="blue"),
    BOX_BORDER: Style(color="green"),
    LABEL: Style(color="green", bold=True),
}

Colorizer = Callable[[str, str], str]


def plain(text: str, tag: str) -> str:
    return text


def colorize(text: str, tag: str) -> str:
    """Wrap text in the SGR escape sequence for its style tag."""
    return STYLES[tag].render(text, color_system=ColorSystem.STANDARD)


def make_colorizer(enabled: bool) -> Colorizer:
    return colorize if enabled else plain
