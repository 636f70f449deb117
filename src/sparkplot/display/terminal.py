"""Terminal size detection."""

from __future__ import annotations

from rich.console import Console


def terminal_width() -> int:
    """Current terminal width in characters (80 when not a terminal)."""
    return Console().size.width
