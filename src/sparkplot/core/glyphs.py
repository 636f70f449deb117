"""Glyph tables for plot cells and box outlines.

    ╭────╮
    │test├
    ╰┬──┬╯
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphSet:
    levels: tuple[str, ...]
    nw_corner: str
    ne_corner: str
    sw_corner: str
    se_corner: str
    h_border: str
    h_border_tick: str
    v_border: str
    v_border_tick: str

    @property
    def per_row(self) -> int:
        return len(self.levels)

    @property
    def full(self) -> str:
        return self.levels[-1]

    @property
    def border_chars(self) -> frozenset[str]:
        return frozenset({
            self.nw_corner, self.ne_corner, self.sw_corner, self.se_corner,
            self.h_border, self.h_border_tick, self.v_border, self.v_border_tick,
        })


# Block elements U+2581..U+2588 and box drawing from U+2500
UNICODE = GlyphSet(
    levels=tuple("▁▂▃▄▅▆▇█"),
    nw_corner="╭",
    ne_corner="╮",
    sw_corner="╰",
    se_corner="╯",
    h_border="─",
    h_border_tick="┬",
    v_border="│",
    v_border_tick="├",
)

ASCII = GlyphSet(
    levels=(".", "o", "O"),
    nw_corner="+",
    ne_corner="+",
    sw_corner="+",
    se_corner="+",
    h_border="-",
    h_border_tick=",",
    v_border="|",
    v_border_tick="|",
)
