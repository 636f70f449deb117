"""Map bin values onto vertical fill levels and per-row glyphs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from sparkplot.core.glyphs import GlyphSet


def total_levels(rows: int, per_row: int) -> int:
    """Highest level index; more rows means finer vertical resolution."""
    return rows * per_row - 1


def level(value: float, lo: float, hi: float, levels: int) -> int:
    if hi == lo:
        return levels
    value = min(hi, max(lo, value))
    if math.isinf(hi - lo):
        # span overflows float64; halving is exact and keeps it finite
        value, lo, hi = value / 2, lo / 2, hi / 2
    fraction = (value - lo) / (hi - lo)
    return min(levels, max(0, math.floor(fraction * levels)))


def cell(lvl: int, row: int, glyphs: GlyphSet) -> str:
    """Glyph for one column on output row `row` (0 is the bottom line)."""
    row_min = row * glyphs.per_row
    row_max = row_min + glyphs.per_row - 1
    if lvl < row_min:
        return " "
    if lvl > row_max:
        return glyphs.full
    return glyphs.levels[lvl - row_min]


def quantize(bins: Sequence[float], lo: float, hi: float, rows: int,
             glyphs: GlyphSet) -> list[str]:
    """Render bins as `rows` plain strings, top line first."""
    levels = total_levels(rows, glyphs.per_row)
    bin_levels = [level(v, lo, hi, levels) for v in bins]
    return [
        "".join(cell(lvl, row, glyphs) for lvl in bin_levels)
        for row in range(rows - 1, -1, -1)
    ]


def row_midpoint(row: int, lo: float, hi: float, rows: int, per_row: int) -> float:
    """Data value at the vertical middle of output row `row`."""
    levels = total_levels(rows, per_row)
    if levels <= 0:
        return lo
    fraction = (row * per_row + per_row / 2) / levels
    return lo * (1 - fraction) + hi * fraction
