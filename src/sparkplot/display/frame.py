"""Box outline, title, value annotations and x-axis around the plot body.

    ╭────────Gaussian─────────╮
    │         ▂▅▇█▇▅▂         ├ max: 0.0997356
    │       ▃▆███████▆▃       ├      0.0525659
    │▁▁▁▂▃▅█████████████▅▃▂▁▁▁├ min: 0.00110796
    ╰┬─────┬─────┬─────┬─────┬╯
     0     5     10    15    25
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sparkplot.core.glyphs import GlyphSet
from sparkplot.core.models import Tick
from sparkplot.core.quantize import row_midpoint
from sparkplot.display.colors import BOX_BORDER, LABEL, PLOT_FILL, Colorizer, plain

logger = logging.getLogger(__name__)

PAD = 2
VALUE_WIDTH = 12
# "│" + "├ max: " + value
BOX_OVERHEAD = VALUE_WIDTH + 8
MIN_BOX_COLUMNS = 4
GLYPH_RUN = re.compile(r"[^ ]+")


def digit_count(n: int) -> int:
    return len(str(n))


def ticks(columns: int, n: int) -> list[Tick]:
    """Evenly spaced x-axis ticks; the first is 0 and the last is exactly n."""
    interval = 2 * PAD + digit_count(n)
    count = max(2, columns // interval + 1)
    result = [Tick(i * interval, i * n // count) for i in range(count - 1)]
    result.append(Tick(columns - 1, n))
    return result


def _top_border(columns: int, title: str, glyphs: GlyphSet,
                colorize: Colorizer) -> list[str]:
    if not title or len(title) > columns:
        border = colorize(glyphs.nw_corner + glyphs.h_border * columns + glyphs.ne_corner,
                          BOX_BORDER)
        return [colorize(title, LABEL), border] if title else [border]

    filler = columns - len(title)
    left = filler // 2
    return [
        colorize(glyphs.nw_corner + glyphs.h_border * left, BOX_BORDER)
        + colorize(title, LABEL)
        + colorize(glyphs.h_border * (filler - left) + glyphs.ne_corner, BOX_BORDER)
    ]


def _plot_line(line: str, colorize: Colorizer) -> str:
    """Decorate each run of glyphs; blank cells stay plain."""
    return GLYPH_RUN.sub(lambda m: colorize(m.group(), PLOT_FILL), line)


def _annotation(row: int, rows: int, lo: float, hi: float, per_row: int) -> str:
    if rows == 1:
        return f" min: {lo:<{VALUE_WIDTH}g}, max: {hi:g}"
    if row == rows - 1:
        return f" max: {hi:g}"
    if row == 0:
        return f" min: {lo:g}"
    return f"      {row_midpoint(row, lo, hi, rows, per_row):g}"


def _bottom_border(columns: int, tick_list: Sequence[Tick], glyphs: GlyphSet) -> str:
    tick_columns = {t.column for t in tick_list}
    inner = "".join(
        glyphs.h_border_tick if c in tick_columns else glyphs.h_border
        for c in range(columns)
    )
    return glyphs.sw_corner + inner + glyphs.se_corner


def axis_labels(tick_list: Sequence[Tick], colorize: Colorizer = plain) -> str:
    """Tick numbers centred under their marks, at least one blank apart."""
    out: list[str] = []
    width = 0
    for tick in tick_list:
        text = str(tick.label)
        # +1 for the left border
        start = tick.column + 1 - (len(text) - 1) // 2
        if out:
            start = max(start, width + 1)
        start = max(start, width)
        out.append(" " * (start - width) + colorize(text, LABEL))
        width = start + len(text)
    return "".join(out)


def compose(lines: Sequence[str], columns: int, n: int, title: str,
            lo: float, hi: float, *, box: bool, glyphs: GlyphSet,
            colorize: Colorizer = plain) -> str:
    """Assemble plot lines (top row first) into the final text block."""
    if box and columns < MIN_BOX_COLUMNS:
        logger.debug("Plot is %d columns wide, too narrow for a box; drawing without", columns)
        box = False
    if not box:
        return "\n".join(_plot_line(line, colorize) for line in lines)

    rows = len(lines)
    out = _top_border(columns, title, glyphs, colorize)
    for line, row in zip(lines, range(rows - 1, -1, -1)):
        out.append(
            colorize(glyphs.v_border, BOX_BORDER)
            + _plot_line(line, colorize)
            + colorize(glyphs.v_border_tick, BOX_BORDER)
            + colorize(_annotation(row, rows, lo, hi, glyphs.per_row), LABEL)
        )

    tick_list = ticks(columns, n)
    out.append(colorize(_bottom_border(columns, tick_list, glyphs), BOX_BORDER))
    out.append(axis_labels(tick_list, colorize))
    return "\n".join(out)
