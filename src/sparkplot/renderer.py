"""Render a series as a sparkline: resample, quantize, frame."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from sparkplot.core.binning import InvalidConfiguration, resample
from sparkplot.core.glyphs import UNICODE, GlyphSet
from sparkplot.core.models import RenderConfig
from sparkplot.core.quantize import quantize
from sparkplot.display.colors import Colorizer, make_colorizer
from sparkplot.display.frame import BOX_OVERHEAD, compose
from sparkplot.display.terminal import terminal_width as detect_terminal_width

logger = logging.getLogger(__name__)


def _validate(data: Sequence[float], config: RenderConfig) -> None:
    if config.rows < 1:
        raise InvalidConfiguration(f"plot height must be at least 1 line (got {config.rows})")
    if config.columns < 0:
        raise InvalidConfiguration(f"plot width must not be negative (got {config.columns})")
    if not data:
        raise InvalidConfiguration("no data to plot")
    if not all(math.isfinite(v) for v in data):
        raise InvalidConfiguration("data contains NaN or infinite values")


def resolve_range(data: Sequence[float], config: RenderConfig) -> tuple[float, float]:
    """Fill in whichever plot limit the config leaves unset from the data."""
    lo = min(data) if config.min_value is None else float(config.min_value)
    hi = max(data) if config.max_value is None else float(config.max_value)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidConfiguration(f"plot limits must be finite (got min {lo:g}, max {hi:g})")
    if lo > hi:
        raise InvalidConfiguration(f"min value {lo:g} is greater than max value {hi:g}")
    return lo, hi


def resolve_width(n: int, config: RenderConfig, terminal_width: int) -> int:
    """Requested plot width, or one column per sample, limited by the terminal."""
    available = terminal_width - BOX_OVERHEAD if config.box else terminal_width
    columns = config.columns or n
    return max(0, min(columns, available))


def render(series: Sequence[float], config: RenderConfig, *,
           terminal_width: int | None = None, glyphs: GlyphSet = UNICODE,
           colorize: Colorizer | None = None) -> str:
    """Render `series` according to `config` and return the text block.

    The result has one line per plot row (plus box and axis lines when
    boxed) and no trailing newline.
    """
    data = tuple(float(v) for v in series)
    _validate(data, config)
    lo, hi = resolve_range(data, config)

    if terminal_width is None:
        terminal_width = detect_terminal_width()
    columns = resolve_width(len(data), config, terminal_width)
    logger.debug("Rendering %d samples into %dx%d cells, range [%g, %g]",
                 len(data), columns, config.rows, lo, hi)

    bins = resample(data, columns)
    lines = quantize(bins, lo, hi, config.rows, glyphs)

    if colorize is None:
        colorize = make_colorizer(config.color)
    return compose(lines, columns, len(data), config.title, lo, hi,
                   box=config.box, glyphs=glyphs, colorize=colorize)
