"""Public Python API — returns sparklines as strings for programmatic use.

Usage:
    import sparkplot.api as sp

    print(sp.sparkline([1, 5, 2, 8, 3]))
    print(sp.sparkline(values, rows=3, columns=40, box=True, title="Load"))

    # Showcase plots: sp.example_gaussian(), sp.examples()
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from sparkplot.core.glyphs import ASCII, UNICODE
from sparkplot.core.models import RenderConfig
from sparkplot.renderer import render

GAUSSIAN = (
    0.000514092998764, 0.00147728280398, 0.00379866200793, 0.0087406296979,
    0.0179969888377, 0.0331590462642, 0.054670024892, 0.080656908173,
    0.106482668507, 0.125794409231, 0.132980760134, 0.125794409231,
    0.106482668507, 0.080656908173, 0.054670024892, 0.0331590462642,
    0.0179969888377, 0.0087406296979, 0.00379866200793, 0.00147728280398,
    0.000514092998764,
)


def sparkline(values: Sequence[float], *, rows: int = 1, columns: int = 0,
              box: bool = False, color: bool = False, title: str = "",
              min_value: float | None = None, max_value: float | None = None,
              ascii_only: bool = False, terminal_width: int | None = None) -> str:
    """Render values as a sparkline string."""
    config = RenderConfig(rows=rows, columns=columns, box=box, color=color,
                          title=title, min_value=min_value, max_value=max_value)
    return render(values, config, terminal_width=terminal_width,
                  glyphs=ASCII if ascii_only else UNICODE)


def example_gaussian(**kwargs) -> str:
    """A normal distribution bell curve in a titled 3-line box."""
    return sparkline(GAUSSIAN, rows=3, box=True, title="Gaussian",
                     min_value=0.0, max_value=0.15, color=False, **kwargs)


def sine_wave(samples: int = 101) -> list[float]:
    """Two full cycles of a sine wave."""
    return [math.sin(math.radians(i * 7.2)) for i in range(samples)]


def examples(color: bool = True, terminal_width: int | None = None) -> str:
    """Showcase plots of one sine wave under several configurations."""
    data = sine_wave()
    plot = dict(color=color, terminal_width=terminal_width)
    blocks = [
        sparkline(data, rows=10, columns=40, box=True,
                  title="Showcase: With box, size 40x10", **plot),
        sparkline(data, rows=3, columns=40, box=True,
                  title="Showcase: With box, size 40x3", **plot),
        "Showcase: Without box, size 40x1 (the original 'sparkline')\n"
        + sparkline(data, columns=40, **plot) + "\n",
        "Showcase: Without box, size 80x10\n"
        + sparkline(data, rows=10, columns=80, **plot),
        sparkline(data, rows=10, columns=80, box=True,
                  title="Showcase: With box, size 80x10", **plot),
        sparkline(data, rows=10, columns=80, box=True, min_value=-2.0, max_value=4.0,
                  title="Showcase: With box, size 80x10, y-range [-2,4]", **plot),
        sparkline(data, rows=10, columns=80, box=True, min_value=-0.25, max_value=1.25,
                  title="Showcase: With box, size 80x10, y-range [-0.25,1.25]", **plot),
        sparkline(data, rows=10, columns=80, box=True, min_value=-0.25, max_value=1.25,
                  title="Showcase: With box, size 80x10, no colors",
                  color=False, terminal_width=terminal_width),
    ]
    return "\n\n".join(blocks)
