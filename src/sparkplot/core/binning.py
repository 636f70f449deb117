"""Resample a series into display columns."""

from __future__ import annotations

import math
from collections.abc import Sequence


class InvalidConfiguration(ValueError):
    pass


def resample(series: Sequence[float], width: int) -> list[float]:
    """Average the series over `width` equal, real-valued slices.

    Column i covers samples [i*n/width, (i+1)*n/width). Samples cut by a
    slice boundary contribute only the covered fraction, so width == n
    returns the samples unchanged and smaller widths smooth the data.
    """
    n = len(series)
    if n == 0:
        raise InvalidConfiguration("no data to plot")
    if width < 0:
        raise InvalidConfiguration(f"plot width must not be negative (got {width})")
    if width > n:
        raise InvalidConfiguration(
            f"plot width {width} exceeds the number of samples {n}; upsampling is not supported"
        )

    mass_per_bin = n / width if width else 0.0
    bins: list[float] = []
    for i in range(width):
        lower = i * n / width
        upper = (i + 1) * n / width
        lo_idx = math.floor(lower)
        hi_idx = math.floor(upper)

        acc = (1.0 - (lower - lo_idx)) * series[lo_idx]
        for j in range(lo_idx + 1, hi_idx):
            acc += series[j]
        if hi_idx < n:
            acc += (upper - hi_idx) * series[hi_idx]

        bins.append(acc / mass_per_bin)
    return bins
