"""Read plot values from a text stream."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TextIO

logger = logging.getLogger(__name__)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_series(stream: TextIO) -> list[float]:
    """Parse whitespace-separated reals until EOF or the first bad token.

    A token that is not a finite number ends the input; it is not an error.
    """
    values: list[float] = []
    for token in _tokens(stream):
        try:
            value = float(token)
        except ValueError:
            logger.debug("Stopped reading at non-numeric token %r", token)
            break
        if not math.isfinite(value):
            logger.debug("Stopped reading at non-finite token %r", token)
            break
        values.append(value)
    return values
