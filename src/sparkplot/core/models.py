"""Data models as dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    rows: int = 1
    columns: int = 0  # 0 -> one column per sample, clipped to the terminal
    box: bool = False
    color: bool = True
    title: str = ""
    min_value: float | None = None  # None -> taken from the data
    max_value: float | None = None


@dataclass(frozen=True)
class Tick:
    column: int
    label: int
