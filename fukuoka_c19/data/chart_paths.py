"""
Scale aggregate counts into SVG path strings for the trend chart.

The drawing surface is ``GRAPH_WIDTH`` x ``GRAPH_HEIGHT`` units with the origin
at the top-left, so larger counts have smaller y values. The vertical scale is
rounded up to the next multiple of ``SCALE_STEP`` strictly above the maximum
count; a maximum of exactly 2000 therefore scales against 4000.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

from fukuoka_c19.config import AVERAGE_WINDOW, GRAPH_HEIGHT, GRAPH_WIDTH, SCALE_STEP
from fukuoka_c19.data.models import AggregateEntry


@dataclass(frozen=True)
class ChartPaths:
    raw: str = ""
    ema: str = ""
    sma: str = ""
    scale_w: float = 0.0
    scale_h: float = 0.0


def vertical_ceiling(max_count: int, step: int = SCALE_STEP) -> int:
    return (int(max_count) // step + 1) * step


def ema_values(values: Sequence[float], window: int = AVERAGE_WINDOW) -> List[float]:
    """Exponential moving average seeded with the first value, smoothing 1/window."""
    series = pd.Series(list(values), dtype=float)
    return series.ewm(alpha=1.0 / window, adjust=False).mean().tolist()


def sma_values(values: Sequence[float], window: int = AVERAGE_WINDOW) -> List[float]:
    """Simple moving average, front-padded with copies of the first value."""
    values = list(values)
    if not values:
        return []
    padded = pd.Series([values[0]] * (window - 1) + values, dtype=float)
    return padded.rolling(window).mean().iloc[window - 1:].tolist()


def svg_path(values: Sequence[float], scale_w: float, scale_h: float) -> str:
    if len(values) == 0:
        return ""
    xs = np.arange(len(values)) * scale_w
    ys = GRAPH_HEIGHT - np.asarray(values, dtype=float) * scale_h
    head = f"M{xs[0]:.2f},{ys[0]:.2f}"
    segments = [f"L{x:.2f},{y:.2f}" for x, y in zip(xs[1:], ys[1:])]
    return " ".join([head] + segments)


def build_chart_paths(entries: Sequence[AggregateEntry], with_averages: bool) -> ChartPaths:
    if not entries:
        return ChartPaths()
    counts = [float(e.count) for e in entries]
    scale_h = GRAPH_HEIGHT / vertical_ceiling(max(e.count for e in entries))
    if len(entries) < 2:
        # No horizontal extent to draw on
        return ChartPaths(scale_h=scale_h)
    scale_w = GRAPH_WIDTH / (len(entries) - 1)

    raw = svg_path(counts, scale_w, scale_h)
    ema = sma = ""
    if with_averages:
        ema = svg_path(ema_values(counts), scale_w, scale_h)
        sma = svg_path(sma_values(counts), scale_w, scale_h)
    return ChartPaths(raw=raw, ema=ema, sma=sma, scale_w=scale_w, scale_h=scale_h)
