"""Tests for turning aggregate counts into SVG paths."""

import re

import pytest

from fukuoka_c19.data.chart_paths import (
    ChartPaths,
    build_chart_paths,
    ema_values,
    sma_values,
    svg_path,
    vertical_ceiling,
)
from fukuoka_c19.data.models import AggregateEntry


def _entries(counts):
    return [AggregateEntry(f"2022-04-{i + 1:02d}", c) for i, c in enumerate(counts)]


def _points(path: str):
    return [(float(x), float(y)) for x, y in re.findall(r"[ML](-?[\d.]+),(-?[\d.]+)", path)]


class TestVerticalCeiling:
    """Tests for rounding the maximum count up to the scale step."""

    @pytest.mark.parametrize(
        "max_count,expected",
        [
            (0, 2000),
            (1, 2000),
            (1999, 2000),
            (2000, 4000),
            (2001, 4000),
            (5999, 6000),
        ],
    )
    def test_ceiling(self, max_count: int, expected: int) -> None:
        assert vertical_ceiling(max_count) == expected


class TestMovingAverages:
    """Tests for the EMA and SMA series."""

    def test_ema_recurrence(self) -> None:
        values = [10, 20, 10, 20, 10, 20, 10]
        ema = ema_values(values)
        assert len(ema) == len(values)
        assert ema[0] == pytest.approx(10)
        assert ema[1] == pytest.approx(11.43, abs=0.005)
        expected = values[0]
        for v, got in zip(values, ema):
            expected = expected * 6 / 7 + v / 7
            assert got == pytest.approx(expected)

    def test_sma_constant(self) -> None:
        assert sma_values([5, 5, 5, 5, 5, 5, 5]) == pytest.approx([5.0] * 7)

    def test_sma_front_padding(self) -> None:
        assert sma_values([7, 14]) == pytest.approx([7.0, 8.0])

    def test_sma_empty(self) -> None:
        assert sma_values([]) == []


class TestBuildChartPaths:
    """Tests for build_chart_paths."""

    def test_raw_path(self) -> None:
        paths = build_chart_paths(_entries([0, 1000, 2000]), with_averages=False)
        assert paths.raw == "M0.00,100.00 L200.00,75.00 L400.00,50.00"
        assert paths.scale_w == pytest.approx(200.0)
        assert paths.scale_h == pytest.approx(100 / 4000)

    def test_no_overlays_without_flag(self) -> None:
        paths = build_chart_paths(_entries([10, 20, 30]), with_averages=False)
        assert paths.ema == ""
        assert paths.sma == ""

    def test_overlays_have_one_point_per_entry(self) -> None:
        counts = [10, 20, 10, 20, 10, 20, 10]
        paths = build_chart_paths(_entries(counts), with_averages=True)
        for path in (paths.raw, paths.ema, paths.sma):
            assert path.startswith("M")
            assert len(_points(path)) == len(counts)

    def test_ema_point_coordinates(self) -> None:
        counts = [10, 20, 10, 20, 10, 20, 10]
        paths = build_chart_paths(_entries(counts), with_averages=True)
        x, y = _points(paths.ema)[1]
        assert x == pytest.approx(400 / 6, abs=0.01)
        assert y == pytest.approx(100 - (10 * 6 / 7 + 20 / 7) * paths.scale_h, abs=0.01)

    def test_single_entry_is_noop(self) -> None:
        paths = build_chart_paths(_entries([1500]), with_averages=True)
        assert paths == ChartPaths(scale_h=100 / 2000)

    def test_empty_entries(self) -> None:
        assert build_chart_paths([], with_averages=True) == ChartPaths()

    def test_svg_path_empty(self) -> None:
        assert svg_path([], 1.0, 1.0) == ""
