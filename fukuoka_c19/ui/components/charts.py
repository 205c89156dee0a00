"""
Chart helpers: the SVG trend chart built from path strings, and a Plotly bar
chart of the same counts with consistent styling.
"""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from fukuoka_c19.config import GRAPH_HEIGHT, GRAPH_WIDTH
from fukuoka_c19.data.chart_paths import ChartPaths
from fukuoka_c19.data.models import AggregateEntry

DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#1f77b4",
    "#2ca02c",
    "#d62728",
]


def render_svg(paths: ChartPaths) -> str:
    """Compose the raw, EMA and SMA paths into one inline SVG element."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {GRAPH_WIDTH:g} {GRAPH_HEIGHT:g}" '
        'fill="none" stroke-linecap="round" stroke-linejoin="round">'
        f'<path stroke="red" stroke-width="0.8" d="{paths.sma}"/>'
        f'<path stroke="green" stroke-width="0.4" stroke-dasharray="6 2" d="{paths.ema}"/>'
        f'<path stroke="currentColor" stroke-width="1" d="{paths.raw}"/>'
        "</svg>"
    )


def render_trend(paths: ChartPaths) -> None:
    st.markdown(
        f'<div class="data-graph">{render_svg(paths)}</div>',
        unsafe_allow_html=True,
    )


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        hovermode="x unified",
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def entries_frame(entries: Sequence[AggregateEntry], label: str = "label") -> pd.DataFrame:
    return pd.DataFrame(list(entries), columns=[label, "count"])


def bar_chart(
    entries: Sequence[AggregateEntry],
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    df = entries_frame(entries)
    fig = px.bar(
        df,
        x="label",
        y="count",
        category_orders={"label": df["label"].tolist()},
    )
    fig = _configure_layout(fig, title, yaxis_title)
    fig.update_xaxes(title=None)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
