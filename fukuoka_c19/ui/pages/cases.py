from __future__ import annotations

import streamlit as st

from fukuoka_c19.config import DisplayMode
from fukuoka_c19.data.aggregation import select_table
from fukuoka_c19.data.chart_paths import build_chart_paths
from fukuoka_c19.data.models import CaseTables, LoadResult, LoadStatus
from fukuoka_c19.ui.components.charts import bar_chart, render_plotly, render_trend
from fukuoka_c19.ui.components.tables import render_table
from fukuoka_c19.ui.layout import mode_label

FAILED_MESSAGE = "Failed to download."
EMPTY_MESSAGE = "The downloaded data is empty."
NO_DATA_MESSAGE = "no data"


def render_status(result: LoadResult) -> bool:
    """Show the failed or empty state. Returns True only when there are records to draw."""
    if result.status == LoadStatus.FAILED:
        st.error(f"{FAILED_MESSAGE} {result.error or ''}".strip())
        return False
    if result.status == LoadStatus.EMPTY:
        st.warning(EMPTY_MESSAGE)
        return False
    return True


def render(tables: CaseTables, mode: DisplayMode) -> None:
    entries, with_averages = select_table(tables, mode)
    if not entries:
        st.info(NO_DATA_MESSAGE)
        return

    st.divider()
    render_trend(build_chart_paths(entries, with_averages))
    if with_averages:
        st.caption("黒: 新規感染者数 / 赤: 7日移動平均 / 緑: 7日指数移動平均")

    render_plotly(bar_chart(entries, yaxis_title="Cases"))
    render_table(
        entries,
        label=mode_label(mode),
        export_file_name=f"cases_by_{mode.value}.csv",
    )
