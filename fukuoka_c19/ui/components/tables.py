"""
Reusable helper for rendering aggregate tables with consistent configuration.
"""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from fukuoka_c19.data.models import AggregateEntry
from fukuoka_c19.ui.components.charts import entries_frame
from fukuoka_c19.ui.components.formatting import format_number


def render_table(
    entries: Sequence[AggregateEntry],
    label: str,
    height: int = 400,
    export_file_name: str = "export.csv",
) -> None:
    if not entries:
        st.info("no data")
        return

    df = entries_frame(entries, label=label)
    formatted_df = df.copy()
    formatted_df["count"] = formatted_df["count"].apply(format_number)

    st.dataframe(
        formatted_df,
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
