import fukuoka_c19.bootstrap_env as bootstrap_env

bootstrap_env.ensure_env()  # must run before settings are read

import streamlit as st

from fukuoka_c19.config import Settings, configure_logging, load_settings
from fukuoka_c19.data.aggregation import build_tables, latest_date
from fukuoka_c19.data.loader import load_cases
from fukuoka_c19.data.models import LoadResult
from fukuoka_c19.ui.layout import mode_selector, render_headline, setup_page
from fukuoka_c19.ui.pages import cases

SETTINGS = load_settings()


@st.cache_data(show_spinner=False, ttl=SETTINGS.cache_ttl)
def _load_cached(settings: Settings) -> LoadResult:
    """Cached by settings so a changed URL or column mapping refetches."""
    return load_cases(settings)


def main() -> None:
    configure_logging(SETTINGS.log_level)
    setup_page()

    if st.sidebar.button("🔄 Refresh Data"):
        _load_cached.clear()  # type: ignore[attr-defined]

    with st.spinner("Fetching data ..."):
        result = _load_cached(SETTINGS)

    if not cases.render_status(result):
        return

    render_headline(len(result.records), latest_date(result.records))
    mode = mode_selector()
    cases.render(build_tables(result.records), mode)


if __name__ == "__main__":
    main()
