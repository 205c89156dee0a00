"""Command line entry point.

Usage:
    # Download the line-list and report the outcome without starting the UI
    fukuoka-c19 --headless

    # The dashboard itself runs under Streamlit
    streamlit run app.py
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from fukuoka_c19.bootstrap_env import ensure_env
from fukuoka_c19.config import configure_logging, load_settings
from fukuoka_c19.data.aggregation import build_tables, latest_date
from fukuoka_c19.data.loader import load_cases
from fukuoka_c19.data.models import AggregateEntry, LoadStatus
from fukuoka_c19.ui.components.formatting import format_number

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "The data was downloaded. But it's empty."
FAILED_MESSAGE = "Failed to download."


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Fukuoka COVID-19 case dashboard")
    ap.add_argument("--headless", action="store_true", help="Just download the csv w/o GUI")
    ap.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    return ap.parse_args(argv)


def _print_table(title: str, entries: List[AggregateEntry]) -> None:
    print(f"[{title}]")
    if not entries:
        print("  no data")
        return
    width = max(len(e.label) for e in entries)
    for label, count in entries:
        print(f"  {label:<{width}}  {format_number(count):>8}")


def run_headless() -> int:
    settings = load_settings()
    result = load_cases(settings)
    logger.debug("Load finished with status %s", result.status.value)
    if result.status == LoadStatus.FAILED:
        print(FAILED_MESSAGE)
        return 1
    if result.status == LoadStatus.EMPTY:
        print(EMPTY_MESSAGE)
        return 0

    tables = build_tables(result.records)
    print(f"{format_number(len(result.records))} cases, latest {latest_date(result.records)}")
    _print_table("date", tables.dates)
    _print_table("age", tables.ages)
    _print_table("location", tables.locations)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    ensure_env()
    configure_logging(args.log_level or load_settings().log_level)
    if not args.headless:
        print("Start the dashboard with: streamlit run app.py")
        return 0
    return run_headless()


if __name__ == "__main__":
    raise SystemExit(main())
