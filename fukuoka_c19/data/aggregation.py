"""
Group case records by date, age bracket and location.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Sequence, Tuple

import pandas as pd

from fukuoka_c19.config import (
    AGE_PAD_CHAR,
    AGE_PAD_LENGTH,
    DATE_WINDOW,
    LOCATION_MIN_COUNT,
    TEENS_LABEL,
    UNDER_TEN_LABEL,
    DisplayMode,
    mode_config,
)
from fukuoka_c19.data.models import AggregateEntry, CaseRecord, CaseTables

COLUMNS = ["date", "age_bracket", "location"]


def _to_frame(records: Sequence[CaseRecord]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in records], columns=COLUMNS, dtype=object)


def _count(frame: pd.DataFrame, column: str) -> List[AggregateEntry]:
    """Non-empty labels of ``column`` with their counts, in first-seen order."""
    values = frame[column].fillna("").astype(str)
    values = values[values != ""]
    if values.empty:
        return []
    counts = values.groupby(values, sort=False).size()
    return [AggregateEntry(str(label), int(count)) for label, count in counts.items()]


def age_sort_key(label: str) -> str:
    """Sort key placing the under-ten bracket right before the teens bracket.

    Three-character labels ("20代") get one filler so they compare against
    longer ones ("100歳以上") at a fixed width.
    """
    if label == UNDER_TEN_LABEL:
        return TEENS_LABEL
    if len(label) == AGE_PAD_LENGTH:
        return label + AGE_PAD_CHAR
    return label


def sort_ages(entries: List[AggregateEntry]) -> List[AggregateEntry]:
    return sorted((e for e in entries if e.label), key=lambda e: age_sort_key(e.label))


def sort_dates(entries: List[AggregateEntry], window: int = DATE_WINDOW) -> List[AggregateEntry]:
    ordered = sorted(entries)
    return ordered[max(len(ordered) - window, 0):]


def sort_locations(
    entries: List[AggregateEntry],
    min_count: int = LOCATION_MIN_COUNT,
) -> List[AggregateEntry]:
    kept = [e for e in entries if e.label and e.count >= min_count]
    # sorted() is stable, so ties keep first-seen order
    return sorted(kept, key=lambda e: -e.count)


def build_tables(records: Sequence[CaseRecord]) -> CaseTables:
    if not records:
        return CaseTables()
    frame = _to_frame(records)
    return CaseTables(
        ages=sort_ages(_count(frame, "age_bracket")),
        dates=sort_dates(_count(frame, "date")),
        locations=sort_locations(_count(frame, "location")),
    )


def latest_date(records: Sequence[CaseRecord]) -> str:
    return records[-1].date if records else ""


def select_table(tables: CaseTables, mode: DisplayMode) -> Tuple[List[AggregateEntry], bool]:
    """Entries to show for ``mode`` and whether moving averages are drawn."""
    entries = {
        DisplayMode.AGE: tables.ages,
        DisplayMode.DATE: tables.dates,
        DisplayMode.LOCATION: tables.locations,
    }[mode]
    return entries, mode_config(mode).with_averages
