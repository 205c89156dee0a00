import io
import logging
from typing import List

import pandas as pd
import requests

from fukuoka_c19.config import Settings
from fukuoka_c19.data.models import CaseRecord, LoadResult

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """The downloaded file does not look like the case line-list."""


def fetch_csv(settings: Settings) -> bytes:
    logger.info("Fetching case data from %s", settings.dataset_url)
    response = requests.get(settings.dataset_url, timeout=settings.timeout)
    response.raise_for_status()
    logger.info("Downloaded %d bytes", len(response.content))
    return response.content


def _clean_labels(series: pd.Series) -> pd.Series:
    # Only blank cells count as missing; "不明" etc. are real brackets
    return series.fillna("").astype(str).str.strip()


def _normalize_dates(series: pd.Series) -> pd.Series:
    """Parse dates and format them ISO so string order is chronological."""
    labels = _clean_labels(series)
    # The published file mixes "2022-04-01" and "2022/4/1" styles
    parsed = pd.to_datetime(labels.mask(labels == ""), format="mixed", errors="coerce")
    return parsed.dt.strftime("%Y-%m-%d").fillna("")


def parse_cases(raw: bytes, settings: Settings) -> List[CaseRecord]:
    """Turn the raw CSV bytes into case records, in file order."""
    try:
        df = pd.read_csv(io.BytesIO(raw), encoding=settings.encoding, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning("Downloaded file has no rows")
        return []
    df.columns = df.columns.str.strip()

    wanted = [settings.date_column, settings.age_column, settings.location_column]
    missing = [col for col in wanted if col not in df.columns]
    if missing:
        raise DatasetError(f"Missing required columns: {missing}. Found: {list(df.columns)}")
    if df.empty:
        return []

    dates = _normalize_dates(df[settings.date_column])
    ages = _clean_labels(df[settings.age_column])
    locations = _clean_labels(df[settings.location_column])
    unparsed = int((dates == "").sum())
    if unparsed:
        logger.warning("%d rows have no usable date", unparsed)

    records = [
        CaseRecord(date=d, age_bracket=a, location=loc)
        for d, a, loc in zip(dates, ages, locations)
    ]
    logger.info("Parsed %d case records", len(records))
    return records


def load_cases(settings: Settings) -> LoadResult:
    """Fetch and parse the dataset. Failures are reported in the result, never raised."""
    try:
        raw = fetch_csv(settings)
        records = parse_cases(raw, settings)
    except requests.RequestException as exc:
        logger.error("Download failed: %s", exc)
        return LoadResult.failed(f"Download failed: {exc}")
    except (DatasetError, pd.errors.ParserError, UnicodeDecodeError, LookupError) as exc:
        logger.error("Could not parse dataset: %s", exc)
        return LoadResult.failed(f"Could not parse dataset: {exc}")
    return LoadResult.from_records(records)
