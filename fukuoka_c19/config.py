"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, TypeVar

import streamlit as st

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DATASET_URL = (
    "https://ckan.open-governmentdata.org/dataset/"
    "8a9688c2-7b9f-4347-ad6e-de3b339ef740/resource/"
    "c27769a2-8634-47aa-9714-7e21c4038dd4/download/"
    "400009_pref_fukuoka_covid19_patients.csv"
)
DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_DATE_COLUMN = "公表_年月日"
DEFAULT_AGE_COLUMN = "患者_年代"
DEFAULT_LOCATION_COLUMN = "患者_居住地"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CACHE_TTL = 600
DEFAULT_LOG_LEVEL = "INFO"

# SVG drawing surface, matches the chart viewBox
GRAPH_WIDTH = 400.0
GRAPH_HEIGHT = 100.0
SCALE_STEP = 2000

AVERAGE_WINDOW = 7
DATE_WINDOW = 50
LOCATION_MIN_COUNT = 100

UNDER_TEN_LABEL = "10歳未満"
TEENS_LABEL = "10代"
AGE_PAD_LENGTH = 3
AGE_PAD_CHAR = "_"

PERIOD_START = "2022/04/01"


class DisplayMode(str, Enum):
    """Which aggregate the chart and table show."""

    DATE = "date"
    AGE = "age"
    LOCATION = "location"


@dataclass(frozen=True)
class ModeConfig:
    mode: DisplayMode
    label: str
    with_averages: bool


# Ordered as the toggle buttons appear
MODES: List[ModeConfig] = [
    ModeConfig(DisplayMode.AGE, "世代別", False),
    ModeConfig(DisplayMode.DATE, "時間順", True),
    ModeConfig(DisplayMode.LOCATION, "地区別", False),
]

DEFAULT_MODE = DisplayMode.DATE


def mode_config(mode: DisplayMode) -> ModeConfig:
    for config in MODES:
        if config.mode == mode:
            return config
    raise KeyError(mode)


@dataclass(frozen=True)
class Settings:
    dataset_url: str = DEFAULT_DATASET_URL
    encoding: str = DEFAULT_ENCODING
    date_column: str = DEFAULT_DATE_COLUMN
    age_column: str = DEFAULT_AGE_COLUMN
    location_column: str = DEFAULT_LOCATION_COLUMN
    timeout: float = DEFAULT_TIMEOUT
    cache_ttl: int = DEFAULT_CACHE_TTL
    log_level: str = DEFAULT_LOG_LEVEL


def _get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default


def _get_number(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = _get_secret(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %r", name, raw, default)
        return default


def load_settings() -> Settings:
    """Resolve settings from the environment, Streamlit secrets, then defaults."""
    return Settings(
        dataset_url=_get_secret("CASES_CSV_URL", DEFAULT_DATASET_URL) or DEFAULT_DATASET_URL,
        encoding=_get_secret("CASES_CSV_ENCODING", DEFAULT_ENCODING) or DEFAULT_ENCODING,
        date_column=_get_secret("CASES_DATE_COLUMN", DEFAULT_DATE_COLUMN) or DEFAULT_DATE_COLUMN,
        age_column=_get_secret("CASES_AGE_COLUMN", DEFAULT_AGE_COLUMN) or DEFAULT_AGE_COLUMN,
        location_column=_get_secret("CASES_LOCATION_COLUMN", DEFAULT_LOCATION_COLUMN)
        or DEFAULT_LOCATION_COLUMN,
        timeout=_get_number("FETCH_TIMEOUT", DEFAULT_TIMEOUT, float),
        cache_ttl=_get_number("CACHE_TTL", DEFAULT_CACHE_TTL, int),
        log_level=(_get_secret("LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
