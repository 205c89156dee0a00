"""Pytest fixtures for fukuoka_c19 tests."""

from typing import Callable, List

import pytest

from fukuoka_c19.config import Settings
from fukuoka_c19.data.models import CaseRecord


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a dummy URL with the default column mapping."""
    return Settings(dataset_url="https://example.invalid/cases.csv", timeout=1.0)


@pytest.fixture
def make_records() -> Callable[..., List[CaseRecord]]:
    """Build ``n`` identical records, overriding any field by keyword."""

    def _make(n: int, date: str = "2022-04-01", age: str = "20代", location: str = "福岡市") -> List[CaseRecord]:
        return [CaseRecord(date=date, age_bracket=age, location=location) for _ in range(n)]

    return _make


@pytest.fixture
def sample_csv() -> bytes:
    """Small line-list in the published column layout.

    Rows:
    - 1, 2: complete rows
    - 3: "unknown" location and age brackets, no date
    - 4: blank location and age, padded date in another style
    """
    text = (
        "No,全国地方公共団体コード,公表_年月日,患者_居住地,患者_年代,患者_性別\n"
        "1,400009,2022/04/02,福岡市,20代,女性\n"
        "2,400009,2022/04/10,北九州市,10歳未満,男性\n"
        "3,400009,,不明,不明,男性\n"
        "4,400009, 2022-04-11 , ,,女性\n"
    )
    return text.encode("utf-8-sig")
