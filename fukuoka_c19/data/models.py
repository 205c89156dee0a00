from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional


@dataclass(frozen=True)
class CaseRecord:
    """One confirmed case. Dates are ISO ``YYYY-MM-DD``; missing values are ``""``."""

    date: str
    age_bracket: str
    location: str


class AggregateEntry(NamedTuple):
    label: str
    count: int


@dataclass(frozen=True)
class CaseTables:
    ages: List[AggregateEntry] = field(default_factory=list)
    dates: List[AggregateEntry] = field(default_factory=list)
    locations: List[AggregateEntry] = field(default_factory=list)


class LoadStatus(str, Enum):
    POPULATED = "populated"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    records: List[CaseRecord] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_records(cls, records: List[CaseRecord]) -> "LoadResult":
        status = LoadStatus.POPULATED if records else LoadStatus.EMPTY
        return cls(status=status, records=list(records))

    @classmethod
    def failed(cls, error: str) -> "LoadResult":
        return cls(status=LoadStatus.FAILED, error=error)
