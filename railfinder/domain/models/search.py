from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

from .station import StationInfo

SortKey = Literal["departure", "duration", "fare", "arrival"]


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """A single train search request.

    quota, person_with_disability and available_berth are carried for the
    caller's benefit; they never filter results.
    """

    from_station: StationInfo | None
    to_station: StationInfo | None
    journey_date: date | datetime | None = None
    train_class: str | None = None
    quota: str | None = None
    flexible_with_date: bool = False
    person_with_disability: bool = False
    available_berth: bool = False
    is_advanced_search: bool = False

    @property
    def requested_class(self) -> str | None:
        value = (self.train_class or "").strip()
        return value or None
