from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Iterable

from railfinder.domain.models import SearchCriteria, StationInfo, Train

from .running_days import expand_search_window, is_running_on_date


def endpoint_matches(name: str, code: str | None, station: StationInfo) -> bool:
    """Match a train endpoint against a query station.

    Codes are the canonical key; the denormalized display name is only
    compared (exactly, case-sensitive) when either side lacks a code.
    """

    if code and station.code:
        return code == station.code
    return name == station.name


def serves_route(train: Train, origin: StationInfo, destination: StationInfo) -> bool:
    return endpoint_matches(
        train.source, train.source_code, origin
    ) and endpoint_matches(train.destination, train.destination_code, destination)


def runs_in_window(train: Train, window: Iterable[date]) -> bool:
    return any(is_running_on_date(train, d) for d in window)


def _candidate_window(criteria: SearchCriteria) -> list[date] | None:
    journey_date = criteria.journey_date
    if not isinstance(journey_date, (date, datetime)):
        # Without a usable date the running-day filter is not applied.
        return None
    return expand_search_window(journey_date, criteria.flexible_with_date)


def project_class(train: Train, class_code: str) -> Train:
    kept = tuple(c for c in train.available_classes if c.code == class_code)
    return replace(train, available_classes=kept)


def search(criteria: SearchCriteria, trains: Iterable[Train]) -> list[Train]:
    """Filter the catalog down to trains matching the query.

    Catalog order is preserved. Incomplete queries yield an empty list.
    """

    origin = criteria.from_station
    destination = criteria.to_station
    if origin is None or destination is None:
        return []

    class_code = criteria.requested_class
    window = _candidate_window(criteria)

    results: list[Train] = []
    for train in trains:
        if not serves_route(train, origin, destination):
            continue
        if class_code and train.class_by_code(class_code) is None:
            continue
        if window is not None and not runs_in_window(train, window):
            continue

        if not class_code:
            results.append(train)
            continue

        matched = project_class(train, class_code)
        if criteria.is_advanced_search and not matched.available_classes:
            continue
        results.append(matched)

    return results
