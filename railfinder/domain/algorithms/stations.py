from __future__ import annotations

from typing import Iterable

from railfinder.domain.models import StationInfo


def filter_stations(
    stations: Iterable[StationInfo], query: str | None
) -> list[StationInfo]:
    """Autocomplete: case-insensitive substring match on name or code."""

    needle = (query or "").strip().lower()
    if not needle:
        return list(stations)
    return [
        s for s in stations if needle in s.name.lower() or needle in s.code.lower()
    ]


def resolve_station(stations: Iterable[StationInfo], value: str) -> StationInfo | None:
    """Exact, case-insensitive match against either the name or the code."""

    wanted = value.strip().lower()
    if not wanted:
        return None
    return next(
        (s for s in stations if s.name.lower() == wanted or s.code.lower() == wanted),
        None,
    )
