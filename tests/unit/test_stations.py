from __future__ import annotations

from railfinder.domain.algorithms.stations import filter_stations, resolve_station
from railfinder.domain.models import StationInfo

STATIONS = (
    StationInfo(code="NDLS", name="New Delhi"),
    StationInfo(code="DLI", name="Delhi Junction"),
    StationInfo(code="MMCT", name="Mumbai Central"),
)


def test_filter_matches_name_or_code_substrings() -> None:
    assert [s.code for s in filter_stations(STATIONS, "delhi")] == ["NDLS", "DLI"]
    assert [s.code for s in filter_stations(STATIONS, "mmc")] == ["MMCT"]
    assert filter_stations(STATIONS, "zzz") == []


def test_blank_filter_returns_everything() -> None:
    assert filter_stations(STATIONS, None) == list(STATIONS)
    assert filter_stations(STATIONS, "  ") == list(STATIONS)


def test_resolve_station_by_code_or_name() -> None:
    assert resolve_station(STATIONS, "ndls") == STATIONS[0]
    assert resolve_station(STATIONS, "Mumbai Central ") == STATIONS[2]
    assert resolve_station(STATIONS, "Mumbai") is None
    assert resolve_station(STATIONS, "") is None
