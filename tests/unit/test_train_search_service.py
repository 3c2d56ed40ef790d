from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from railfinder.adapters.persistence import LocalJsonRepository
from railfinder.app.services.train_search_service import TrainSearchService
from railfinder.domain.exceptions import CatalogUnavailable
from railfinder.domain.models import Catalog, SearchCriteria, StationInfo
from railfinder.domain.models.reference import DEFAULT_STATIONS, DEFAULT_TRANSFER_HUBS

DATA_DIR = Path(__file__).resolve().parents[2] / "data"

MUMBAI = StationInfo("MMCT", "Mumbai Central")
NEW_DELHI = StationInfo("NDLS", "New Delhi")
MONDAY = date(2026, 10, 19)


@dataclass(slots=True)
class FakeCatalogRepository:
    catalog: Catalog

    def load_catalog(self) -> Catalog:
        return self.catalog


class BrokenCatalogRepository:
    def load_catalog(self) -> Catalog:
        raise CatalogUnavailable("no data")


def _service(**kwargs) -> TrainSearchService:
    return TrainSearchService(
        catalog_repository=LocalJsonRepository(base_path=DATA_DIR), **kwargs
    )


def test_search_filters_and_sorts_sample_catalog() -> None:
    service = _service()
    criteria = SearchCriteria(
        from_station=MUMBAI, to_station=NEW_DELHI, journey_date=MONDAY
    )

    results = service.search(criteria, sort_by="fare")

    assert [t.train_number for t in results] == ["12951"]
    assert service.search(
        SearchCriteria(from_station=MUMBAI, to_station=NEW_DELHI, train_class="SL")
    ) == []


def test_advanced_search_returns_direct_and_connecting_trains() -> None:
    service = _service()
    criteria = SearchCriteria(
        from_station=MUMBAI, to_station=NEW_DELHI, journey_date=MONDAY
    )

    result = service.advanced_search(criteria)

    assert [t.train_number for t in result.direct] == ["12951"]
    legs = [
        tuple(seg.train.train_number for seg in j.route_segments)
        for j in result.partial_journeys
    ]
    # Via Ahmedabad first, then the slower change at Gwalior.
    assert legs == [("12009", "12957"), ("12951", "11077")]
    assert [j.intermediate_station.code for j in result.partial_journeys] == [
        "AMD",
        "GWL",
    ]


def test_advanced_search_drops_trains_without_requested_class() -> None:
    service = _service()
    criteria = SearchCriteria(
        from_station=MUMBAI, to_station=NEW_DELHI, journey_date=MONDAY, train_class="1A"
    )

    direct = service.advanced_search(criteria).direct

    assert [t.train_number for t in direct] == ["12951"]
    assert [c.code for c in direct[0].available_classes] == ["1A"]


def test_transfer_hubs_resolution_order() -> None:
    criteria = SearchCriteria(from_station=MUMBAI, to_station=NEW_DELHI)

    assert _service().transfer_hubs(criteria) == DEFAULT_TRANSFER_HUBS

    configured = _service(transfer_hub_codes=("BRC", "XYZ"))
    assert configured.transfer_hubs(criteria) == (
        StationInfo("BRC", "Vadodara Junction"),
        StationInfo("XYZ", "XYZ"),
    )

    discovered = _service(hub_discovery="network").transfer_hubs(criteria)
    assert discovered
    assert not {s.code for s in discovered} & {"MMCT", "NDLS"}


def test_min_transfer_and_limit_knobs_are_applied() -> None:
    criteria = SearchCriteria(from_station=MUMBAI, to_station=NEW_DELHI)

    assert _service(min_transfer_minutes=12 * 60).partial_journeys(criteria) == []
    assert _service(max_partial_journeys=0).partial_journeys(criteria) == []


def test_unreadable_catalog_serves_default_stations() -> None:
    service = TrainSearchService(catalog_repository=BrokenCatalogRepository())

    assert service.list_stations() == list(DEFAULT_STATIONS)
    assert service.resolve_station("pune") == StationInfo("PUNE", "Pune Junction")
    criteria = SearchCriteria(from_station=MUMBAI, to_station=NEW_DELHI)
    assert service.search(criteria) == []


def test_list_and_resolve_stations() -> None:
    service = TrainSearchService(
        catalog_repository=FakeCatalogRepository(
            Catalog(stations=(MUMBAI, NEW_DELHI))
        )
    )

    assert service.list_stations(query="delhi") == [NEW_DELHI]
    assert service.resolve_station("Mumbai Central") == MUMBAI
    assert service.resolve_station("Chennai") is None


def test_available_dates() -> None:
    service = _service()

    # Jhelum Express runs SUN/TUE/THU/SAT.
    assert service.available_dates(
        train_number="11077", base=MONDAY, flexible=True
    ) == [
        date(2026, 10, 17),
        date(2026, 10, 18),
        date(2026, 10, 20),
        date(2026, 10, 22),
    ]
    assert (
        service.available_dates(train_number="11077", base=MONDAY, flexible=False)
        == []
    )
    assert service.available_dates(train_number="0", base=MONDAY, flexible=True) is None
