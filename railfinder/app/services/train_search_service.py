from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Literal

from railfinder.app.ports.output import ICatalogRepository
from railfinder.domain.algorithms.connections import (
    MAX_PARTIAL_JOURNEYS,
    MIN_TRANSFER_MINUTES,
    find_partial_journeys,
)
from railfinder.domain.algorithms.matching import search
from railfinder.domain.algorithms.network import busiest_interchanges
from railfinder.domain.algorithms.ranking import sort_trains
from railfinder.domain.algorithms.running_days import available_dates_for_train
from railfinder.domain.algorithms.stations import filter_stations, resolve_station
from railfinder.domain.exceptions import CatalogError
from railfinder.domain.models import (
    Catalog,
    PartialJourney,
    SearchCriteria,
    SortKey,
    StationInfo,
    Train,
)
from railfinder.domain.models.reference import DEFAULT_STATIONS, DEFAULT_TRANSFER_HUBS

logger = logging.getLogger(__name__)

HubDiscovery = Literal["fixed", "network"]


@dataclass(frozen=True, slots=True)
class AdvancedSearchResult:
    direct: tuple[Train, ...]
    partial_journeys: tuple[PartialJourney, ...]


@dataclass(slots=True)
class TrainSearchService:
    """Application service (use cases) for train search.

    The domain functions stay pure; this layer fetches the catalog snapshot
    and applies the configured tuning knobs.
    """

    catalog_repository: ICatalogRepository

    # Tuning knobs
    transfer_hub_codes: tuple[str, ...] = ()
    hub_discovery: HubDiscovery = "fixed"
    min_transfer_minutes: int = MIN_TRANSFER_MINUTES
    max_partial_journeys: int = MAX_PARTIAL_JOURNEYS
    legacy_fixed_offsets: bool = False

    def catalog(self) -> Catalog:
        try:
            return self.catalog_repository.load_catalog()
        except CatalogError:
            logger.warning("Catalog unavailable; serving defaults", exc_info=True)
            return Catalog(stations=DEFAULT_STATIONS)

    def list_stations(self, *, query: str | None = None) -> list[StationInfo]:
        return filter_stations(self.catalog().stations, query)

    def resolve_station(self, value: str) -> StationInfo | None:
        return resolve_station(self.catalog().stations, value)

    def search(
        self, criteria: SearchCriteria, *, sort_by: SortKey | None = None
    ) -> list[Train]:
        results = search(criteria, self.catalog().trains)
        if sort_by:
            results = sort_trains(results, sort_by)
        return results

    def transfer_hubs(self, criteria: SearchCriteria) -> tuple[StationInfo, ...]:
        catalog = self.catalog()

        if self.hub_discovery == "network":
            exclude = {
                s.code for s in (criteria.from_station, criteria.to_station) if s
            }
            discovered = busiest_interchanges(catalog.trains, exclude=exclude)
            if discovered:
                return discovered

        if self.transfer_hub_codes:
            return tuple(
                catalog.station_by_code(code) or StationInfo(code=code, name=code)
                for code in self.transfer_hub_codes
            )

        return DEFAULT_TRANSFER_HUBS

    def partial_journeys(self, criteria: SearchCriteria) -> list[PartialJourney]:
        return find_partial_journeys(
            criteria,
            self.catalog().trains,
            hubs=self.transfer_hubs(criteria),
            min_transfer_minutes=self.min_transfer_minutes,
            limit=self.max_partial_journeys,
            legacy_fixed_offsets=self.legacy_fixed_offsets,
        )

    def advanced_search(
        self, criteria: SearchCriteria, *, sort_by: SortKey | None = None
    ) -> AdvancedSearchResult:
        criteria = replace(criteria, is_advanced_search=True)
        direct = self.search(criteria, sort_by=sort_by)
        journeys = self.partial_journeys(criteria)
        logger.debug(
            "Advanced search found %d direct trains and %d connections",
            len(direct),
            len(journeys),
        )
        return AdvancedSearchResult(
            direct=tuple(direct), partial_journeys=tuple(journeys)
        )

    def available_dates(
        self, *, train_number: str, base: date | datetime, flexible: bool
    ) -> list[date] | None:
        train = self.catalog().train_by_number(train_number)
        if train is None:
            return None
        return available_dates_for_train(train, base, flexible)
