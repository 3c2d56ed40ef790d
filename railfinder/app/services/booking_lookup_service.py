from __future__ import annotations

import logging
from dataclasses import dataclass

from railfinder.app.ports.output import ICatalogRepository, IPassengerRepository
from railfinder.domain.algorithms.bookings import (
    BookingSortKey,
    filter_bookings_by_status,
    search_bookings,
    sort_bookings,
)
from railfinder.domain.algorithms.pnr import get_all_bookings, lookup_pnr
from railfinder.domain.exceptions import CatalogError
from railfinder.domain.models import Catalog, Passenger, PNRStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BookingLookupService:
    """PNR status and booking history over the passenger store."""

    passenger_repository: IPassengerRepository
    catalog_repository: ICatalogRepository

    def _passengers(self) -> tuple[Passenger, ...]:
        try:
            return self.passenger_repository.load_passengers()
        except CatalogError:
            logger.warning("Passenger data unavailable", exc_info=True)
            return ()

    def _catalog(self) -> Catalog:
        try:
            return self.catalog_repository.load_catalog()
        except CatalogError:
            logger.warning("Catalog unavailable for booking join", exc_info=True)
            return Catalog()

    def lookup(self, pnr: str) -> PNRStatus | None:
        catalog = self._catalog()
        return lookup_pnr(
            pnr.strip(), self._passengers(), catalog.trains, catalog.stations
        )

    def list_bookings(
        self,
        *,
        status: str | None = None,
        query: str | None = None,
        sort_by: BookingSortKey | None = None,
    ) -> list[PNRStatus]:
        catalog = self._catalog()
        bookings = get_all_bookings(
            self._passengers(), catalog.trains, catalog.stations
        )
        if status:
            bookings = filter_bookings_by_status(bookings, status)
        if query:
            bookings = search_bookings(bookings, query)
        if sort_by:
            bookings = sort_bookings(bookings, sort_by)
        return bookings
