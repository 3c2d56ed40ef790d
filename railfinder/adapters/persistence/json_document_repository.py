from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any

from railfinder.app.ports.output import ICatalogRepository, IPassengerRepository
from railfinder.domain.exceptions import CatalogUnavailable, InvalidRecord
from railfinder.domain.models import Catalog, Passenger
from railfinder.domain.models.reference import DEFAULT_STATIONS

from .catalog_codec import decode_passengers, decode_stations, decode_trains

logger = logging.getLogger(__name__)

TRAINS_DOCUMENT = "trains.json"
STATIONS_DOCUMENT = "stations.json"
PASSENGERS_DOCUMENT = "passengers.json"


class JsonDocumentRepository(ICatalogRepository, IPassengerRepository):
    """Shared decoding for repositories that store the data as JSON documents.

    A document that cannot be read degrades to its default dataset: no
    trains, the built-in station list, no passengers.
    """

    __slots__ = ()

    @abstractmethod
    def read_document(self, name: str) -> Any:
        """Return the parsed JSON document or raise CatalogUnavailable."""

    def _read_or_default(self, name: str, default: Any) -> Any:
        try:
            return self.read_document(name)
        except CatalogUnavailable as exc:
            logger.warning("Falling back to defaults for %s: %s", name, exc)
            return default

    def load_catalog(self) -> Catalog:
        try:
            stations = decode_stations(self._read_or_default(STATIONS_DOCUMENT, []))
        except InvalidRecord as exc:
            logger.warning("Ignoring %s: %s", STATIONS_DOCUMENT, exc)
            stations = ()
        if not stations:
            stations = DEFAULT_STATIONS

        try:
            trains = decode_trains(
                self._read_or_default(TRAINS_DOCUMENT, []), stations
            )
        except InvalidRecord as exc:
            logger.warning("Ignoring %s: %s", TRAINS_DOCUMENT, exc)
            trains = ()

        logger.info(
            "Catalog loaded: %d trains, %d stations", len(trains), len(stations)
        )
        return Catalog(trains=trains, stations=stations)

    def load_passengers(self) -> tuple[Passenger, ...]:
        try:
            return decode_passengers(self._read_or_default(PASSENGERS_DOCUMENT, []))
        except InvalidRecord as exc:
            logger.warning("Ignoring %s: %s", PASSENGERS_DOCUMENT, exc)
            return ()
