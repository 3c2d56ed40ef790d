from __future__ import annotations

import os
from functools import lru_cache

from railfinder.adapters.persistence import (
    LocalJsonRepository,
    S3JsonRepository,
    SnapshotRepository,
)
from railfinder.adapters.persistence.json_document_repository import (
    JsonDocumentRepository,
)
from railfinder.app.services.booking_lookup_service import BookingLookupService
from railfinder.app.services.train_search_service import TrainSearchService


@lru_cache(maxsize=1)
def get_data_repository() -> SnapshotRepository:
    upstream: JsonDocumentRepository = LocalJsonRepository()
    if os.getenv("RAILFINDER_DATA_BUCKET"):
        upstream = S3JsonRepository()
    return SnapshotRepository(upstream=upstream)


def get_train_search_service() -> TrainSearchService:
    service = TrainSearchService(catalog_repository=get_data_repository())

    # Allow tuning via env without changing code.
    if os.getenv("RAILFINDER_TRANSFER_HUBS"):
        service.transfer_hub_codes = tuple(
            code.strip().upper()
            for code in os.environ["RAILFINDER_TRANSFER_HUBS"].split(",")
            if code.strip()
        )
    discovery = (os.getenv("RAILFINDER_HUB_DISCOVERY") or "").strip().lower()
    if discovery == "network":
        service.hub_discovery = "network"
    if os.getenv("RAILFINDER_MIN_TRANSFER_MINUTES"):
        service.min_transfer_minutes = int(
            os.environ["RAILFINDER_MIN_TRANSFER_MINUTES"]
        )
    if os.getenv("RAILFINDER_MAX_PARTIAL_JOURNEYS"):
        service.max_partial_journeys = int(
            os.environ["RAILFINDER_MAX_PARTIAL_JOURNEYS"]
        )
    service.legacy_fixed_offsets = (
        os.getenv("RAILFINDER_LEGACY_TIMINGS") or ""
    ).strip().lower() in {"1", "true", "yes", "on"}

    return service


def get_booking_lookup_service() -> BookingLookupService:
    repository = get_data_repository()
    return BookingLookupService(
        passenger_repository=repository, catalog_repository=repository
    )
