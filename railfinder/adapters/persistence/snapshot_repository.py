from __future__ import annotations

import threading
from dataclasses import dataclass, field

from railfinder.app.ports.output import ICatalogRepository, IPassengerRepository
from railfinder.domain.models import Catalog, Passenger


@dataclass(slots=True)
class SnapshotRepository(ICatalogRepository, IPassengerRepository):
    """Loads each dataset from the upstream repository once and keeps it.

    This is an adapter-level decorator; the snapshot is read-only for the life
    of the process. Failed loads are not cached, and neither are empty results:
    JSON repositories degrade to defaults when the source is unreachable, so an
    empty catalog or passenger list is retried on the next call.
    """

    upstream: ICatalogRepository
    passengers_upstream: IPassengerRepository | None = None

    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )
    _catalog: Catalog | None = field(default=None, init=False, repr=False)
    _passengers: tuple[Passenger, ...] | None = field(
        default=None, init=False, repr=False
    )

    def load_catalog(self) -> Catalog:
        with self._lock:
            if self._catalog is not None:
                return self._catalog
            catalog = self.upstream.load_catalog()
            if catalog.trains:
                self._catalog = catalog
            return catalog

    def load_passengers(self) -> tuple[Passenger, ...]:
        source = self.passengers_upstream
        if source is None:
            if not isinstance(self.upstream, IPassengerRepository):
                return ()
            source = self.upstream

        with self._lock:
            if self._passengers is not None:
                return self._passengers
            passengers = source.load_passengers()
            if passengers:
                self._passengers = passengers
            return passengers
