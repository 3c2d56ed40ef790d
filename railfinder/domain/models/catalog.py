from __future__ import annotations

from dataclasses import dataclass, field

from .station import StationInfo
from .train import Train


@dataclass(frozen=True, slots=True)
class Catalog:
    """In-memory snapshot of trains and stations, loaded once per process."""

    trains: tuple[Train, ...] = field(default_factory=tuple)
    stations: tuple[StationInfo, ...] = field(default_factory=tuple)

    def train_by_number(self, train_number: str) -> Train | None:
        return next((t for t in self.trains if t.train_number == train_number), None)

    def station_by_code(self, code: str) -> StationInfo | None:
        return next((s for s in self.stations if s.code == code), None)
