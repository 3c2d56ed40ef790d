from __future__ import annotations

from dataclasses import dataclass, field

from .station import StationInfo
from .train import Train


@dataclass(frozen=True, slots=True)
class RouteSegment:
    train: Train
    from_station: StationInfo
    to_station: StationInfo
    departure_time: str
    arrival_time: str
    duration: str
    available_classes: tuple[str, ...] = ()
    is_transfer: bool = False
    transfer_time: str | None = None


@dataclass(frozen=True, slots=True)
class PartialJourney:
    """Two trains joined at an intermediate station.

    `train` is the first leg, kept as the primary reference for display.
    """

    train: Train
    from_station: StationInfo
    to_station: StationInfo
    intermediate_station: StationInfo
    departure_time: str
    arrival_time: str
    total_duration: str
    total_minutes: int
    route_segments: tuple[RouteSegment, ...] = field(default_factory=tuple)
    available_classes: tuple[str, ...] = ()
    transfer_count: int = 1
    is_partial_route: bool = True

    @property
    def duration(self) -> str:
        return self.total_duration
