from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StationInfo:
    code: str
    name: str


@dataclass(frozen=True, slots=True)
class RouteStop:
    """One entry of a train's ordered stop list.

    Times are "HH:MM" local clock strings; the origin has no arrival time and
    the terminus has no departure time.
    """

    code: str
    name: str
    arrival_time: str | None = None
    departure_time: str | None = None
    distance: float = 0.0

    @property
    def station(self) -> StationInfo:
        return StationInfo(code=self.code, name=self.name)
