from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .station import RouteStop

# Sunday-first, matching the weekday codes used in running-day data.
WEEKDAY_CODES: tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")


class ClassStatus(str, Enum):
    AVAILABLE = "available"
    WAITING = "waiting"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class TrainClassAvailability:
    code: str
    name: str
    fare: float
    available_seats: int
    status: ClassStatus
    waiting_list: int | None = None

    @staticmethod
    def derive_status(available_seats: int) -> ClassStatus:
        # waiting_list never promotes a class to WAITING; only seat count matters.
        return ClassStatus.AVAILABLE if available_seats > 0 else ClassStatus.FULL


@dataclass(frozen=True, slots=True)
class Train:
    """A scheduled train as loaded from the catalog.

    source/destination are display names; source_code/destination_code are
    resolved by the loader and are None when no code could be determined.
    """

    train_number: str
    train_name: str
    source: str
    destination: str
    departure_time: str
    arrival_time: str
    duration: str
    running_days: frozenset[str] = frozenset()
    available_classes: tuple[TrainClassAvailability, ...] = field(
        default_factory=tuple
    )
    stations: tuple[RouteStop, ...] = field(default_factory=tuple)
    source_code: str | None = None
    destination_code: str | None = None

    def class_by_code(self, code: str) -> TrainClassAvailability | None:
        return next((c for c in self.available_classes if c.code == code), None)
