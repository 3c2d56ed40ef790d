from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Booking:
    pnr: str
    train_number: str
    journey_date: str
    from_code: str
    to_code: str
    class_code: str
    seat_number: str | None = None
    fare: float = 0.0
    status: str = ""


@dataclass(frozen=True, slots=True)
class Passenger:
    id: str
    name: str
    age: int | None = None
    gender: str | None = None
    mobile: str | None = None
    email: str | None = None
    address: str | None = None
    bookings: tuple[Booking, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PassengerSummary:
    name: str
    age: int | None = None
    gender: str | None = None


@dataclass(frozen=True, slots=True)
class PNRStatus:
    """Read-only projection of a booking joined with catalog names."""

    pnr: str
    train_number: str
    train_name: str
    journey_date: str
    from_code: str
    to_code: str
    from_station_name: str
    to_station_name: str
    class_code: str
    seat_number: str | None
    fare: float
    status: str
    passenger: PassengerSummary
