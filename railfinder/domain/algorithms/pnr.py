from __future__ import annotations

from typing import Iterable, Sequence

from railfinder.domain.models import (
    Booking,
    Passenger,
    PassengerSummary,
    PNRStatus,
    StationInfo,
    Train,
)

UNKNOWN_TRAIN = "Unknown Train"


def _train_name(trains: Iterable[Train], train_number: str) -> str:
    train = next((t for t in trains if t.train_number == train_number), None)
    return train.train_name if train else UNKNOWN_TRAIN


def _station_name(stations: Iterable[StationInfo], code: str) -> str:
    station = next((s for s in stations if s.code == code), None)
    return station.name if station and station.name else code


def project_booking(
    passenger: Passenger,
    booking: Booking,
    trains: Sequence[Train],
    stations: Sequence[StationInfo],
) -> PNRStatus:
    return PNRStatus(
        pnr=booking.pnr,
        train_number=booking.train_number,
        train_name=_train_name(trains, booking.train_number),
        journey_date=booking.journey_date,
        from_code=booking.from_code,
        to_code=booking.to_code,
        from_station_name=_station_name(stations, booking.from_code),
        to_station_name=_station_name(stations, booking.to_code),
        class_code=booking.class_code,
        seat_number=booking.seat_number,
        fare=booking.fare,
        status=booking.status,
        passenger=PassengerSummary(
            name=passenger.name, age=passenger.age, gender=passenger.gender
        ),
    )


def lookup_pnr(
    pnr: str,
    passengers: Iterable[Passenger],
    trains: Sequence[Train],
    stations: Sequence[StationInfo],
) -> PNRStatus | None:
    """Resolve a PNR; the first booking in traversal order wins."""

    for passenger in passengers:
        for booking in passenger.bookings:
            if booking.pnr == pnr:
                return project_booking(passenger, booking, trains, stations)
    return None


def get_all_bookings(
    passengers: Iterable[Passenger],
    trains: Sequence[Train],
    stations: Sequence[StationInfo],
) -> list[PNRStatus]:
    return [
        project_booking(passenger, booking, trains, stations)
        for passenger in passengers
        for booking in passenger.bookings
    ]
