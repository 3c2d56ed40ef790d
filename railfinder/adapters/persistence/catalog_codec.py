from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from railfinder.domain.exceptions import InvalidRecord
from railfinder.domain.models import (
    Booking,
    Passenger,
    RouteStop,
    StationInfo,
    Train,
    TrainClassAvailability,
)

logger = logging.getLogger(__name__)


def _text(raw: Mapping[str, Any], *keys: str, default: str | None = None) -> str:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return str(value).strip()
    if default is not None:
        return default
    raise InvalidRecord(f"Missing field: {keys[0]}")


def _optional_text(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return str(value).strip() or None


def _non_negative_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def _non_negative_float(value: Any) -> float:
    try:
        return max(0.0, float(value))
    except (TypeError, ValueError):
        return 0.0


def _array(raw: Mapping[str, Any], key: str) -> list[Any] | tuple[Any, ...]:
    # Strings are iterable too; only real arrays are accepted.
    value = raw.get(key)
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise InvalidRecord(f"Field {key} must be an array")
    return value


def decode_station(raw: Mapping[str, Any]) -> StationInfo:
    return StationInfo(code=_text(raw, "code"), name=_text(raw, "name"))


def decode_class(raw: Mapping[str, Any]) -> TrainClassAvailability:
    # Raw data uses classCode/className; the domain only knows code/name.
    seats = _non_negative_int(raw.get("availableSeats"))
    waiting = raw.get("waitingList")
    return TrainClassAvailability(
        code=_text(raw, "classCode", "code"),
        name=_text(raw, "className", "name", default=""),
        fare=_non_negative_float(raw.get("fare")),
        available_seats=seats,
        status=TrainClassAvailability.derive_status(seats),
        waiting_list=_non_negative_int(waiting) if waiting is not None else None,
    )


def decode_stop(raw: Mapping[str, Any]) -> RouteStop:
    return RouteStop(
        code=_text(raw, "code"),
        name=_text(raw, "name", default=""),
        arrival_time=_optional_text(raw, "arrivalTime"),
        departure_time=_optional_text(raw, "departureTime"),
        distance=_non_negative_float(raw.get("distance")),
    )


def _unique_classes(
    classes: Iterable[TrainClassAvailability],
) -> tuple[TrainClassAvailability, ...]:
    seen: set[str] = set()
    out: list[TrainClassAvailability] = []
    for c in classes:
        if c.code in seen:
            continue
        seen.add(c.code)
        out.append(c)
    return tuple(out)


def decode_train(
    raw: Mapping[str, Any], stations: Iterable[StationInfo] = ()
) -> Train:
    try:
        stops = tuple(decode_stop(s) for s in _array(raw, "stations"))
        classes = _unique_classes(
            decode_class(c) for c in _array(raw, "availableClasses")
        )
        running_days = frozenset(
            str(d).strip().upper() for d in _array(raw, "runningDays")
        )
        source = _text(raw, "source")
        destination = _text(raw, "destination")
    except (AttributeError, TypeError) as exc:
        raise InvalidRecord(f"Malformed train record: {exc}") from exc

    by_name = {s.name: s.code for s in stations}
    source_code = stops[0].code if stops else by_name.get(source)
    destination_code = stops[-1].code if stops else by_name.get(destination)

    return Train(
        train_number=_text(raw, "trainNumber"),
        train_name=_text(raw, "trainName", default=""),
        source=source,
        destination=destination,
        departure_time=_text(raw, "departureTime", default=""),
        arrival_time=_text(raw, "arrivalTime", default=""),
        duration=_text(raw, "duration", default=""),
        running_days=running_days,
        available_classes=classes,
        stations=stops,
        source_code=source_code,
        destination_code=destination_code,
    )


def decode_booking(raw: Mapping[str, Any]) -> Booking:
    return Booking(
        pnr=_text(raw, "pnr"),
        train_number=_text(raw, "trainNumber", default=""),
        journey_date=_text(raw, "journeyDate", default=""),
        from_code=_text(raw, "from", default=""),
        to_code=_text(raw, "to", default=""),
        class_code=_text(raw, "classCode", default=""),
        seat_number=_optional_text(raw, "seatNumber"),
        fare=_non_negative_float(raw.get("fare")),
        status=_text(raw, "status", default=""),
    )


def decode_passenger(raw: Mapping[str, Any]) -> Passenger:
    try:
        bookings = tuple(decode_booking(b) for b in _array(raw, "bookings"))
    except (AttributeError, TypeError) as exc:
        raise InvalidRecord(f"Malformed booking record: {exc}") from exc

    age = raw.get("age")
    return Passenger(
        id=_text(raw, "id", default=""),
        name=_text(raw, "name", default=""),
        age=_non_negative_int(age) if age is not None else None,
        gender=_optional_text(raw, "gender"),
        mobile=_optional_text(raw, "mobile"),
        email=_optional_text(raw, "email"),
        address=_optional_text(raw, "address"),
        bookings=bookings,
    )


def _decode_all(document: Any, decode, label: str) -> list:
    if not isinstance(document, list):
        raise InvalidRecord(f"Expected a JSON array of {label}")

    out = []
    for i, raw in enumerate(document):
        if not isinstance(raw, Mapping):
            logger.warning("Skipping non-object %s record at index %d", label, i)
            continue
        try:
            out.append(decode(raw))
        except InvalidRecord as exc:
            logger.warning("Skipping %s record at index %d: %s", label, i, exc)
    return out


def decode_stations(document: Any) -> tuple[StationInfo, ...]:
    return tuple(_decode_all(document, decode_station, "stations"))


def decode_trains(
    document: Any, stations: Iterable[StationInfo] = ()
) -> tuple[Train, ...]:
    known = tuple(stations)
    return tuple(
        _decode_all(document, lambda raw: decode_train(raw, known), "trains")
    )


def decode_passengers(document: Any) -> tuple[Passenger, ...]:
    return tuple(_decode_all(document, decode_passenger, "passengers"))
