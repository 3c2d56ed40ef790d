from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from railfinder.domain.models import (
    PartialJourney,
    RouteSegment,
    SearchCriteria,
    StationInfo,
    Train,
)
from railfinder.domain.models.reference import DEFAULT_TRANSFER_HUBS

from .time_utils import (
    MINUTES_PER_DAY,
    clock_minutes,
    format_clock,
    format_duration,
    parse_clock,
    wrapped_difference,
)

MIN_TRANSFER_MINUTES = 45
MAX_PARTIAL_JOURNEYS = 10

# Leg lengths assumed when a stop has no scheduled time.
FALLBACK_FIRST_LEG_MINUTES = 180
FALLBACK_SECOND_LEG_MINUTES = 240


@dataclass(frozen=True, slots=True)
class _Timing:
    dep1: int
    arr1: int
    dep2: int
    arr2: int
    leg1_minutes: int
    wait_minutes: int
    leg2_minutes: int
    total_minutes: int


def stop_codes(train: Train) -> tuple[str, ...]:
    """Ordered stop codes; falls back to the endpoints when no stop list exists."""

    if train.stations:
        return tuple(s.code for s in train.stations)
    return tuple(c for c in (train.source_code, train.destination_code) if c)


def covers_segment(train: Train, boarding: StationInfo, alighting: StationInfo) -> bool:
    codes = stop_codes(train)
    try:
        i = codes.index(boarding.code)
    except ValueError:
        return False
    return alighting.code in codes[i + 1 :]


def _boarding_minutes(train: Train, code: str) -> int | None:
    for stop in train.stations:
        if stop.code == code:
            return parse_clock(stop.departure_time)
    if code == train.source_code:
        return parse_clock(train.departure_time)
    return None


def _alighting_minutes(train: Train, code: str) -> int | None:
    for stop in train.stations:
        if stop.code == code:
            return parse_clock(stop.arrival_time)
    if code == train.destination_code:
        return parse_clock(train.arrival_time)
    return None


def _scheduled_timing(
    first: Train,
    second: Train,
    origin: StationInfo,
    hub: StationInfo,
    destination: StationInfo,
    min_transfer_minutes: int,
) -> _Timing | None:
    dep1 = _boarding_minutes(first, origin.code)
    if dep1 is None:
        dep1 = clock_minutes(first.departure_time)

    arr1 = _alighting_minutes(first, hub.code)
    if arr1 is None:
        arr1 = (dep1 + FALLBACK_FIRST_LEG_MINUTES) % MINUTES_PER_DAY
    leg1 = wrapped_difference(dep1, arr1)

    dep2 = _boarding_minutes(second, hub.code)
    if dep2 is None:
        wait = min_transfer_minutes
        dep2 = (arr1 + wait) % MINUTES_PER_DAY
    else:
        wait = wrapped_difference(arr1, dep2)
        if wait < min_transfer_minutes:
            return None

    arr2 = _alighting_minutes(second, destination.code)
    if arr2 is None:
        arr2 = (dep2 + FALLBACK_SECOND_LEG_MINUTES) % MINUTES_PER_DAY
    leg2 = wrapped_difference(dep2, arr2)

    return _Timing(
        dep1=dep1,
        arr1=arr1,
        dep2=dep2,
        arr2=arr2,
        leg1_minutes=leg1,
        wait_minutes=wait,
        leg2_minutes=leg2,
        total_minutes=leg1 + wait + leg2,
    )


def _fixed_offset_timing(first: Train, min_transfer_minutes: int) -> _Timing:
    dep1 = clock_minutes(first.departure_time)
    arr1 = (dep1 + FALLBACK_FIRST_LEG_MINUTES) % MINUTES_PER_DAY
    dep2 = (arr1 + min_transfer_minutes) % MINUTES_PER_DAY
    arr2 = (dep2 + FALLBACK_SECOND_LEG_MINUTES) % MINUTES_PER_DAY
    return _Timing(
        dep1=dep1,
        arr1=arr1,
        dep2=dep2,
        arr2=arr2,
        leg1_minutes=FALLBACK_FIRST_LEG_MINUTES,
        wait_minutes=min_transfer_minutes,
        leg2_minutes=FALLBACK_SECOND_LEG_MINUTES,
        total_minutes=wrapped_difference(dep1, arr2),
    )


def _format_wait(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}m"
    return format_duration(minutes)


def common_classes(first: Train, second: Train) -> tuple[str, ...]:
    second_codes = {c.code for c in second.available_classes}
    return tuple(c.code for c in first.available_classes if c.code in second_codes)


def build_partial_journey(
    first: Train,
    second: Train,
    origin: StationInfo,
    hub: StationInfo,
    destination: StationInfo,
    *,
    min_transfer_minutes: int = MIN_TRANSFER_MINUTES,
    legacy_fixed_offsets: bool = False,
) -> PartialJourney | None:
    """Combine two trains into one itinerary; None when the transfer is too tight."""

    if legacy_fixed_offsets:
        timing: _Timing | None = _fixed_offset_timing(first, min_transfer_minutes)
    else:
        timing = _scheduled_timing(
            first, second, origin, hub, destination, min_transfer_minutes
        )
    if timing is None:
        return None

    first_leg = RouteSegment(
        train=first,
        from_station=origin,
        to_station=hub,
        departure_time=format_clock(timing.dep1),
        arrival_time=format_clock(timing.arr1),
        duration=format_duration(timing.leg1_minutes),
        available_classes=tuple(c.code for c in first.available_classes),
    )
    second_leg = RouteSegment(
        train=second,
        from_station=hub,
        to_station=destination,
        departure_time=format_clock(timing.dep2),
        arrival_time=format_clock(timing.arr2),
        duration=format_duration(timing.leg2_minutes),
        available_classes=tuple(c.code for c in second.available_classes),
        is_transfer=True,
        transfer_time=_format_wait(timing.wait_minutes),
    )

    return PartialJourney(
        train=first,
        from_station=origin,
        to_station=destination,
        intermediate_station=hub,
        departure_time=first_leg.departure_time,
        arrival_time=second_leg.arrival_time,
        total_duration=format_duration(timing.total_minutes),
        total_minutes=timing.total_minutes,
        route_segments=(first_leg, second_leg),
        available_classes=common_classes(first, second),
        transfer_count=1,
    )


def find_partial_journeys(
    criteria: SearchCriteria,
    trains: Iterable[Train],
    *,
    hubs: Sequence[StationInfo] = DEFAULT_TRANSFER_HUBS,
    min_transfer_minutes: int = MIN_TRANSFER_MINUTES,
    limit: int = MAX_PARTIAL_JOURNEYS,
    legacy_fixed_offsets: bool = False,
) -> list[PartialJourney]:
    """Find one-transfer itineraries through the given hub stations.

    Results are ranked by total duration, then transfer count, and truncated
    to `limit`.
    """

    origin = criteria.from_station
    destination = criteria.to_station
    if origin is None or destination is None:
        return []

    catalog = list(trains)
    journeys: list[PartialJourney] = []

    for hub in hubs:
        if hub.code in {origin.code, destination.code}:
            continue

        first_legs = [t for t in catalog if covers_segment(t, origin, hub)]
        if not first_legs:
            continue
        second_legs = [t for t in catalog if covers_segment(t, hub, destination)]

        for first in first_legs:
            for second in second_legs:
                if first.train_number == second.train_number:
                    continue
                journey = build_partial_journey(
                    first,
                    second,
                    origin,
                    hub,
                    destination,
                    min_transfer_minutes=min_transfer_minutes,
                    legacy_fixed_offsets=legacy_fixed_offsets,
                )
                if journey is not None:
                    journeys.append(journey)

    journeys.sort(key=lambda j: (j.total_minutes, j.transfer_count))
    return journeys[: max(0, int(limit))]
