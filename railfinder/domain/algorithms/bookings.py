from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Literal

from railfinder.domain.models import PNRStatus

BookingSortKey = Literal["date", "fare", "status"]


def _journey_day(status: PNRStatus) -> date:
    try:
        return date.fromisoformat(status.journey_date[:10])
    except (TypeError, ValueError):
        return date.min


def sort_bookings(
    bookings: Iterable[PNRStatus], key: BookingSortKey | str
) -> list[PNRStatus]:
    """Newest journey first for `date`, highest first for `fare`, A-Z for `status`.

    Unknown keys and unparsable dates never raise.
    """

    items = list(bookings)
    orderings: dict[str, Callable[[], list[PNRStatus]]] = {
        "date": lambda: sorted(items, key=_journey_day, reverse=True),
        "fare": lambda: sorted(items, key=lambda b: b.fare, reverse=True),
        "status": lambda: sorted(items, key=lambda b: b.status.lower()),
    }
    ordering = orderings.get(key)
    return ordering() if ordering else items


def filter_bookings_by_status(
    bookings: Iterable[PNRStatus], status: str
) -> list[PNRStatus]:
    wanted = status.strip().lower()
    return [b for b in bookings if b.status.lower() == wanted]


def search_bookings(bookings: Iterable[PNRStatus], term: str) -> list[PNRStatus]:
    needle = term.strip().lower()
    if not needle:
        return list(bookings)

    def matches(b: PNRStatus) -> bool:
        haystack = (
            b.pnr,
            b.train_name,
            b.train_number,
            b.from_station_name,
            b.to_station_name,
            b.passenger.name,
        )
        return any(needle in (value or "").lower() for value in haystack)

    return [b for b in bookings if matches(b)]
