from __future__ import annotations

import math
from typing import Callable, Iterable

from railfinder.domain.models import SortKey, Train

from .time_utils import clock_minutes, duration_minutes


def min_fare(train: Train) -> float:
    # A train without classes has no fare and must sort after every priced one.
    fares = [c.fare for c in train.available_classes]
    return min(fares) if fares else math.inf


_SORT_KEYS: dict[str, Callable[[Train], float]] = {
    "departure": lambda t: clock_minutes(t.departure_time),
    "arrival": lambda t: clock_minutes(t.arrival_time),
    "duration": lambda t: duration_minutes(t.duration),
    "fare": min_fare,
}


def sort_trains(trains: Iterable[Train], key: SortKey | str) -> list[Train]:
    """Stable ascending sort; an unknown key leaves the input order intact."""

    key_fn = _SORT_KEYS.get(key)
    if key_fn is None:
        return list(trains)
    return sorted(trains, key=key_fn)
