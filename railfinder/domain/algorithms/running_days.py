from __future__ import annotations

from datetime import date, datetime, timedelta

from railfinder.domain.models.train import WEEKDAY_CODES, Train

FLEXIBLE_WINDOW_DAYS = 3


def as_calendar_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_code(day: date | datetime) -> str:
    # date.weekday() is Monday-first; running-day codes are Sunday-first.
    return WEEKDAY_CODES[(as_calendar_date(day).weekday() + 1) % 7]


def is_running_on_date(train: Train, day: date | datetime) -> bool:
    return weekday_code(day) in train.running_days


def expand_search_window(base: date | datetime, flexible: bool) -> list[date]:
    day = as_calendar_date(base)
    if not flexible:
        return [day]
    return [
        day + timedelta(days=offset)
        for offset in range(-FLEXIBLE_WINDOW_DAYS, FLEXIBLE_WINDOW_DAYS + 1)
    ]


def available_dates_for_train(
    train: Train, base: date | datetime, flexible: bool
) -> list[date]:
    """Dates of the search window on which the train runs, ascending."""

    return [
        d for d in expand_search_window(base, flexible) if is_running_on_date(train, d)
    ]
