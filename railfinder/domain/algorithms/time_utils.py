from __future__ import annotations

import re

MINUTES_PER_DAY = 24 * 60

_DURATION_RE = re.compile(r"(\d+)h\s*(\d+)m")


def clock_minutes(raw: str | None) -> int:
    """Minutes since midnight for an "HH:MM" string; malformed input yields 0."""

    if not raw:
        return 0
    try:
        hh, mm = raw.strip().split(":")[:2]
        return int(hh) * 60 + int(mm)
    except (AttributeError, ValueError):
        return 0


def parse_clock(raw: str | None) -> int | None:
    """Like clock_minutes but returns None when the value cannot be parsed."""

    if not raw:
        return None
    parts = raw.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]) * 60 + int(parts[1])
    except ValueError:
        return None


def format_clock(minutes: int) -> str:
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_minutes(raw: str | None) -> int:
    """Parse "<h>h <m>m"; anything unparsable counts as zero."""

    if not raw:
        return 0
    match = _DURATION_RE.search(raw)
    if match is None:
        return 0
    return int(match.group(1)) * 60 + int(match.group(2))


def format_duration(minutes: int) -> str:
    minutes = max(0, int(minutes))
    return f"{minutes // 60}h {minutes % 60:02d}m"


def wrapped_difference(start: int, end: int) -> int:
    # Arrival clock before departure clock means the next day.
    delta = end - start
    if delta < 0:
        delta += MINUTES_PER_DAY
    return delta


def day_offset(departure: str, arrival: str) -> int:
    """1 for same-day arrival, 2 when the arrival clock precedes departure."""

    return 2 if clock_minutes(arrival) < clock_minutes(departure) else 1
