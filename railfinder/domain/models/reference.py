from __future__ import annotations

from dataclasses import dataclass

from .station import StationInfo


@dataclass(frozen=True, slots=True)
class CodeEntry:
    code: str
    name: str


TRAVEL_CLASSES: tuple[CodeEntry, ...] = (
    CodeEntry("SL", "Sleeper (SL)"),
    CodeEntry("3A", "AC 3 Tier (3A)"),
    CodeEntry("2A", "AC 2 Tier (2A)"),
    CodeEntry("1A", "AC First Class (1A)"),
    CodeEntry("2S", "Second Sitting (2S)"),
    CodeEntry("CC", "Chair Car (CC)"),
    CodeEntry("EC", "Executive Chair Car (EC)"),
    CodeEntry("3E", "Third AC Economy (3E)"),
)

QUOTAS: tuple[CodeEntry, ...] = (
    CodeEntry("GN", "General"),
    CodeEntry("TQ", "Tatkal"),
    CodeEntry("LD", "Ladies"),
    CodeEntry("SS", "Senior Citizen"),
    CodeEntry("PH", "Divyaang"),
    CodeEntry("DF", "Duty Pass"),
)

# Served when stations.json cannot be loaded.
DEFAULT_STATIONS: tuple[StationInfo, ...] = (
    StationInfo("NDLS", "New Delhi"),
    StationInfo("MMCT", "Mumbai Central"),
    StationInfo("MAS", "Chennai Central"),
    StationInfo("HWH", "Howrah"),
    StationInfo("CSMT", "Chhatrapati Shivaji Maharaj Terminus"),
    StationInfo("SBC", "Bangalore City"),
    StationInfo("HYB", "Hyderabad Deccan"),
    StationInfo("PUNE", "Pune Junction"),
    StationInfo("AMD", "Ahmedabad Junction"),
    StationInfo("JAT", "Jammu Tawi"),
    StationInfo("VSKP", "Visakhapatnam"),
    StationInfo("KOL", "Kolkata"),
    StationInfo("TVC", "Trivandrum Central"),
    StationInfo("PNBE", "Patna Junction"),
    StationInfo("BBS", "Bhubaneswar"),
    StationInfo("RNC", "Ranchi Junction"),
    StationInfo("GWL", "Gwalior Junction"),
    StationInfo("JBP", "Jabalpur Junction"),
    StationInfo("INDB", "Indore Junction"),
    StationInfo("UJN", "Ujjain Junction"),
)

# Fixed interchange set for connecting journeys.
DEFAULT_TRANSFER_HUBS: tuple[StationInfo, ...] = (
    StationInfo("AMD", "Ahmedabad Junction"),
    StationInfo("PUNE", "Pune Junction"),
    StationInfo("GWL", "Gwalior Junction"),
    StationInfo("JBP", "Jabalpur Junction"),
)


def is_known_class(code: str) -> bool:
    return any(c.code == code for c in TRAVEL_CLASSES)


def is_known_quota(code: str) -> bool:
    return any(q.code == code for q in QUOTAS)
