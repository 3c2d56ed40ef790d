from .booking import Booking, Passenger, PassengerSummary, PNRStatus
from .catalog import Catalog
from .journey import PartialJourney, RouteSegment
from .search import SearchCriteria, SortKey
from .station import RouteStop, StationInfo
from .train import WEEKDAY_CODES, ClassStatus, Train, TrainClassAvailability

__all__ = [
    "Booking",
    "Catalog",
    "ClassStatus",
    "PartialJourney",
    "Passenger",
    "PassengerSummary",
    "PNRStatus",
    "RouteSegment",
    "RouteStop",
    "SearchCriteria",
    "SortKey",
    "StationInfo",
    "Train",
    "TrainClassAvailability",
    "WEEKDAY_CODES",
]
