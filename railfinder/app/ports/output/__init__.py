from .catalog_repository import ICatalogRepository
from .passenger_repository import IPassengerRepository

__all__ = [
    "ICatalogRepository",
    "IPassengerRepository",
]
