from __future__ import annotations

from abc import ABC, abstractmethod

from railfinder.domain.models import Passenger


class IPassengerRepository(ABC):
    """Port for loading passengers together with their bookings."""

    @abstractmethod
    def load_passengers(self) -> tuple[Passenger, ...]:
        raise NotImplementedError
