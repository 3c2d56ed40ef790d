from __future__ import annotations

from abc import ABC, abstractmethod

from railfinder.domain.models import Catalog


class ICatalogRepository(ABC):
    """Port for loading the train and station catalog into memory."""

    @abstractmethod
    def load_catalog(self) -> Catalog:
        raise NotImplementedError
