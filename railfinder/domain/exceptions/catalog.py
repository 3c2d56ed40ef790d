class CatalogError(Exception):
    """Base exception for catalog and passenger data failures."""


class CatalogUnavailable(CatalogError):
    """Raised when a data document cannot be read at all."""


class InvalidRecord(CatalogError):
    """Raised when a single raw record cannot be decoded."""
