from .catalog import CatalogError, CatalogUnavailable, InvalidRecord

__all__ = ["CatalogError", "CatalogUnavailable", "InvalidRecord"]
