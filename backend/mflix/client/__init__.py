from .api import CatalogClient
from .browser import CatalogBrowser, SORT_OPTIONS, Status

__all__ = ["CatalogClient", "CatalogBrowser", "SORT_OPTIONS", "Status"]
