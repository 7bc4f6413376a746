"""Catalog loading, querying and listing helpers."""

from .catalog_query import CatalogService, QueryPage
from .catalog_store import CatalogSnapshot, CatalogStore

__all__ = ["CatalogService", "CatalogSnapshot", "CatalogStore", "QueryPage"]
