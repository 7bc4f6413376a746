from .core.config import CATALOG_CACHE_TTL_SECONDS, CATALOG_FEED_PATH
from .services.catalog_query import CatalogService
from .services.catalog_store import CatalogStore

catalog_store = CatalogStore(CATALOG_FEED_PATH, ttl_seconds=CATALOG_CACHE_TTL_SECONDS)
catalog_service = CatalogService(catalog_store)


def get_catalog() -> CatalogService:
    return catalog_service
