import logging

from fastapi import APIRouter, Depends

from ..catalog import get_catalog
from ..schemas import HealthOut
from ..services.catalog_query import CatalogService
from .deps import require_admin_access

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/status", response_model=HealthOut)
def catalog_status(catalog: CatalogService = Depends(get_catalog)):
    games = catalog.games()
    return {
        "status": "ok" if games else "empty",
        "games": len(games),
        "cache_age_seconds": catalog.store.cache_age(),
    }


@router.post("/invalidate", response_model=HealthOut)
def invalidate_catalog(
    catalog: CatalogService = Depends(get_catalog),
    _: object = Depends(require_admin_access),
):
    catalog.invalidate()
    games = catalog.games()
    logger.info("catalog cache invalidated; reloaded %d games", len(games))
    return {
        "status": "ok" if games else "empty",
        "games": len(games),
        "cache_age_seconds": catalog.store.cache_age(),
    }
