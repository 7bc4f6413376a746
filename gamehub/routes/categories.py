from fastapi import APIRouter, Depends, Query

from ..catalog import get_catalog
from ..core.config import MAX_VISIBLE_PAGES, PAGE_SIZE
from ..schemas import CategoriesOut, CategoryPageOut
from ..services.catalog_query import CatalogService
from ..services.pagination import build_listing, page_offset
from ..services.slugs import category_slug

router = APIRouter()


@router.get("", response_model=CategoriesOut)
def list_categories(catalog: CatalogService = Depends(get_catalog)):
    buckets = catalog.category_overview()
    return {
        "categories": [
            {
                "name": bucket.name,
                "slug": category_slug(bucket.name),
                "count": bucket.count,
                "preview": [
                    {"id": game.id, "title": game.title, "thumb": game.thumb, "category": game.category}
                    for game in bucket.games
                ],
            }
            for bucket in buckets
        ],
        "total_games": len(catalog.games()),
    }


@router.get("/{name}", response_model=CategoryPageOut)
def category_page(
    name: str,
    page: int = Query(1, ge=1),
    catalog: CatalogService = Depends(get_catalog),
):
    # Slugs replace spaces with dashes; a category stored with dashes still matches as-is.
    result = catalog.by_category(name, limit=PAGE_SIZE, offset=page_offset(page, PAGE_SIZE))
    if result.total == 0 and "-" in name:
        result = catalog.by_category(name.replace("-", " "), limit=PAGE_SIZE, offset=page_offset(page, PAGE_SIZE))
    payload = build_listing(result.games, result.total, page, PAGE_SIZE, MAX_VISIBLE_PAGES)
    payload.update(
        {
            "category": result.games[0].category if result.games else name,
            "slug": category_slug(name),
            "all_categories": catalog.all_categories(),
        }
    )
    return payload
