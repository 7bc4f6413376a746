from dataclasses import asdict
from urllib.parse import unquote

from fastapi import APIRouter, Depends, Query

from ..catalog import get_catalog
from ..core.config import MAX_VISIBLE_PAGES, PAGE_SIZE
from ..schemas import TagPageOut, TagsOut
from ..services.catalog_query import CatalogService
from ..services.pagination import build_listing, page_offset
from ..services.slugs import decode_tag_slug, tag_href, tag_slug

router = APIRouter()


@router.get("", response_model=TagsOut)
def list_tags(catalog: CatalogService = Depends(get_catalog)):
    index = catalog.tag_index()
    return {
        "tags": [
            {"name": name, "count": index[name].count, "href": tag_href(name)}
            for name in sorted(index)
        ],
        "popular": [asdict(item) for item in catalog.popular_tags()],
        "popular_categories": [asdict(item) for item in catalog.popular_categories()],
    }


@router.get("/{slug}", response_model=TagPageOut)
def tag_page(
    slug: str,
    page: int = Query(1, ge=1),
    catalog: CatalogService = Depends(get_catalog),
):
    tag_name = decode_tag_slug(slug)
    result = catalog.by_tag(tag_name, limit=PAGE_SIZE, offset=page_offset(page, PAGE_SIZE))
    if result.total == 0 and "-" in slug:
        # Tags stored with dashes keep them in their slug.
        raw_name = unquote(slug)
        raw_result = catalog.by_tag(raw_name, limit=PAGE_SIZE, offset=page_offset(page, PAGE_SIZE))
        if raw_result.total:
            tag_name, result = raw_name, raw_result
    payload = build_listing(result.games, result.total, page, PAGE_SIZE, MAX_VISIBLE_PAGES)
    payload.update(
        {
            "tag": tag_name,
            "slug": tag_slug(tag_name),
            "related_tags": catalog.related_tags(tag_name) if result.total else [],
            "popular_categories": catalog.popular_categories_for_tag(tag_name),
        }
    )
    return payload
