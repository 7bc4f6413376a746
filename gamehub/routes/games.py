from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..catalog import get_catalog
from ..core.config import MAX_VISIBLE_PAGES, PAGE_SIZE, SEARCH_RESULTS_LIMIT
from ..schemas import GameDetailOut, GameRecord, HomePageOut, SearchPageOut
from ..services.catalog_query import CatalogService
from ..services.pagination import build_listing, page_offset
from ..services.slugs import category_slug, game_slug

router = APIRouter()


@router.get("/home", response_model=HomePageOut)
def home(catalog: CatalogService = Depends(get_catalog)):
    page = catalog.home_page()
    return {"featured": page.featured, "games": page.games, "total": page.total}


@router.get("/search", response_model=SearchPageOut)
def search_games(
    q: str = Query("", max_length=200),
    page: int = Query(1, ge=1),
    catalog: CatalogService = Depends(get_catalog),
):
    result = catalog.search(q, limit=PAGE_SIZE, offset=page_offset(page, PAGE_SIZE))
    payload = build_listing(result.games, result.total, page, PAGE_SIZE, MAX_VISIBLE_PAGES)
    payload["query"] = q
    return payload


@router.get("/search/suggest", response_model=List[GameRecord])
def suggest_games(
    q: str = Query("", max_length=200),
    limit: int = Query(SEARCH_RESULTS_LIMIT, ge=1, le=SEARCH_RESULTS_LIMIT),
    catalog: CatalogService = Depends(get_catalog),
):
    return catalog.suggest(q, limit=limit)


@router.get("/recommended", response_model=List[GameRecord])
def recommended_games(catalog: CatalogService = Depends(get_catalog)):
    return catalog.recommended_games()


@router.get("/{game_id}", response_model=GameDetailOut)
def get_game(game_id: str, catalog: CatalogService = Depends(get_catalog)):
    game = catalog.get_game(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return {
        "game": game,
        "slug": game_slug(game.title),
        "tags": game.tag_list,
        "category_slug": category_slug(game.category),
        "related": catalog.related_games(game.id),
    }
