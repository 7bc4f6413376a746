from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..core.config import (
    CATEGORY_PREVIEW_SIZE,
    HOME_GRID_SIZE,
    MAX_404_RECOMMENDED_GAMES,
    MAX_RELATED_GAMES,
    POPULAR_LIMIT,
    RELATED_TAGS_LIMIT,
    SEARCH_RESULTS_LIMIT,
    TAG_PAGE_CATEGORY_LIMIT,
)
from ..schemas import GameRecord
from .catalog_store import Catalog, CatalogStore
from .slugs import tag_href

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class QueryPage:
    games: List[GameRecord]
    total: int


@dataclass
class GroupBucket:
    name: str
    count: int = 0
    games: List[GameRecord] = field(default_factory=list)


@dataclass(frozen=True)
class TagCount:
    name: str
    count: int
    href: str


@dataclass(frozen=True)
class CategoryCount:
    name: str
    count: int


@dataclass(frozen=True)
class HomePage:
    featured: Optional[GameRecord]
    games: List[GameRecord]
    total: int


def slice_matches(matches: List[GameRecord], limit: Optional[int] = None, offset: int = 0) -> QueryPage:
    total = len(matches)
    if limit is None:
        return QueryPage(games=matches, total=total)
    start = max(0, int(offset or 0))
    return QueryPage(games=matches[start : start + max(0, int(limit))], total=total)


def matches_query(game: GameRecord, needle: str) -> bool:
    return (
        needle in game.title.lower()
        or needle in game.description.lower()
        or needle in game.category.lower()
        or needle in game.tags.lower()
    )


def group_by_category(games: Iterable[GameRecord]) -> Dict[str, GroupBucket]:
    index: Dict[str, GroupBucket] = {}
    for game in games:
        name = game.category or UNCATEGORIZED
        bucket = index.setdefault(name, GroupBucket(name=name))
        bucket.count += 1
        bucket.games.append(game)
    return index


def group_by_tag(games: Iterable[GameRecord]) -> Dict[str, GroupBucket]:
    index: Dict[str, GroupBucket] = {}
    for game in games:
        for tag in game.tag_list:
            bucket = index.setdefault(tag, GroupBucket(name=tag))
            bucket.count += 1
            bucket.games.append(game)
    return index


def _ranked(counts: Counter, limit: int) -> List[tuple]:
    # Counter keeps first-seen order and sorted() is stable, so ties stay in feed order.
    return sorted(counts.items(), key=lambda row: row[1], reverse=True)[: max(0, limit)]


class CatalogService:
    """Read-only queries over the cached catalog.

    Each call takes one snapshot from the store up front and works only on
    that tuple, so a reload in between never mixes two catalogs.
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def games(self) -> Catalog:
        return self.store.load_catalog()

    def invalidate(self) -> None:
        self.store.invalidate()

    # Categories

    def by_category(self, name: str, limit: Optional[int] = None, offset: int = 0) -> QueryPage:
        wanted = str(name or "").lower()
        matches = [game for game in self.games() if game.category and game.category.lower() == wanted]
        return slice_matches(matches, limit, offset)

    def all_categories(self) -> List[str]:
        return sorted({game.category for game in self.games() if game.category})

    def category_index(self) -> Dict[str, GroupBucket]:
        return group_by_category(self.games())

    def category_overview(self, preview_size: int = CATEGORY_PREVIEW_SIZE) -> List[GroupBucket]:
        buckets = sorted(self.category_index().values(), key=lambda bucket: bucket.count, reverse=True)
        return [
            GroupBucket(name=bucket.name, count=bucket.count, games=bucket.games[:preview_size])
            for bucket in buckets
        ]

    def popular_categories(self, limit: int = POPULAR_LIMIT) -> List[CategoryCount]:
        counts: Counter = Counter()
        for game in self.games():
            counts[game.category or UNCATEGORIZED] += 1
        return [CategoryCount(name=name, count=count) for name, count in _ranked(counts, limit)]

    # Tags

    def by_tag(self, name: str, limit: Optional[int] = None, offset: int = 0) -> QueryPage:
        wanted = str(name or "").lower()
        matches = [
            game for game in self.games() if wanted in (tag.lower() for tag in game.tag_list)
        ]
        return slice_matches(matches, limit, offset)

    def all_tags(self) -> List[str]:
        tags = set()
        for game in self.games():
            tags.update(game.tag_list)
        return sorted(tags)

    def tag_index(self) -> Dict[str, GroupBucket]:
        return group_by_tag(self.games())

    def popular_tags(self, limit: int = POPULAR_LIMIT) -> List[TagCount]:
        counts: Counter = Counter()
        for game in self.games():
            counts.update(game.tag_list)
        return [
            TagCount(name=name, count=count, href=tag_href(name)) for name, count in _ranked(counts, limit)
        ]

    def related_tags(self, name: str, limit: int = RELATED_TAGS_LIMIT) -> List[str]:
        wanted = str(name or "").lower()
        return [tag for tag in self.all_tags() if tag.lower() != wanted][: max(0, limit)]

    def popular_categories_for_tag(self, name: str, limit: int = TAG_PAGE_CATEGORY_LIMIT) -> List[str]:
        counts: Counter = Counter()
        for game in self.by_tag(name).games:
            if game.category:
                counts[game.category] += 1
        return [category for category, _ in _ranked(counts, limit)]

    # Search

    def search(self, query: str, limit: Optional[int] = None, offset: int = 0) -> QueryPage:
        query = query or ""
        if not query.strip():
            return QueryPage(games=[], total=0)
        needle = query.lower()
        matches = [game for game in self.games() if matches_query(game, needle)]
        return slice_matches(matches, limit, offset)

    def suggest(self, query: str, limit: int = SEARCH_RESULTS_LIMIT) -> List[GameRecord]:
        query = query or ""
        if not query.strip() or limit <= 0:
            return []
        needle = query.lower()
        results: List[GameRecord] = []
        for game in self.games():
            if matches_query(game, needle):
                results.append(game)
                if len(results) >= limit:
                    break
        return results

    # Lookup

    def get_game(self, game_id: str) -> Optional[GameRecord]:
        for game in self.games():
            if game.id == game_id:
                return game
        return None

    def related_games(self, game_id: str, limit: int = MAX_RELATED_GAMES) -> List[GameRecord]:
        catalog = self.games()
        if not any(item.id == game_id for item in catalog):
            return []
        return [item for item in catalog if item.id != game_id][: max(0, limit)]

    def home_page(self, grid_size: int = HOME_GRID_SIZE) -> HomePage:
        catalog = self.games()
        if not catalog:
            return HomePage(featured=None, games=[], total=0)
        featured = catalog[0]
        grid = [game for game in catalog if game.id != featured.id][: max(0, grid_size)]
        return HomePage(featured=featured, games=grid, total=len(catalog))

    def recommended_games(self, limit: int = MAX_404_RECOMMENDED_GAMES) -> List[GameRecord]:
        return list(self.games()[: max(0, limit)])
