from typing import List, Optional, Union

from pydantic import BaseModel, field_validator

_TEXT_FIELDS = (
    "id",
    "title",
    "description",
    "instructions",
    "url",
    "category",
    "tags",
    "thumb",
    "width",
    "height",
)


def split_tags(raw: str) -> List[str]:
    return [tag.strip() for tag in (raw or "").split(",") if tag.strip()]


class GameRecord(BaseModel):
    id: str
    title: str
    description: str = ""
    instructions: str = ""
    url: str = ""
    category: str = ""
    tags: str = ""
    thumb: str = ""
    width: str = ""
    height: str = ""

    class Config:
        frozen = True

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def coerce_text(cls, value):
        if value is None:
            return ""
        # Feeds sometimes carry numeric ids and dimensions.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("id", "title")
    @classmethod
    def required_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def tag_list(self) -> List[str]:
        return split_tags(self.tags)


class GamePreviewOut(BaseModel):
    id: str
    title: str
    thumb: str
    category: str


class PaginationOut(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_prev: bool
    has_next: bool
    window: List[Union[int, str]]


class GameListOut(BaseModel):
    total: int
    offset: int
    limit: int
    items: List[GameRecord]
    pagination: PaginationOut


class SearchPageOut(GameListOut):
    query: str


class CategoryPageOut(GameListOut):
    category: str
    slug: str
    all_categories: List[str]


class TagPageOut(GameListOut):
    tag: str
    slug: str
    related_tags: List[str]
    popular_categories: List[str]


class GameDetailOut(BaseModel):
    game: GameRecord
    slug: str
    tags: List[str]
    category_slug: str
    related: List[GameRecord]


class HomePageOut(BaseModel):
    featured: Optional[GameRecord] = None
    games: List[GameRecord]
    total: int


class CategorySummaryOut(BaseModel):
    name: str
    slug: str
    count: int
    preview: List[GamePreviewOut]


class CategoriesOut(BaseModel):
    categories: List[CategorySummaryOut]
    total_games: int


class TagCountOut(BaseModel):
    name: str
    count: int
    href: str


class CategoryCountOut(BaseModel):
    name: str
    count: int


class TagsOut(BaseModel):
    tags: List[TagCountOut]
    popular: List[TagCountOut]
    popular_categories: List[CategoryCountOut]


class HealthOut(BaseModel):
    status: str
    games: int
    cache_age_seconds: Optional[float] = None
