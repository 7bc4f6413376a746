import os
from pathlib import Path


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    try:
        for line in path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue
            key, value = stripped.split("=", 1)
            key = key.strip()
            if not key or key in os.environ:
                continue
            cleaned = value.strip().strip('"').strip("'")
            os.environ[key] = cleaned
    except OSError:
        return


def _load_env() -> None:
    current = Path(__file__).resolve()
    for candidate in (current.parents[2] / ".env", Path.cwd() / ".env"):
        _load_env_file(candidate)


_load_env()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in (
        "1",
        "true",
        "yes",
        "on",
    )


def _normalize_cors(origins: str) -> list[str]:
    items: list[str] = []
    for raw in origins.split(","):
        value = raw.strip()
        if value and value not in items:
            items.append(value)
    return items


CATALOG_FEED_PATH = os.getenv("CATALOG_FEED_PATH", "").strip() or str(Path.cwd() / "feed.json")
CATALOG_CACHE_TTL_SECONDS = int(os.getenv("CATALOG_CACHE_TTL_SECONDS", "300"))
CATALOG_PRELOAD_ON_STARTUP = _env_flag("CATALOG_PRELOAD_ON_STARTUP", "true")

# Listing policy shared by every paginated page.
PAGE_SIZE = int(os.getenv("CATALOG_PAGE_SIZE", "48"))
MAX_VISIBLE_PAGES = int(os.getenv("CATALOG_MAX_VISIBLE_PAGES", "7"))
SEARCH_RESULTS_LIMIT = int(os.getenv("CATALOG_SEARCH_RESULTS_LIMIT", "8"))

MAX_RELATED_GAMES = int(os.getenv("CATALOG_MAX_RELATED_GAMES", "16"))
MAX_404_RECOMMENDED_GAMES = int(os.getenv("CATALOG_MAX_404_RECOMMENDED_GAMES", "32"))
HOME_GRID_SIZE = int(os.getenv("CATALOG_HOME_GRID_SIZE", "32"))
CATEGORY_PREVIEW_SIZE = int(os.getenv("CATALOG_CATEGORY_PREVIEW_SIZE", "4"))
RELATED_TAGS_LIMIT = int(os.getenv("CATALOG_RELATED_TAGS_LIMIT", "12"))
TAG_PAGE_CATEGORY_LIMIT = int(os.getenv("CATALOG_TAG_PAGE_CATEGORY_LIMIT", "8"))
POPULAR_LIMIT = int(os.getenv("CATALOG_POPULAR_LIMIT", "5"))

ADMIN_API_KEY = os.getenv("ADMIN_API_KEY", "")

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000,http://127.0.0.1:3000,"
    "http://localhost:5173,http://127.0.0.1:5173"
)
CORS_ORIGINS = _normalize_cors(os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS))
