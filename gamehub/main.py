import logging
import re

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response

from .catalog import catalog_service
from .core.config import CATALOG_PRELOAD_ON_STARTUP, CORS_ORIGINS
from .routes import catalog, categories, games, tags

logger = logging.getLogger(__name__)

app = FastAPI(title="GameHub Catalog API", version="0.1.0")

_LOCAL_ORIGIN_REGEX = re.compile(r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$", re.IGNORECASE)


def _is_origin_allowed(origin: str) -> bool:
    if not origin:
        return False
    if "*" in CORS_ORIGINS or origin in CORS_ORIGINS:
        return True
    return bool(_LOCAL_ORIGIN_REGEX.match(origin))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom exception handler that adds CORS headers to all HTTP exceptions."""
    origin = request.headers.get("origin", "")
    response = JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
    if _is_origin_allowed(origin):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.on_event("startup")
def on_startup() -> None:
    if not CATALOG_PRELOAD_ON_STARTUP:
        return
    games_loaded = len(catalog_service.games())
    if not games_loaded:
        logger.warning("Catalog is empty after startup load (%s)", catalog_service.store.feed_path)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.head("/health")
def health_check_head():
    return Response(status_code=200)


app.include_router(games.router, prefix="/games", tags=["games"])
app.include_router(categories.router, prefix="/categories", tags=["categories"])
app.include_router(tags.router, prefix="/tags", tags=["tags"])
app.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
