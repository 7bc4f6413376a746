"""HTTP routers exposing catalog queries."""

from . import catalog, categories, games, tags

__all__ = ["catalog", "categories", "games", "tags"]
