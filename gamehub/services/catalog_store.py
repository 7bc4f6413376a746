from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..schemas import GameRecord

logger = logging.getLogger(__name__)

Catalog = Tuple[GameRecord, ...]


@dataclass(frozen=True)
class CatalogSnapshot:
    games: Catalog
    loaded_at: float


def parse_catalog(payload: List[Any], source: str = "feed") -> Catalog:
    """Validate a decoded feed array, skipping entries that are not game records."""
    games: List[GameRecord] = []
    skipped = 0
    for index, raw in enumerate(payload):
        if not isinstance(raw, dict):
            skipped += 1
            logger.warning("catalog source %s: entry %d is not an object, skipped", source, index)
            continue
        try:
            games.append(GameRecord.model_validate(raw))
        except ValidationError as exc:
            skipped += 1
            logger.warning(
                "catalog source %s: entry %d skipped (%d validation errors)",
                source,
                index,
                exc.error_count(),
            )
    if skipped:
        logger.info("catalog source %s: loaded=%d skipped=%d", source, len(games), skipped)
    return tuple(games)


class CatalogStore:
    """Process-local cache of the game feed with a fixed time-to-live.

    The whole snapshot is replaced by a single reference assignment, so a
    reader always sees either the previous catalog or the new one. Loads are
    not serialized: concurrent reloads each read the feed and the last one
    wins, which is harmless because the feed is static.
    """

    def __init__(
        self,
        feed_path: Union[str, Path],
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.feed_path = Path(feed_path)
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot: Optional[CatalogSnapshot] = None

    def load_catalog(self) -> Catalog:
        return self.snapshot().games

    def snapshot(self) -> CatalogSnapshot:
        current = self._snapshot
        now = self._clock()
        if current is not None and (now - current.loaded_at) < self.ttl_seconds:
            return current

        games = self._read_feed()
        if games is None:
            # Not cached: the next call retries the source.
            return CatalogSnapshot(games=(), loaded_at=now)

        fresh = CatalogSnapshot(games=games, loaded_at=now)
        self._snapshot = fresh
        logger.info("catalog loaded from %s: %d games", self.feed_path, len(games))
        return fresh

    def invalidate(self) -> None:
        self._snapshot = None

    def cache_age(self) -> Optional[float]:
        current = self._snapshot
        if current is None:
            return None
        return max(0.0, self._clock() - current.loaded_at)

    def _read_feed(self) -> Optional[Catalog]:
        try:
            payload = json.loads(self.feed_path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError):
            logger.exception("Error loading games data from %s", self.feed_path)
            return None
        if not isinstance(payload, list):
            logger.warning(
                "Error loading games data from %s: top level is %s, not an array",
                self.feed_path,
                type(payload).__name__,
            )
            return None
        return parse_catalog(payload, source=str(self.feed_path))
