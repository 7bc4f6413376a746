import json

import pytest
from fastapi.testclient import TestClient

from gamehub.catalog import get_catalog
from gamehub.main import app
from gamehub.services.catalog_query import CatalogService
from gamehub.services.catalog_store import CatalogStore

FEED = [
    {
        "id": "1",
        "title": "Turbo Drift",
        "description": "Race through neon streets",
        "instructions": "Arrow keys to steer",
        "url": "https://example.com/turbo-drift",
        "category": "Racing",
        "tags": "Action, Racing, 3D",
        "thumb": "https://example.com/turbo.png",
        "width": "800",
        "height": "600",
    },
    {
        "id": "2",
        "title": "Block Stack",
        "description": "Stack the falling blocks",
        "instructions": "Tap to drop",
        "url": "https://example.com/block-stack",
        "category": "Puzzle",
        "tags": "Puzzle, Casual",
        "thumb": "https://example.com/block.png",
        "width": "640",
        "height": "480",
    },
    {
        "id": "3",
        "title": "Sky Racer",
        "description": "Fly a racing plane",
        "instructions": "Mouse to fly",
        "url": "https://example.com/sky-racer",
        "category": "racing",
        "tags": "Racing, Multiplayer",
        "thumb": "https://example.com/sky.png",
        "width": 1024,
        "height": 768,
    },
    {
        "id": "4",
        "title": "Stick Brawl",
        "description": "Stickman fighting",
        "instructions": "WASD to move",
        "url": "https://example.com/stick-brawl",
        "category": "Action",
        "tags": "Action, Stickman, Multiplayer",
        "thumb": "https://example.com/stick.png",
        "width": "800",
        "height": "600",
    },
    {
        "id": "5",
        "title": "Garden Idle",
        "description": "Grow plants while away",
        "instructions": "Click to grow",
        "url": "https://example.com/garden-idle",
        "category": "",
        "tags": "",
        "thumb": "https://example.com/garden.png",
        "width": "800",
        "height": "600",
    },
]


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def write_feed(path, payload) -> None:
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def feed_path(tmp_path):
    path = tmp_path / "feed.json"
    write_feed(path, FEED)
    return path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(feed_path, clock):
    return CatalogStore(feed_path, ttl_seconds=300, clock=clock)


@pytest.fixture
def service(store):
    return CatalogService(store)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_catalog] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
