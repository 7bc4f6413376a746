import logging
import sys

import pytest

from gamehub.services.catalog_store import CatalogStore, parse_catalog

from .conftest import FEED, write_feed


def test_load_returns_validated_records(store):
    games = store.load_catalog()
    assert [game.id for game in games] == ["1", "2", "3", "4", "5"]
    assert games[2].width == "1024"
    assert games[0].tag_list == ["Action", "Racing", "3D"]


def test_cached_within_ttl(store, feed_path, clock):
    first = store.load_catalog()
    write_feed(feed_path, FEED[:1])
    clock.advance(299)
    assert store.load_catalog() is first


def test_reload_after_ttl(store, feed_path, clock):
    store.load_catalog()
    write_feed(feed_path, FEED[:1])
    clock.advance(300)
    assert [game.id for game in store.load_catalog()] == ["1"]


def test_reload_after_invalidate(store, feed_path):
    assert len(store.load_catalog()) == 5
    write_feed(feed_path, FEED[:2])
    assert len(store.load_catalog()) == 5
    store.invalidate()
    assert [game.id for game in store.load_catalog()] == ["1", "2"]


def test_missing_file_fails_open(tmp_path, clock, caplog):
    store = CatalogStore(tmp_path / "missing.json", clock=clock)
    with caplog.at_level(logging.ERROR):
        assert store.load_catalog() == ()
    assert "Error loading games data" in caplog.text
    assert store.cache_age() is None


def test_malformed_json_fails_open_and_retries(feed_path, clock):
    write_feed(feed_path, "{not json")
    store = CatalogStore(feed_path, clock=clock)
    assert store.load_catalog() == ()
    write_feed(feed_path, FEED)
    assert len(store.load_catalog()) == 5


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="no integer string length limit"
)
def test_oversized_integer_fails_open(feed_path, clock):
    write_feed(feed_path, '[{"id": ' + "9" * 5000 + ', "title": "x"}]')
    store = CatalogStore(feed_path, clock=clock)
    assert store.load_catalog() == ()


def test_deeply_nested_feed_fails_open(feed_path, clock):
    write_feed(feed_path, "[" * 100000 + "]" * 100000)
    store = CatalogStore(feed_path, clock=clock)
    assert store.load_catalog() == ()


def test_non_array_document_fails_open(feed_path, clock):
    write_feed(feed_path, {"games": FEED})
    store = CatalogStore(feed_path, clock=clock)
    assert store.load_catalog() == ()


def test_invalid_entries_are_skipped(caplog):
    payload = [
        FEED[0],
        "not an object",
        {"title": "No id"},
        {"id": "9", "title": "   "},
        {"id": "10", "title": "Minimal"},
        {"id": "11", "title": "Bad tags", "tags": ["a", "b"]},
    ]
    with caplog.at_level(logging.WARNING):
        games = parse_catalog(payload)
    assert [game.id for game in games] == ["1", "10"]
    assert games[1].description == ""
    assert games[1].tag_list == []
    assert "entry 1 is not an object" in caplog.text


def test_duplicate_ids_pass_through(feed_path, clock):
    write_feed(feed_path, [FEED[0], dict(FEED[1], id="1")])
    store = CatalogStore(feed_path, clock=clock)
    assert [game.title for game in store.load_catalog()] == ["Turbo Drift", "Block Stack"]


def test_snapshot_swapped_not_mutated(store, feed_path):
    before = store.snapshot()
    write_feed(feed_path, FEED[:1])
    store.invalidate()
    after = store.snapshot()
    assert before is not after
    assert len(before.games) == 5
    assert len(after.games) == 1


def test_cache_age(store, clock):
    store.load_catalog()
    clock.advance(12)
    assert store.cache_age() == 12
