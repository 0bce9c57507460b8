"""Tests for the in-memory TTL cache."""

from services.cache import TTLCache


class Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_get_missing_key_returns_none():
    assert TTLCache().get("nothing") is None


def test_value_available_until_ttl_elapses():
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.set("tomato", {"title": "Tomato"}, ttl_seconds=60)

    clock.now += 59.9
    assert cache.get("tomato") == {"title": "Tomato"}

    clock.now = 160.0
    assert cache.get("tomato") is None


def test_expired_entry_is_removed_on_read():
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.set("basil", "x", ttl_seconds=10)
    assert len(cache) == 1

    clock.now += 10
    assert cache.get("basil") is None
    assert len(cache) == 0


def test_set_overwrites_and_resets_expiry():
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.set("k", "old", ttl_seconds=10)
    clock.now += 8
    cache.set("k", "new", ttl_seconds=10)

    clock.now += 8
    assert cache.get("k") == "new"


def test_keys_are_independent():
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.set("short", 1, ttl_seconds=5)
    cache.set("long", 2, ttl_seconds=500)

    clock.now += 5
    assert cache.get("short") is None
    assert cache.get("long") == 2
