import pytest

from wordcrawl.services.robots_cache import RobotsCache


def test_cache_miss_raises_key_error():
    cache = RobotsCache()
    with pytest.raises(KeyError):
        cache.get("https://example.com/robots.txt")


def test_cache_miss_returns_default_when_given():
    cache = RobotsCache()
    assert cache.get("https://example.com/robots.txt", "missing") == "missing"


def test_cache_stores_and_retrieves_rules():
    cache = RobotsCache()
    cache.set("https://example.com/robots.txt", ("/private",))
    assert cache.get("https://example.com/robots.txt") == ("/private",)


def test_cache_stores_none_for_failed_fetch():
    cache = RobotsCache()
    cache.set("https://example.com/robots.txt", None)
    assert cache.get("https://example.com/robots.txt") is None

def test_lru_eviction_drops_oldest():
    cache = RobotsCache(max_size=2)
    cache.set("a", ())
    cache.set("b", ())
    cache.get("a")
    cache.set("c", ())
    assert cache.get("b", "gone") == "gone"
    assert cache.get("a") == ()
    assert cache.get("c") == ()


def test_entries_expire_after_ttl():
    now = [100.0]
    cache = RobotsCache(ttl_seconds=10, clock=lambda: now[0])
    cache.set("a", ("/x",))
    now[0] = 105.0
    assert cache.get("a") == ("/x",)
    now[0] = 111.0
    assert cache.get("a", "expired") == "expired"


def test_non_positive_ttl_disables_caching():
    cache = RobotsCache(ttl_seconds=0)
    cache.set("a", ())
    assert cache.get("a", "expired") == "expired"
