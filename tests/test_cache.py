"""Tests for PageCache and cache keys."""

from phnews.data import Article, PageResult
from phnews.reader.cache import PageCache, cache_key


def test_get_missing_returns_none() -> None:
    assert PageCache().get("sports_page1") is None


def test_set_then_get() -> None:
    cache = PageCache()
    page = PageResult(articles=(Article(url="u"),), total_results=1)
    cache.set("sports_page1", page)
    assert cache.get("sports_page1") is page
    assert "sports_page1" in cache
    assert len(cache) == 1


def test_set_overwrites() -> None:
    cache = PageCache()
    cache.set("k", PageResult(total_results=1))
    cache.set("k", PageResult(total_results=2))
    assert cache.get("k") == PageResult(total_results=2)
    assert len(cache) == 1


def test_clear_empties_everything() -> None:
    cache = PageCache()
    for page in range(1, 4):
        cache.set(cache_key(page, "", "sports"), PageResult())
    cache.clear()
    assert len(cache) == 0
    assert cache.get(cache_key(1, "", "sports")) is None


# -- cache_key --


def test_cache_key_format() -> None:
    assert cache_key(1, "", "sports") == "sports_page1"
    assert cache_key(3, "typhoon", "sports") == "typhoon_page3"


def test_cache_key_stable() -> None:
    assert cache_key(2, "flood", "health") == cache_key(2, "flood", "health")


def test_cache_key_changes_with_page_or_query() -> None:
    base = cache_key(1, "", "sports")
    assert cache_key(2, "", "sports") != base
    assert cache_key(1, "", "politics") != base
    assert cache_key(1, "flood", "sports") != base


def test_cache_key_search_and_category_collide() -> None:
    """A category equal to a search term shares the same key."""
    assert cache_key(1, "sports", "politics") == cache_key(1, "", "sports")


def test_cache_key_without_query() -> None:
    assert cache_key(1, None, None) == "_page1"
