from phnews.reader.base import PageFetcher
from phnews.reader.browser import ArticleBrowser
from phnews.reader.cache import PageCache, cache_key
from phnews.reader.client import ProxyClient
from phnews.reader.favorites import (
    FAVORITES_KEY,
    FavoritesStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
)

__all__ = [
    "FAVORITES_KEY",
    "ArticleBrowser",
    "FavoritesStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "PageCache",
    "PageFetcher",
    "ProxyClient",
    "cache_key",
]
