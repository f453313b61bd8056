"""phnews: a Philippine news proxy and article reader for NewsAPI."""

from phnews.config import (
    PhnewsConfig,
    create_browser,
    create_favorites_store,
    create_proxy,
    create_upstream_client,
    get_default_config_path,
    load_config,
)
from phnews.data import PAGE_SIZE, Article, ArticleSource, Favorite, FetchOptions, PageResult
from phnews.errors import (
    AuthenticationError,
    ConfigurationError,
    FetchError,
    NewsError,
    RateLimitError,
    UpstreamStatusError,
)
from phnews.proxy.app import create_app
from phnews.proxy.service import NewsProxy
from phnews.reader import (
    ArticleBrowser,
    FavoritesStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    PageCache,
    PageFetcher,
    ProxyClient,
    cache_key,
)
from phnews.sources import PHILIPPINE_SOURCES, filter_page, is_allowed_source
from phnews.upstream import NewsAPIClient, NewsFetcher, build_query

__all__ = [
    # Models
    "PAGE_SIZE",
    "Article",
    "ArticleSource",
    "Favorite",
    "FetchOptions",
    "PageResult",
    # Errors
    "AuthenticationError",
    "ConfigurationError",
    "FetchError",
    "NewsError",
    "RateLimitError",
    "UpstreamStatusError",
    # Protocols
    "KeyValueStore",
    "NewsFetcher",
    "PageFetcher",
    # Upstream
    "NewsAPIClient",
    "build_query",
    # Source filter
    "PHILIPPINE_SOURCES",
    "filter_page",
    "is_allowed_source",
    # Proxy
    "NewsProxy",
    "create_app",
    # Reader
    "ArticleBrowser",
    "FavoritesStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "PageCache",
    "ProxyClient",
    "cache_key",
    # Config
    "PhnewsConfig",
    "create_browser",
    "create_favorites_store",
    "create_proxy",
    "create_upstream_client",
    "get_default_config_path",
    "load_config",
]
