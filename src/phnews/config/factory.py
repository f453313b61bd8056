"""Factory functions to create components from configuration."""

import os
from pathlib import Path

from phnews.config.models import PhnewsConfig, ReaderConfig, UpstreamConfig
from phnews.proxy.service import NewsProxy
from phnews.reader.browser import ArticleBrowser
from phnews.reader.cache import PageCache
from phnews.reader.client import ProxyClient
from phnews.reader.favorites import FavoritesStore, JsonFileKeyValueStore
from phnews.upstream.newsapi import NewsAPIClient


def create_upstream_client(config: UpstreamConfig, *, api_key: str | None = None) -> NewsAPIClient:
    """Create a NewsAPI client from config.

    Raises:
        ValueError: If no API key is passed and NEWSAPI_KEY is unset.
    """
    return NewsAPIClient(
        api_key=api_key,
        base_url=config.base_url,
        page_size=config.page_size,
        language=config.language,
        user_agent=config.user_agent,
        timeout=config.timeout,
    )


def create_proxy(config: PhnewsConfig, *, api_key: str | None = None) -> NewsProxy:
    """Create the proxy service from root config."""
    return NewsProxy(
        create_upstream_client(config.upstream, api_key=api_key),
        allowed_sources=config.proxy.allowed_sources,
        windows_days=config.upstream.windows_days,
    )


def create_favorites_store(config: ReaderConfig) -> FavoritesStore:
    """Create a file-backed favorites store."""
    path = Path(os.path.expanduser(config.favorites_path))
    return FavoritesStore(JsonFileKeyValueStore(path))


def create_browser(
    config: PhnewsConfig,
    *,
    favorites: FavoritesStore | None = None,
) -> ArticleBrowser:
    """Create an article browser that talks to the configured proxy."""
    return ArticleBrowser(
        ProxyClient(config.reader.proxy_url, timeout=config.upstream.timeout),
        favorites if favorites is not None else create_favorites_store(config.reader),
        cache=PageCache(),
        category=config.reader.default_category,
        articles_per_page=config.reader.articles_per_page,
        categories=config.reader.categories,
    )
