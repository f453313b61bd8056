"""Tests for protocol compliance."""

from phnews.data import FetchOptions, PageResult
from phnews.reader.client import ProxyClient
from phnews.reader.favorites import InMemoryKeyValueStore, JsonFileKeyValueStore
from phnews.upstream.newsapi import NewsAPIClient


def test_newsapi_client_matches_protocol() -> None:
    """Verify NewsAPIClient structurally matches the NewsFetcher protocol."""
    client = NewsAPIClient(api_key="test")
    assert hasattr(client, "fetch_everything")
    assert callable(client.fetch_everything)


def test_proxy_client_matches_protocol() -> None:
    """Verify ProxyClient structurally matches the PageFetcher protocol."""
    client = ProxyClient("http://localhost:5178/api")
    assert hasattr(client, "fetch_news")
    assert callable(client.fetch_news)


class MockFetcher:
    """A minimal implementation to verify protocol requirements."""

    async def fetch_everything(self, options: FetchOptions, *, days_back: int) -> PageResult:
        return PageResult()


def test_mock_fetcher_satisfies_protocol() -> None:
    """Any class with the right method signature satisfies the protocol."""
    fetcher = MockFetcher()
    assert hasattr(fetcher, "fetch_everything")
    # Type checkers will verify this matches NewsFetcher


def test_key_value_stores_match_protocol(tmp_path) -> None:
    for store in (InMemoryKeyValueStore(), JsonFileKeyValueStore(tmp_path / "kv.json")):
        store.set("k", "v")
        assert store.get("k") == "v"
        assert store.get("missing") is None
