"""Tests for ProxyClient."""

import httpx
import pytest

from phnews.data import FetchOptions
from phnews.errors import FetchError
from phnews.reader.client import ProxyClient

PAGE = {
    "status": "ok",
    "totalResults": 1,
    "articles": [
        {
            "source": {"id": None, "name": "Philstar.com"},
            "title": "Gilas wins",
            "url": "https://philstar.com/sports/1",
            "publishedAt": "2026-10-18T10:00:00Z",
        }
    ],
}


def _client(handler) -> ProxyClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ProxyClient("http://proxy.test/api/", client=http)


async def test_fetch_news_decodes_page() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=PAGE)

    page = await _client(handler).fetch_news(FetchOptions(page=2, category="sports"))

    assert page.total_results == 1
    assert page.articles[0].title == "Gilas wins"
    assert requests[0].url.path == "/api/news/all"
    assert dict(requests[0].url.params) == {"page": "2", "categories": "sports"}


async def test_search_is_sent_instead_of_category() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=PAGE)

    await _client(handler).fetch_news(FetchOptions(search="flood", category="sports"))

    assert dict(requests[0].url.params) == {"page": "1", "search": "flood"}


async def test_blank_search_falls_back_to_category() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=PAGE)

    await _client(handler).fetch_news(FetchOptions(search="  ", category="tech"))

    assert dict(requests[0].url.params) == {"page": "1", "categories": "tech"}


async def test_error_body_becomes_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "Daily request limit reached."})

    with pytest.raises(FetchError, match="Daily request limit reached.") as exc_info:
        await _client(handler).fetch_news(FetchOptions())
    assert exc_info.value.status_code == 429


async def test_error_without_body_uses_status_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    with pytest.raises(FetchError, match="Failed to fetch news: Bad Gateway"):
        await _client(handler).fetch_news(FetchOptions())


async def test_opens_client_per_request(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict = {}

    async def mock_get(self, url, params=None):
        captured["url"] = url
        captured["params"] = params
        return httpx.Response(200, json=PAGE)

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

    await ProxyClient("http://localhost:5178/api").fetch_news(FetchOptions())

    assert captured["url"] == "http://localhost:5178/api/news/all"
    assert captured["params"] == {"page": 1}
