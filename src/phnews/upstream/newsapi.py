"""NewsAPI.org ``/v2/everything`` client."""

from __future__ import annotations

import logging
import os
from datetime import UTC, date, datetime, timedelta

import httpx

from phnews.data import PAGE_SIZE, FetchOptions, PageResult
from phnews.errors import AuthenticationError, RateLimitError, UpstreamStatusError

NEWSAPI_URL = "https://newsapi.org/v2/everything"
BASE_QUERY = "Philippines"
REDACTED = "REDACTED"

logger = logging.getLogger(__name__)


class NewsAPIClient:
    """Fetch Philippine news from the NewsAPI ``everything`` endpoint.

    Every request asks for articles mentioning "Philippines" plus the search
    term or category, newest first, one page of ``page_size`` articles.

    Args:
        api_key: NewsAPI key (defaults to NEWSAPI_KEY env var).
        base_url: Endpoint URL.
        page_size: Articles per page (NewsAPI pages are 1-indexed).
        language: Language code for results.
        user_agent: User-Agent header sent upstream.
        timeout: Request timeout in seconds.
        client: Optional shared ``httpx.AsyncClient``. When omitted a client
            is opened for each request.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = NEWSAPI_URL,
        page_size: int = PAGE_SIZE,
        language: str = "en",
        user_agent: str = "NewsReader/1.0",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWSAPI_KEY")
        if not self._api_key:
            raise ValueError("NewsAPI key required. Pass api_key or set NEWSAPI_KEY env var.")
        self._base_url = base_url
        self._page_size = page_size
        self._language = language
        self._user_agent = user_agent
        self._timeout = timeout
        self._client = client

    async def fetch_everything(self, options: FetchOptions, *, days_back: int) -> PageResult:
        """Fetch one page of articles published within the last ``days_back`` days.

        Args:
            options: Page number and optional search term or category.
            days_back: Size of the publish-date window, in days.

        Returns:
            The unfiltered page.

        Raises:
            RateLimitError: Upstream answered 429.
            AuthenticationError: Upstream answered 401 or 403.
            UpstreamStatusError: Any other non-success status.
        """
        params = self.build_params(options, _from_date(days_back))
        headers = {"User-Agent": self._user_agent}
        logger.info(f"Fetching: {self.redacted_url(params)}")

        if self._client is not None:
            response = await self._client.get(self._base_url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._base_url, params=params, headers=headers)

        _raise_for_news_status(response)
        return PageResult.from_dict(response.json())

    def build_params(self, options: FetchOptions, from_date: date) -> dict[str, str | int]:
        """Build the query-string parameters for one request."""
        return {
            "apiKey": self._api_key,  # type: ignore[dict-item]
            "pageSize": self._page_size,
            "page": options.page,
            "from": from_date.isoformat(),
            "sortBy": "publishedAt",
            "language": self._language,
            "q": build_query(options),
        }

    def redacted_url(self, params: dict[str, str | int]) -> str:
        """Request URL for ``params`` with the API key swapped for ``REDACTED``.

        The key is replaced before encoding, so keys with reserved
        characters never reach the log.
        """
        return str(httpx.URL(self._base_url, params={**params, "apiKey": REDACTED}))


def build_query(options: FetchOptions) -> str:
    """Build the ``q`` parameter: search wins over category."""
    extra = options.effective_query
    if extra:
        return f"{BASE_QUERY} {extra}"
    return BASE_QUERY


def _from_date(days_back: int) -> date:
    """UTC calendar date ``days_back`` days before today."""
    return (datetime.now(tz=UTC) - timedelta(days=days_back)).date()


def _raise_for_news_status(response: httpx.Response) -> None:
    """Map upstream error statuses to user-facing errors."""
    status = response.status_code
    if status == 429:
        raise RateLimitError()
    if status in (401, 403):
        logger.error("Auth error from NewsAPI")
        raise AuthenticationError()
    if not response.is_success:
        logger.error(f"NewsAPI error: {status}")
        raise UpstreamStatusError(status, response.reason_phrase)
