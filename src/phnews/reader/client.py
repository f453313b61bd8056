"""HTTP client for the news proxy."""

from __future__ import annotations

import logging

import httpx

from phnews.data import FetchOptions, PageResult
from phnews.errors import FetchError

logger = logging.getLogger(__name__)


class ProxyClient:
    """Fetch filtered pages from a running phnews proxy.

    Args:
        base_url: Proxy API root, e.g. ``http://localhost:5178/api``.
        timeout: Request timeout in seconds.
        client: Optional shared ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    async def fetch_news(self, options: FetchOptions) -> PageResult:
        """Fetch one page from ``/news/all``.

        Only one of ``search`` and ``categories`` is sent; search wins.

        Raises:
            FetchError: If the proxy answers with a non-success status.
        """
        params: dict[str, str | int] = {"page": options.page}
        if options.search and options.search.strip():
            params["search"] = options.search
        elif options.category and options.category.strip():
            params["categories"] = options.category

        url = f"{self._base_url}/news/all"
        logger.debug(f"Fetching: {httpx.URL(url, params=params)}")

        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)

        if not response.is_success:
            raise FetchError(_error_message(response), status_code=response.status_code)
        return PageResult.from_dict(response.json())


def _error_message(response: httpx.Response) -> str:
    """Prefer the proxy's ``error`` field over the bare status text."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Failed to fetch news: {response.reason_phrase}"
