"""News proxy service: date-window widening plus source filtering."""

import logging
from collections.abc import Sequence

from phnews.data import FetchOptions, PageResult
from phnews.sources import PHILIPPINE_SOURCES, filter_page
from phnews.upstream.base import NewsFetcher

logger = logging.getLogger(__name__)

DEFAULT_WINDOWS_DAYS = (7, 30)


class NewsProxy:
    """Stateless translation from reader requests to upstream calls.

    Flow:
    1. Fetch the page using the narrowest date window
    2. While the upstream reports zero matches, retry with the next wider window
    3. Filter the articles to the source allow-list

    Args:
        fetcher: Upstream news fetcher.
        allowed_sources: Allow-list tokens for the source filter.
        windows_days: Date windows to try, narrowest first.
    """

    def __init__(
        self,
        fetcher: NewsFetcher,
        *,
        allowed_sources: Sequence[str] = PHILIPPINE_SOURCES,
        windows_days: Sequence[int] = DEFAULT_WINDOWS_DAYS,
    ) -> None:
        if not windows_days:
            raise ValueError("At least one date window is required")
        self._fetcher = fetcher
        self._allowed_sources = tuple(allowed_sources)
        self._windows_days = tuple(windows_days)

    async def get_news(self, options: FetchOptions) -> PageResult:
        """Fetch and filter one page of news.

        Args:
            options: Page number and optional search term or category.

        Returns:
            The filtered page; ``total_results`` equals the article count.
        """
        narrowest, *wider = self._windows_days
        page = await self._fetcher.fetch_everything(options, days_back=narrowest)

        for days_back in wider:
            if not page.is_empty:
                break
            logger.info(f"No articles found in the last {narrowest} days, trying {days_back}...")
            page = await self._fetcher.fetch_everything(options, days_back=days_back)
            narrowest = days_back

        return filter_page(page, self._allowed_sources)
