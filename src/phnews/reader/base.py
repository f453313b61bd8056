from typing import Protocol

from phnews.data import FetchOptions, PageResult


class PageFetcher(Protocol):
    """Interface the reader uses to fetch filtered pages."""

    async def fetch_news(self, options: FetchOptions) -> PageResult:
        """Fetch one filtered page of news.

        Args:
            options: Page number and optional search term or category.

        Returns:
            The filtered page.

        Raises:
            phnews.errors.NewsError: If the page could not be fetched.
        """
        ...
