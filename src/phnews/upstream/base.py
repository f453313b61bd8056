from typing import Protocol

from phnews.data import FetchOptions, PageResult


class NewsFetcher(Protocol):
    """Interface for fetching one page of news from an upstream API."""

    async def fetch_everything(self, options: FetchOptions, *, days_back: int) -> PageResult:
        """Fetch one page of articles published within the last ``days_back`` days.

        Args:
            options: Page number and optional search term or category.
            days_back: Size of the publish-date window, in days.

        Returns:
            The unfiltered page as returned by the upstream API.

        Raises:
            phnews.errors.NewsError: If the upstream answers with an error status.
        """
        ...
