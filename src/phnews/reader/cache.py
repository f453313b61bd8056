"""Session-scoped page cache."""

from phnews.data import PageResult


def cache_key(page: int, search: str | None, category: str | None) -> str:
    """Build the cache key for one (query, page) combination.

    Search and category share the key space, so a category equal to a
    search term maps to the same entry.
    """
    return f"{search or category or ''}_page{page}"


class PageCache:
    """In-memory mapping from cache key to page.

    There is no eviction and no TTL; the owner clears it whenever the
    active query changes.
    """

    def __init__(self) -> None:
        self._pages: dict[str, PageResult] = {}

    def get(self, key: str) -> PageResult | None:
        return self._pages.get(key)

    def set(self, key: str, page: PageResult) -> None:
        self._pages[key] = page

    def clear(self) -> None:
        self._pages.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._pages

    def __len__(self) -> int:
        return len(self._pages)
