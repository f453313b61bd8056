"""Article-at-a-time browsing over paged, cached news results."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Coroutine, Sequence
from typing import Any

import httpx

from phnews.data import Article, Favorite, FetchOptions, PageResult
from phnews.errors import NewsError
from phnews.reader.base import PageFetcher
from phnews.reader.cache import PageCache, cache_key
from phnews.reader.favorites import FavoritesStore

logger = logging.getLogger(__name__)

_FETCH_ERRORS = (NewsError, httpx.HTTPError, ValueError)


class ArticleBrowser:
    """Browsing state for one reader session.

    Tracks a cursor of (page, index within page) over the pages returned by
    ``fetcher``. Pages are resolved through ``cache`` first. When the cursor
    lands on the second article of a page the next page is prefetched, and
    when it lands on the first article of a page after the first, the
    previous page is prefetched.

    Responses that resolve after a newer load was issued, or after the
    active query changed, are discarded instead of overwriting the cursor.

    Args:
        fetcher: Source of filtered pages (usually a ProxyClient).
        favorites: Persisted favorites.
        cache: Page cache owned by this session.
        category: Initial category.
        search: Initial search term; wins over the category when non-blank.
        articles_per_page: Divisor used to turn the match count into a
            page count.
        categories: Categories the reader offers. When given,
            ``set_category`` rejects anything else.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        favorites: FavoritesStore,
        *,
        cache: PageCache | None = None,
        category: str = "sports",
        search: str = "",
        articles_per_page: int = 3,
        categories: Sequence[str] | None = None,
    ) -> None:
        if articles_per_page < 1:
            raise ValueError("articles_per_page must be >= 1")
        self._categories = tuple(categories) if categories is not None else ()
        self._fetcher = fetcher
        self._favorites = favorites
        self._cache = cache if cache is not None else PageCache()
        self._articles_per_page = articles_per_page

        self._search = search
        self._category = category
        self._show_favorites = False

        self._current_page = 1
        self._current_index = 0
        self._articles: tuple[Article, ...] = ()
        self._total_found = 0
        self._error = ""
        self._loading = False

        self._prefetched: dict[int, tuple[Article, ...]] = {}
        self._prefetching: set[str] = set()
        self._prefetch_tasks: set[asyncio.Task[None]] = set()

        # Bumped on every query change; loads and prefetches from an older
        # generation never touch state.
        self._generation = 0
        self._load_seq = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def search(self) -> str:
        return self._search

    @property
    def category(self) -> str:
        return self._category

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._articles

    @property
    def total_found(self) -> int:
        return self._total_found

    @property
    def error(self) -> str:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def show_favorites(self) -> bool:
        return self._show_favorites

    @property
    def cache(self) -> PageCache:
        return self._cache

    @property
    def prefetched_pages(self) -> frozenset[int]:
        return frozenset(self._prefetched)

    @property
    def total_pages(self) -> int:
        return math.ceil(self._total_found / self._articles_per_page)

    @property
    def has_next_page(self) -> bool:
        return self._current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self._current_page > 1

    @property
    def article_number(self) -> int:
        """1-based position of the current article across all pages."""
        return (self._current_page - 1) * self._articles_per_page + self._current_index + 1

    @property
    def displayed_articles(self) -> tuple[Article, ...]:
        """Articles the cursor moves over: favorites in favorites view, else the page."""
        if self._show_favorites:
            return tuple(fav.article for fav in self._favorites.list())
        return self._articles

    @property
    def current_article(self) -> Article | None:
        displayed = self.displayed_articles
        if 0 <= self._current_index < len(displayed):
            return displayed[self._current_index]
        return None

    def favorites(self) -> list[Favorite]:
        return self._favorites.list()

    def pagination_pages(self) -> list[int]:
        """Page numbers to offer as direct jumps (at most three)."""
        if self._show_favorites:
            return []
        total = self.total_pages
        current = self._current_page
        if total <= 3:
            return list(range(1, total + 1))
        if current <= 2:
            return [1, 2, 3]
        if current >= total - 1:
            return [total - 2, total - 1, total]
        return [current - 1, current, current + 1]

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load_page(self, page: int) -> None:
        """Make ``page`` the visible page with the cursor on its first article.

        Resolves from the cache when possible, otherwise fetches and caches.
        A failed fetch clears the article list and records ``error``.
        """
        self._load_seq += 1
        seq = self._load_seq
        generation = self._generation
        self._error = ""

        key = self._key(page)
        result = self._cache.get(key)
        if result is not None:
            logger.debug(f"Cache hit: {key}")
        else:
            logger.debug(f"Cache miss: {key}")
            self._loading = True
            try:
                result = await self._fetcher.fetch_news(self._options(page))
            except Exception as e:
                if self._is_current(seq, generation):
                    self._articles = ()
                    self._error = _error_message(e)
                    _log_failure(f"Failed to load page {page}", e)
                return
            finally:
                if self._is_current(seq, generation):
                    self._loading = False
            if generation != self._generation:
                logger.debug(f"Discarding page {page} fetched for a previous query")
                return
            self._cache.set(key, result)
            if seq != self._load_seq:
                logger.debug(f"Discarding superseded load of page {page}")
                return

        self._apply(page, result)
        self._schedule_prefetches()

    async def prefetch(self, page: int) -> None:
        """Fetch ``page`` into the cache without moving the cursor.

        Does nothing if the page is cached, already prefetched, or already
        being prefetched. Failures are logged, not raised.
        """
        key = self._key(page)
        if key in self._cache or page in self._prefetched or key in self._prefetching:
            return

        generation = self._generation
        options = self._options(page)
        self._prefetching.add(key)
        try:
            result = await self._fetcher.fetch_news(options)
        except Exception as e:
            _log_failure(f"Prefetch of page {page} failed", e)
            return
        finally:
            self._prefetching.discard(key)

        if generation != self._generation:
            logger.debug(f"Discarding prefetched page {page} for a previous query")
            return
        self._prefetched[page] = result.articles
        self._cache.set(key, result)

    async def wait_for_prefetches(self) -> None:
        """Wait until every scheduled prefetch has finished."""
        while self._prefetch_tasks:
            await asyncio.gather(*list(self._prefetch_tasks))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    async def next_article(self) -> None:
        """Move to the next article, loading the next page at a page end."""
        if self._current_index < len(self.displayed_articles) - 1:
            self._current_index += 1
            self._schedule_prefetches()
        elif not self._show_favorites and self.has_next_page:
            await self.load_page(self._current_page + 1)

    async def prev_article(self) -> None:
        """Move to the previous article, loading the previous page at a page start.

        The previous page opens on its first article.
        """
        if self._current_index > 0:
            self._current_index -= 1
            self._schedule_prefetches()
        elif not self._show_favorites and self.has_previous_page:
            await self.load_page(self._current_page - 1)

    async def go_to_page(self, page: int) -> None:
        await self.load_page(page)

    # ------------------------------------------------------------------
    # Query changes
    # ------------------------------------------------------------------

    async def set_search(self, term: str) -> None:
        """Search within Philippine news and reload from page 1."""
        self._search = term
        self._show_favorites = False
        await self._reset()

    async def set_category(self, category: str) -> None:
        """Switch category, clearing any search, and reload from page 1.

        Raises:
            ValueError: If ``category`` is not one of ``categories``.
        """
        if self._categories and category not in self._categories:
            raise ValueError(f"Unknown category: {category}")
        self._category = category
        self._search = ""
        self._show_favorites = False
        await self._reset()

    async def toggle_favorites_view(self) -> None:
        """Switch between browsing news and browsing saved favorites."""
        self._show_favorites = not self._show_favorites
        await self._reset()

    def toggle_favorite(self, article: Article | None = None) -> bool:
        """Save or remove ``article`` (default: the current article).

        Returns:
            True if the article is a favorite afterwards.
        """
        article = article or self.current_article
        if article is None:
            return False
        return self._favorites.toggle(article)

    def is_favorited(self, article: Article | None = None) -> bool:
        article = article or self.current_article
        return article is not None and self._favorites.is_favorited(article.url)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _reset(self) -> None:
        self._generation += 1
        self._cache.clear()
        self._prefetched.clear()
        self._prefetching.clear()
        self._current_page = 1
        self._current_index = 0
        await self.load_page(1)

    def _apply(self, page: int, result: PageResult) -> None:
        self._articles = result.articles
        self._total_found = result.total_results
        self._current_page = page
        self._current_index = 0
        self._loading = False

    def _schedule_prefetches(self) -> None:
        if self._show_favorites:
            return
        if self._current_index == 1 and self.has_next_page:
            self._spawn(self.prefetch(self._current_page + 1))
        if self._current_index == 0 and self.has_previous_page:
            self._spawn(self.prefetch(self._current_page - 1))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._prefetch_tasks.add(task)
        task.add_done_callback(self._prefetch_tasks.discard)

    def _is_current(self, seq: int, generation: int) -> bool:
        return seq == self._load_seq and generation == self._generation

    def _key(self, page: int) -> str:
        return cache_key(page, self._search, self._category)

    def _options(self, page: int) -> FetchOptions:
        if self._search.strip():
            return FetchOptions(page=page, search=self._search)
        return FetchOptions(page=page, category=self._category or None)


def _error_message(error: Exception) -> str:
    if isinstance(error, NewsError):
        return error.message
    if isinstance(error, _FETCH_ERRORS):
        return str(error) or "Failed to load articles"
    return "Failed to load articles"


def _log_failure(message: str, error: Exception) -> None:
    # Anything outside the expected fetch errors is a malformed response or
    # a bug; keep its traceback.
    if isinstance(error, _FETCH_ERRORS):
        logger.warning(f"{message}: {_error_message(error)}")
    else:
        logger.exception(message)
