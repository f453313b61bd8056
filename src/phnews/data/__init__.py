"""Data models for phnews."""

from phnews.data.models import (
    PAGE_SIZE,
    Article,
    ArticleSource,
    Favorite,
    FetchOptions,
    PageResult,
)

__all__ = [
    "PAGE_SIZE",
    "Article",
    "ArticleSource",
    "Favorite",
    "FetchOptions",
    "PageResult",
]
