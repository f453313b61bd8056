"""Source allow-list filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from phnews.data import ArticleSource, PageResult

logger = logging.getLogger(__name__)

# Matched as case-insensitive substrings of the source id or name.
PHILIPPINE_SOURCES: tuple[str, ...] = (
    "inquirer",
    "gmanetwork",
    "philstar",
    "abs-cbn",
    "rappler",
    "cnn-philippines",
    "bbc",
    "reuters",
    "ap",
)


def is_allowed_source(source: ArticleSource, tokens: Iterable[str] = PHILIPPINE_SOURCES) -> bool:
    """Check whether an article source matches any allow-list token.

    Args:
        source: The article's source.
        tokens: Allow-list tokens (matched case-insensitively).

    Returns:
        True if the lower-cased source id or name contains a token.
    """
    source_id = (source.id or "").lower()
    source_name = (source.name or "").lower()
    return any(
        token.lower() in source_id or token.lower() in source_name for token in tokens
    )


def filter_page(page: PageResult, tokens: Iterable[str] = PHILIPPINE_SOURCES) -> PageResult:
    """Keep only articles from allowed sources.

    ``total_results`` of the returned page is the filtered count, not the
    upstream total.
    """
    tokens = tuple(tokens)
    articles = tuple(a for a in page.articles if is_allowed_source(a.source, tokens))
    logger.info(
        f"Filtered {page.total_results} articles to {len(articles)} from Philippine sources"
    )
    return PageResult(articles=articles, total_results=len(articles), status=page.status)
