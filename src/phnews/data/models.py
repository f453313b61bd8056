"""Core data models for phnews.

Models mirror the NewsAPI ``/v2/everything`` payload. ``from_dict`` reads
the camelCase wire format and ``to_dict`` writes it back, so the proxy can
return exactly what the upstream sent (minus filtered articles).
"""

from dataclasses import dataclass, field
from typing import Any

PAGE_SIZE = 12


@dataclass(frozen=True)
class ArticleSource:
    """The outlet an article was published by."""

    name: str
    id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ArticleSource":
        data = data or {}
        return cls(name=data.get("name") or "", id=data.get("id"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Article:
    """A news article returned by the upstream API."""

    url: str
    title: str = ""
    description: str = ""
    published_at: str = ""
    source: ArticleSource = field(default_factory=lambda: ArticleSource(name=""))
    url_to_image: str | None = None
    author: str | None = None
    content: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        return cls(
            url=data.get("url") or "",
            title=data.get("title") or "",
            description=data.get("description") or "",
            published_at=data.get("publishedAt") or "",
            source=ArticleSource.from_dict(data.get("source")),
            url_to_image=data.get("urlToImage"),
            author=data.get("author"),
            content=data.get("content"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "urlToImage": self.url_to_image,
            "url": self.url,
            "author": self.author,
            "publishedAt": self.published_at,
            "source": self.source.to_dict(),
            "content": self.content,
        }


@dataclass(frozen=True)
class PageResult:
    """One page of articles for a single (query, page) combination."""

    articles: tuple[Article, ...] = ()
    total_results: int = 0
    status: str = "ok"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageResult":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for a page, got {type(data).__name__}")
        return cls(
            articles=tuple(Article.from_dict(a) for a in data.get("articles") or []),
            total_results=int(data.get("totalResults") or 0),
            status=data.get("status") or "ok",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "totalResults": self.total_results,
            "articles": [a.to_dict() for a in self.articles],
        }

    @property
    def is_empty(self) -> bool:
        """True when the upstream reported no matches at all."""
        return not self.articles and self.total_results == 0


@dataclass(frozen=True)
class FetchOptions:
    """Parameters for fetching one page of news.

    A non-blank ``search`` takes precedence over ``category``.
    """

    page: int = 1
    search: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    @property
    def effective_query(self) -> str | None:
        if self.search and self.search.strip():
            return self.search
        if self.category and self.category.strip():
            return self.category
        return None


@dataclass(frozen=True)
class Favorite:
    """A saved article snapshot.

    ``saved_at`` is milliseconds since the epoch.
    """

    url: str
    article: Article
    saved_at: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Favorite":
        return cls(
            url=data["url"],
            article=Article.from_dict(data.get("article") or {"url": data["url"]}),
            saved_at=int(data.get("savedAt") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "article": self.article.to_dict(), "savedAt": self.saved_at}
