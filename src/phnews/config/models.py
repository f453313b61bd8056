"""Pydantic configuration models for phnews components."""

from pydantic import BaseModel, Field

from phnews.sources import PHILIPPINE_SOURCES

# ============================================================
# Upstream Config
# ============================================================


class UpstreamConfig(BaseModel):
    """Configuration for the NewsAPI client."""

    base_url: str = "https://newsapi.org/v2/everything"
    page_size: int = Field(default=12, ge=1, le=100)
    language: str = "en"
    user_agent: str = "NewsReader/1.0"
    timeout: float = 30.0
    windows_days: tuple[int, ...] = (7, 30)

    model_config = {"frozen": True}


# ============================================================
# Proxy Config
# ============================================================


class ProxyConfig(BaseModel):
    """Configuration for the HTTP proxy."""

    host: str = "127.0.0.1"
    port: int = 5178
    api_prefix: str = "/api"
    allowed_sources: tuple[str, ...] = PHILIPPINE_SOURCES
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = {"frozen": True}


# ============================================================
# Reader Config
# ============================================================


class ReaderConfig(BaseModel):
    """Configuration for the article reader."""

    proxy_url: str = "http://localhost:5178/api"
    default_category: str = "sports"
    articles_per_page: int = Field(default=3, ge=1)
    favorites_path: str = "~/.phnews/favorites.json"
    categories: list[str] = Field(
        default_factory=lambda: [
            "politics",
            "business",
            "tech",
            "sports",
            "entertainment",
            "health",
            "science",
            "general",
        ]
    )

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: str = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class PhnewsConfig(BaseModel):
    """Root configuration for phnews."""

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
