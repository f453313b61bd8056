"""Error types shared by the proxy and the reader.

Each error carries the HTTP status the proxy should answer with and a
message that is safe to show to the user.
"""


class NewsError(Exception):
    """Base class for user-facing news errors."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RateLimitError(NewsError):
    """Upstream daily request quota exhausted."""

    status_code = 429

    def __init__(
        self, message: str = "Daily request limit reached. Please try again tomorrow."
    ) -> None:
        super().__init__(message)


class AuthenticationError(NewsError):
    """Upstream rejected the API key (401 or 403)."""

    status_code = 401

    def __init__(self, message: str = "NewsAPI authentication failed. Check your API key.") -> None:
        super().__init__(message)


class UpstreamStatusError(NewsError):
    """Any other non-success upstream status, passed through verbatim."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"NewsAPI error: {reason}", status_code=status_code)
        self.reason = reason


class ConfigurationError(NewsError):
    """The proxy was started without a NewsAPI key."""

    status_code = 500

    def __init__(self, message: str = "NEWSAPI_KEY not configured on server") -> None:
        super().__init__(message)


class FetchError(NewsError):
    """The reader could not fetch a page from the proxy."""
