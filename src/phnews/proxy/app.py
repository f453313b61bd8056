"""HTTP surface of the news proxy."""

import logging

from fastapi import APIRouter, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from phnews.config.factory import create_proxy
from phnews.config.models import PhnewsConfig
from phnews.data import FetchOptions
from phnews.errors import ConfigurationError, NewsError
from phnews.proxy.service import NewsProxy

logger = logging.getLogger(__name__)


def create_app(
    config: PhnewsConfig | None = None,
    *,
    proxy: NewsProxy | None = None,
    api_key: str | None = None,
) -> FastAPI:
    """Build the proxy application.

    When no proxy is given one is created from ``config``. If that fails
    because no API key is available the app still starts, and every news
    request answers 500 with a configuration error.

    Args:
        config: Root configuration (defaults apply when omitted).
        proxy: Pre-built proxy service, mainly for tests.
        api_key: NewsAPI key; falls back to the NEWSAPI_KEY env var.

    Returns:
        The FastAPI application.
    """
    config = config or PhnewsConfig()
    if proxy is None:
        try:
            proxy = create_proxy(config, api_key=api_key)
        except ValueError as e:
            logger.error(f"News proxy disabled: {e}")

    app = FastAPI(title="phnews proxy")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.proxy.cors_origins),
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": _validation_message(exc)})

    router = APIRouter(prefix=config.proxy.api_prefix)

    @router.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.options("/news/all")
    async def news_preflight() -> Response:
        return Response(status_code=200)

    @router.get("/news/all")
    async def news_all(
        page: int = Query(default=1, ge=1),
        search: str | None = None,
        categories: str | None = None,
    ) -> JSONResponse:
        try:
            if proxy is None:
                raise ConfigurationError()
            options = FetchOptions(page=page, search=search or None, category=categories or None)
            result = await proxy.get_news(options)
        except NewsError as e:
            return JSONResponse(status_code=e.status_code, content={"error": e.message})
        except Exception:
            logger.exception("Proxy error")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return JSONResponse(content=result.to_dict())

    app.include_router(router)
    return app


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation details into one line."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ()) if loc != "query")
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    if not parts:
        return "Invalid request"
    return "Invalid request: " + "; ".join(parts)
