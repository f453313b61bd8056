"""CLI for the phnews proxy and reader."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

import httpx
import uvicorn
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from phnews.config import (
    PhnewsConfig,
    create_favorites_store,
    create_proxy,
    get_default_config_path,
    load_config,
)
from phnews.data import FetchOptions
from phnews.errors import NewsError
from phnews.proxy.app import create_app

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path
    host: str | None = None
    port: int | None = None
    page: int = Field(default=1, ge=1)
    search: str | None = None
    category: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def serve(args: CLIArgs, config: PhnewsConfig) -> int:
    """Run the proxy. Refuses to start without an API key."""
    api_key = os.environ.get("NEWSAPI_KEY")
    if not api_key:
        logger.error("ERROR: NEWSAPI_KEY not set in environment or .env file")
        return 1

    app = create_app(config, api_key=api_key)
    host = args.host or config.proxy.host
    port = args.port or config.proxy.port
    logger.info(f"Server running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=config.logging.level.lower())
    return 0


async def headlines(args: CLIArgs, config: PhnewsConfig) -> int:
    """Fetch one filtered page directly from NewsAPI and print it."""
    if args.category and args.category not in config.reader.categories:
        logger.error(f"Unknown category: {args.category}")
        return 1
    try:
        proxy = create_proxy(config)
    except ValueError as e:
        logger.error(str(e))
        return 1
    options = FetchOptions(page=args.page, search=args.search, category=args.category)
    try:
        page = await proxy.get_news(options)
    except NewsError as e:
        logger.error(e.message)
        return 1
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Failed to fetch news: {e}")
        return 1

    print(f"\nFound {page.total_results} articles from Philippine sources:\n")
    for i, article in enumerate(page.articles, 1):
        logger.info(f"{i}. {article.title}")
        logger.info(f"   Source: {article.source.name}")
        logger.info(f"   URL: {article.url}")
        if article.published_at:
            logger.info(f"   Published: {article.published_at}")
    return 0


def favorites(args: CLIArgs, config: PhnewsConfig) -> int:
    """Print saved favorites, oldest first."""
    saved = create_favorites_store(config.reader).list()
    if not saved:
        print("No favorites yet.")
        return 0
    for i, fav in enumerate(saved, 1):
        print(f"{i}. {fav.article.title}")
        print(f"   {fav.url}")
    return 0


def run(args: CLIArgs) -> int:
    """Dispatch a validated command."""
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level.upper())

    if args.command == "serve":
        return serve(args, config)
    if args.command == "headlines":
        return asyncio.run(headlines(args, config))
    if args.command == "favorites":
        return favorites(args, config)
    msg = f"Unknown command: {args.command}"
    raise ValueError(msg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Philippine news proxy and reader.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: bundled configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the news proxy")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    headlines_parser = subparsers.add_parser("headlines", help="Print one page of headlines")
    headlines_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    headlines_parser.add_argument("--search", type=str, default=None, help="Search term")
    headlines_parser.add_argument("--category", type=str, default=None, help="Category")

    subparsers.add_parser("favorites", help="List saved favorites")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = build_parser().parse_args(argv)
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            host=getattr(ns, "host", None),
            port=getattr(ns, "port", None),
            page=getattr(ns, "page", 1),
            search=getattr(ns, "search", None),
            category=getattr(ns, "category", None),
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        sys.exit(130)
