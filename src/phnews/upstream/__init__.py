from phnews.upstream.base import NewsFetcher
from phnews.upstream.newsapi import NewsAPIClient, build_query

__all__ = ["NewsAPIClient", "NewsFetcher", "build_query"]
