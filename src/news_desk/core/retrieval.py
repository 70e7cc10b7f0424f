from typing import List

import httpx

from ..config import settings
from ..errors import ApiError, EmptyResult, NewsFetchError
from ..models.news import Article
from ..tools.cache import NewsCache
from ..tools.mock_data import get_mock_news
from ..tools.newsapi_tool import fetch_news_newsapi
from ..logging_config import get_logger


logger = get_logger("core.retrieval")


async def fetch_news(
    query: str | None = "technology",
    category: str | None = None,
    page_size: int | None = None,
    *,
    cache: NewsCache,
    client: httpx.AsyncClient | None = None,
) -> List[Article]:
    """Return articles for a category or search term, with caching and fallback.

    1. Check the cache under ``category`` (or ``query`` when no category).
    2. Call NewsAPI.
    3. On any fetch failure, return the built-in mock set without caching it.
    4. On success, store the result in the cache.
    """
    cache_key = category or query or ""
    if page_size is None:
        page_size = settings.default_page_size

    cached = cache.get(cache_key)
    if cached is not None:
        logger.info("fetch_news_cache_hit", key=cache_key, results=len(cached))
        return cached

    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                articles = await fetch_news_newsapi(owned_client, query, category, page_size)
        else:
            articles = await fetch_news_newsapi(client, query, category, page_size)
    except NewsFetchError as exc:
        fallback = get_mock_news(cache_key)
        logger.warning(
            "fetch_news_fallback",
            key=cache_key,
            error=str(exc),
            error_type=type(exc).__name__,
            status_code=exc.status_code if isinstance(exc, ApiError) else None,
            results=len(fallback),
        )
        return fallback

    cache.put(cache_key, articles)
    logger.info(
        "fetch_news_fetched",
        key=cache_key,
        mode="category" if category else "search",
        results=len(articles),
    )
    return articles


async def load_category_articles(
    category: str,
    *,
    cache: NewsCache,
    client: httpx.AsyncClient | None = None,
) -> List[Article]:
    return await fetch_news(
        None, category, settings.category_page_size, cache=cache, client=client
    )


async def search_articles(
    term: str,
    *,
    cache: NewsCache,
    client: httpx.AsyncClient | None = None,
) -> List[Article]:
    return await fetch_news(term, None, settings.search_page_size, cache=cache, client=client)


def require_articles(articles: List[Article] | None, message: str) -> List[Article]:
    if not articles:
        raise EmptyResult(message)
    return articles
