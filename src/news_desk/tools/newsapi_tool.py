from typing import Any, Dict, List

import httpx
from pydantic import ValidationError

from ..config import settings
from ..errors import ApiError, MalformedResponse, NetworkFailure, NewsFetchError
from ..models.news import Article
from ..logging_config import get_logger


logger = get_logger("tools.newsapi")


_TOP_HEADLINES_PATH = "/top-headlines"
_EVERYTHING_PATH = "/everything"


def build_request(query: str | None, category: str | None, page_size: int) -> tuple[str, Dict[str, Any]]:
    """Return the endpoint URL and query parameters for one NewsAPI call.

    Category mode asks the headlines endpoint for US stories in that
    category; search mode asks the general endpoint for ``query`` sorted by
    publish date. The API key travels as a plain ``apiKey`` parameter.
    """

    base_url = settings.news_api_base_url.rstrip("/")
    if category:
        url = base_url + _TOP_HEADLINES_PATH
        params: Dict[str, Any] = {
            "country": settings.news_country,
            "category": category,
            "pageSize": page_size,
        }
    else:
        url = base_url + _EVERYTHING_PATH
        params = {
            "q": query or "",
            "pageSize": page_size,
            "sortBy": "publishedAt",
        }
    params["apiKey"] = settings.news_api_key
    return url, params


def parse_articles(data: Any) -> List[Article]:
    if not isinstance(data, dict) or not isinstance(data.get("articles"), list):
        raise MalformedResponse("Response body has no 'articles' list")
    articles: List[Article] = []
    for idx, item in enumerate(data["articles"]):
        try:
            articles.append(Article.model_validate(item))
        except ValidationError as exc:
            logger.warning("newsapi_article_skipped", index=idx, errors=exc.error_count())
    return articles


async def fetch_news_newsapi(
    client: httpx.AsyncClient,
    query: str | None = None,
    category: str | None = None,
    page_size: int = 10,
) -> List[Article]:
    """Fetch one page of articles from NewsAPI.

    Raises a ``NewsFetchError`` subclass on every failure; deciding what to do
    about it is left to the caller.
    """

    if not settings.news_api_key:
        raise NewsFetchError("NEWS_API_KEY is not configured in the environment.")

    url, params = build_request(query, category, page_size)
    try:
        response = await client.get(url, params=params)
    except httpx.DecodingError as exc:
        raise MalformedResponse(str(exc)) from exc
    except httpx.HTTPError as exc:
        raise NetworkFailure(str(exc)) from exc

    if not response.is_success:
        raise ApiError(response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        raise MalformedResponse("Response body is not JSON") from exc

    return parse_articles(data)
