"""News fetchers: NewsData.io and NewsAPI.org."""

from __future__ import annotations

import logging

from requests import Session

from safemap.cache import NEWS_TTL, cache_get, cache_key, cache_put
from safemap.http import create_session, get_json
from safemap.models import NewsArticle
from safemap.normalize import article_from_newsapi, article_from_newsdata, to_iso2

logger = logging.getLogger(__name__)

NEWSDATA_URL = "https://newsdata.io/api/1/news"
NEWSAPI_HEADLINES_URL = "https://newsapi.org/v2/top-headlines"
NEWSAPI_EVERYTHING_URL = "https://newsapi.org/v2/everything"

ALERT_QUERY = "disaster OR flood OR earthquake OR hurricane OR conflict OR tsunami OR wildfire"

# Shown when no provider returned anything.  Never fed to sentiment scoring.
PLACEHOLDER_ARTICLES: tuple[NewsArticle, ...] = (
    NewsArticle(
        title="Global Safety Index Released",
        description=(
            "The annual global safety report highlights improvements in urban "
            "security and disaster preparedness worldwide."
        ),
        source="SafeMap Intelligence",
        url="https://safemap.example.com",
        published_at="2024-01-01T12:00:00Z",
    ),
    NewsArticle(
        title="Weather Advisories Updated",
        description=(
            "Meteorological departments have updated regional weather advisories "
            "ahead of the changing season."
        ),
        source="Global Weather Network",
        url="https://safemap.example.com/weather",
        published_at="2024-01-01T14:00:00Z",
    ),
)


def _cached_get(
    session: Session,
    url: str,
    params: dict[str, str | int],
    timeout: int,
    key: str,
    list_field: str,
    use_cache: bool,
    label: str,
) -> list[dict]:
    """Return the provider's article list, from cache when fresh.

    Only non-empty results are cached so a provider outage is not pinned.
    """
    if use_cache:
        cached = cache_get(key, NEWS_TTL)
        if cached is not None:
            return cached

    payload = get_json(session, url, params=params, timeout=timeout, label=label)
    if not isinstance(payload, dict):
        return []
    items = [i for i in payload.get(list_field) or [] if isinstance(i, dict)]
    if items and use_cache:
        cache_put(key, items)
    return items


def fetch_news(
    country: str,
    query: str = "safety",
    news_data_key: str = "",
    news_api_key: str = "",
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[NewsArticle]:
    """Fetch live articles for a country, newest first.

    Tries NewsData.io, then NewsAPI top headlines.  Returns an empty list
    when neither is configured or both come back empty; callers decide
    whether to show PLACEHOLDER_ARTICLES.
    """
    if session is None:
        session = create_session()
    cc = to_iso2(country).lower()

    if news_data_key:
        items = _cached_get(
            session,
            NEWSDATA_URL,
            {"apikey": news_data_key, "country": cc, "q": query},
            timeout,
            cache_key("newsdata", cc, query),
            "results",
            use_cache,
            "NewsData",
        )
        if items:
            logger.info("NewsData: %d articles for %s", len(items), cc)
            return [article_from_newsdata(i) for i in items]

    if news_api_key:
        items = _cached_get(
            session,
            NEWSAPI_HEADLINES_URL,
            {"country": cc, "q": query, "apiKey": news_api_key},
            timeout,
            cache_key("headlines", cc, query),
            "articles",
            use_cache,
            "NewsAPI headlines",
        )
        if items:
            logger.info("NewsAPI: %d headlines for %s", len(items), cc)
            return [article_from_newsapi(i) for i in items]

    logger.info("No live news for %s", cc)
    return []


def search_news(
    query: str,
    news_api_key: str = "",
    page_size: int = 5,
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[NewsArticle] | None:
    """Search NewsAPI ``everything`` sorted by publish date.

    Returns None when no key is configured or the request failed, so the
    caller can tell "nothing found" from "no feed".
    """
    if not news_api_key:
        return None
    if session is None:
        session = create_session()

    key = cache_key("everything", query, str(page_size))
    if use_cache:
        cached = cache_get(key, NEWS_TTL)
        if cached is not None:
            return [article_from_newsapi(i) for i in cached]

    payload = get_json(
        session,
        NEWSAPI_EVERYTHING_URL,
        params={
            "q": query,
            "sortBy": "publishedAt",
            "language": "en",
            "pageSize": page_size,
            "apiKey": news_api_key,
        },
        timeout=timeout,
        label="NewsAPI everything",
    )
    if not isinstance(payload, dict):
        return None

    items = [i for i in payload.get("articles") or [] if isinstance(i, dict)]
    if use_cache:
        cache_put(key, items)
    return [article_from_newsapi(i) for i in items]


def fetch_alert_articles(
    country: str | None = None,
    news_api_key: str = "",
    timeout: int = 10,
    session: Session | None = None,
    use_cache: bool = True,
) -> list[NewsArticle] | None:
    """Fetch the disaster/conflict news stream behind the alerts feed."""
    query = ALERT_QUERY
    if country:
        query = f"({query}) AND {country}"
    return search_news(
        query,
        news_api_key=news_api_key,
        page_size=20,
        timeout=timeout,
        session=session,
        use_cache=use_cache,
    )
